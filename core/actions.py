# core/actions.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Tuple, Union

from core.errors import InvalidBindingError


Callback = Callable[[], None]


class Trigger(Enum):
    HOLD = "hold"
    PRESS = "press"
    RELEASE = "release"

    @classmethod
    def parse(cls, value) -> "Trigger":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise InvalidBindingError(f"unknown trigger: {value!r}") from None


@dataclass(frozen=True)
class SimpleAction:
    """
    Fires straight from the key edges of the current frame:
    - HOLD every frame the key is active
    - PRESS on the false->true edge
    - RELEASE on the true->false edge
    """
    key: str
    trigger: Trigger
    callbacks: Tuple[Callback, ...] = ()

    def invoke(self):
        for cb in self.callbacks:
            cb()


@dataclass(frozen=True)
class MultiTapAction:
    """
    Bound to the N-th press of a key inside one press window.
    `immediate` actions also fire as soon as the count is reached;
    every matching action fires again when the window closes.
    """
    key: str
    count: int
    trigger: Trigger
    immediate: bool = False
    callbacks: Tuple[Callback, ...] = ()

    def invoke(self):
        for cb in self.callbacks:
            cb()


Action = Union[SimpleAction, MultiTapAction]


@dataclass(eq=False)
class RunningAction:
    # eq=False: two eager firings of the same action are separate entries
    action: Action

    @property
    def key(self) -> str:
        return self.action.key

    @property
    def trigger(self) -> Trigger:
        return self.action.trigger
