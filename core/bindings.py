# core/bindings.py
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from core.actions import Callback, MultiTapAction, SimpleAction, Trigger
from core.errors import AmbiguousBindingError, InvalidBindingError, RegistryFrozenError


logger = logging.getLogger(__name__)


class ActionRegistry:
    """
    Static binding table, filled before the first frame.
    - simple actions keep registration order (that is their dispatch order)
    - multi-tap actions are indexed by (key, count); a duplicate pair is rejected
    - freeze() is called by the Dispatcher; later registrations raise
    """

    def __init__(self):
        self._simple: List[SimpleAction] = []
        self._multi: Dict[Tuple[str, int], MultiTapAction] = {}
        self._keys: Dict[str, None] = {}
        self._tracked: Dict[str, None] = {}
        self.frozen = False

    # -------------------------
    # Registration
    # -------------------------
    def _check_open(self):
        if self.frozen:
            raise RegistryFrozenError("bindings cannot change once a dispatcher is running")

    def add_simple(self, key: str, trigger, *callbacks: Callback) -> SimpleAction:
        self._check_open()
        action = SimpleAction(key, Trigger.parse(trigger), tuple(callbacks))
        self._simple.append(action)
        self._keys.setdefault(key)
        return action

    def add_multi_tap(self, key: str, count: int, trigger, *callbacks: Callback,
                      immediate: bool = False) -> MultiTapAction:
        self._check_open()
        count = int(count)
        if count < 1:
            raise InvalidBindingError(f"press count for {key!r} must be >= 1, got {count}")
        if (key, count) in self._multi:
            raise AmbiguousBindingError(key, count)

        action = MultiTapAction(key, count, Trigger.parse(trigger), bool(immediate), tuple(callbacks))
        self._multi[(key, count)] = action
        self._keys.setdefault(key)
        self._tracked.setdefault(key)
        return action

    def freeze(self):
        self.frozen = True

    # -------------------------
    # Lookup
    # -------------------------
    def keys(self) -> Tuple[str, ...]:
        return tuple(self._keys)

    def tracked_keys(self) -> Tuple[str, ...]:
        return tuple(self._tracked)

    @property
    def simple_actions(self) -> Tuple[SimpleAction, ...]:
        return tuple(self._simple)

    @property
    def multi_tap_actions(self) -> Tuple[MultiTapAction, ...]:
        return tuple(self._multi.values())

    def multi_tap(self, key: str, count: int) -> Optional[MultiTapAction]:
        return self._multi.get((key, count))

    # -------------------------
    # Declarative loading
    # -------------------------
    @classmethod
    def from_defs(cls, defs: Iterable[dict], target) -> "ActionRegistry":
        """
        Build a registry from plain dicts, handlers looked up by name on `target`:

          {"key": "W", "trigger": "hold", "handler": "walk_forward"}
          {"key": "W", "count": 2, "trigger": "hold", "immediate": True,
           "handler": ["run_forward"]}

        A dict with "count" becomes a multi-tap action, anything else a simple one.
        """
        reg = cls()
        for d in defs:
            try:
                key = d["key"]
                trigger = d["trigger"]
            except KeyError as exc:
                raise InvalidBindingError(f"binding {d!r} is missing {exc.args[0]!r}") from None

            names = d.get("handler", ())
            if isinstance(names, str):
                names = [names]
            callbacks = [_resolve_handler(target, n) for n in names]

            if "count" in d:
                reg.add_multi_tap(key, d["count"], trigger, *callbacks,
                                  immediate=d.get("immediate", False))
            else:
                reg.add_simple(key, trigger, *callbacks)

        logger.info(
            "loaded %d simple and %d multi-tap bindings over keys %s",
            len(reg._simple), len(reg._multi), ", ".join(reg.keys()),
        )
        return reg


def _resolve_handler(target, name: str) -> Callback:
    cb = getattr(target, name, None)
    if not callable(cb):
        raise InvalidBindingError(f"{type(target).__name__} has no handler {name!r}")
    return cb
