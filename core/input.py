# core/input.py
from typing import Callable, Dict, Iterable, List

import pygame

from core.errors import UnknownKeyError


Source = Callable[[], bool]


class Keyboard:
    """
    One pygame.key.get_pressed() snapshot per frame.
    source(*codes) hands out a callable that is True while any of the codes is down,
    so several physical keys can drive one logical key (e.g. W and UP).
    """

    def __init__(self):
        self._keys = None

    def update(self):
        self._keys = pygame.key.get_pressed()

    def is_down(self, *codes: int) -> bool:
        k = self._keys
        if k is None:
            return False
        return any(bool(k[c]) for c in codes)

    def source(self, *codes: int) -> Source:
        return lambda: self.is_down(*codes)


class KeyStateTracker:
    """
    Current and previous active state for a fixed set of named keys.
    - slots are assigned once at construction (name -> index)
    - each key is the OR of its bound sources and any injection since the last update()
    - pressed/released compare against the immediately prior frame only
    """

    def __init__(self, keys: Iterable[str]):
        self._slots: Dict[str, int] = {}
        for key in keys:
            if key not in self._slots:
                self._slots[key] = len(self._slots)

        n = len(self._slots)
        self._current: List[bool] = [False] * n
        self._previous: List[bool] = [False] * n
        self._injected: List[bool] = [False] * n
        self._sources: List[List[Source]] = [[] for _ in range(n)]

    @property
    def keys(self):
        return tuple(self._slots)

    def __contains__(self, key) -> bool:
        return key in self._slots

    def slot(self, key) -> int:
        try:
            return self._slots[key]
        except KeyError:
            raise UnknownKeyError(key) from None

    def bind_source(self, key: str, source: Source):
        self._sources[self.slot(key)].append(source)

    def inject(self, key: str):
        # active for exactly the frame produced by the next update()
        self._injected[self.slot(key)] = True

    def update(self):
        self._previous[:] = self._current
        for i, sources in enumerate(self._sources):
            active = self._injected[i]
            if not active:
                for src in sources:
                    if src():
                        active = True
                        break
            self._current[i] = active
            self._injected[i] = False

    def reset(self):
        n = len(self._slots)
        self._current[:] = [False] * n
        self._previous[:] = [False] * n
        self._injected[:] = [False] * n

    def is_active(self, key: str) -> bool:
        return self._current[self.slot(key)]

    def pressed(self, key: str) -> bool:
        i = self.slot(key)
        return self._current[i] and not self._previous[i]

    def released(self, key: str) -> bool:
        i = self.slot(key)
        return self._previous[i] and not self._current[i]
