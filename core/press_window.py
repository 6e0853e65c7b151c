# core/press_window.py
from dataclasses import dataclass
from typing import Dict, List, Optional


@dataclass
class PressTimer:
    key: str
    count: int = 1
    elapsed: float = 0.0


class PressWindows:
    """
    One press counter per tracked key.
    - press() opens a window (count=1) or extends it (count+1, elapsed back to 0)
    - advance(dt) ages every open window and returns the ones that closed
    - a closed window is removed, so the next press starts again at count=1
    """

    def __init__(self, interval: float):
        self.interval = float(interval)
        self._timers: Dict[str, PressTimer] = {}

    def __len__(self) -> int:
        return len(self._timers)

    def __contains__(self, key) -> bool:
        return key in self._timers

    def get(self, key: str) -> Optional[PressTimer]:
        return self._timers.get(key)

    def timers(self) -> List[PressTimer]:
        return list(self._timers.values())

    def press(self, key: str) -> int:
        timer = self._timers.get(key)
        if timer is None:
            timer = PressTimer(key)
            self._timers[key] = timer
        else:
            timer.count += 1
            timer.elapsed = 0.0
        return timer.count

    def advance(self, dt: float) -> List[PressTimer]:
        expired = []
        for timer in self._timers.values():
            timer.elapsed += dt
            if timer.elapsed >= self.interval:
                expired.append(timer)

        for timer in expired:
            del self._timers[timer.key]
        return expired

    def clear(self):
        self._timers.clear()
