# core/dispatcher.py
import logging
from typing import List

from core.actions import Trigger
from core.bindings import ActionRegistry
from core.errors import InvalidBindingError
from core.input import KeyStateTracker
from core.press_window import PressTimer, PressWindows
from core.running import RunningActionSet
from core.settings import PUSHES_INTERVAL


logger = logging.getLogger(__name__)


class Dispatcher:
    """
    Turns per-frame key states into action callbacks.

    tick(dt) runs, in this order:
      1. tracker update (sources + injections)
      2. simple actions from this frame's edges
      3. press counting + eager (immediate) multi-tap firing
      4. window aging; a closed window drops every running entry of its key
         and queues the action bound to the final count, if any
      5. running entries invoked / pruned

    Owns all mutable input state; outside code only injects presses.
    """

    def __init__(self, registry: ActionRegistry, pushes_interval: float = PUSHES_INTERVAL,
                 tracker: KeyStateTracker = None):
        if pushes_interval <= 0:
            raise InvalidBindingError(f"pushes interval must be > 0, got {pushes_interval}")

        registry.freeze()
        self.registry = registry
        self.tracker = tracker if tracker is not None else KeyStateTracker(registry.keys())
        for key in registry.keys():
            # fail at setup rather than on the first frame
            self.tracker.slot(key)

        self.windows = PressWindows(pushes_interval)
        self.running = RunningActionSet()
        self._simple = registry.simple_actions
        self._tracked = registry.tracked_keys()

    @property
    def pushes_interval(self) -> float:
        return self.windows.interval

    def inject(self, key: str):
        self.tracker.inject(key)

    def pending(self) -> List[PressTimer]:
        return [PressTimer(t.key, t.count, t.elapsed) for t in self.windows.timers()]

    def reset(self):
        self.windows.clear()
        self.running.clear()
        self.tracker.reset()

    def tick(self, dt: float):
        if dt < 0:
            raise ValueError(f"frame time must be >= 0, got {dt}")

        tracker = self.tracker
        tracker.update()

        # simple actions
        for action in self._simple:
            trigger = action.trigger
            if trigger is Trigger.HOLD:
                fire = tracker.is_active(action.key)
            elif trigger is Trigger.PRESS:
                fire = tracker.pressed(action.key)
            else:
                fire = tracker.released(action.key)
            if fire:
                action.invoke()

        # press counting + eager firing
        for key in self._tracked:
            if not tracker.pressed(key):
                continue
            count = self.windows.press(key)
            logger.debug("%s pressed x%d", key, count)

            action = self.registry.multi_tap(key, count)
            if action is not None and action.immediate:
                logger.debug("%s x%d fires early", key, count)
                self.running.add(action)

        # window expiry
        for timer in self.windows.advance(dt):
            dropped = self.running.discard_key(timer.key)
            action = self.registry.multi_tap(timer.key, timer.count)
            if dropped:
                logger.debug("%s window closed, superseding %d running", timer.key, dropped)
            if action is None:
                logger.debug("%s x%d has no binding", timer.key, timer.count)
                continue
            logger.debug("%s x%d resolved (%s)", timer.key, timer.count, action.trigger.value)
            self.running.add(action)

        self.running.invoke(tracker)
