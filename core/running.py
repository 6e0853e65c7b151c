# core/running.py
from typing import List

from core.actions import Action, RunningAction, Trigger


class RunningActionSet:
    """
    Resolved actions waiting to be invoked, in the order they were added.
    Entries are not deduplicated: the same action can run more than once.
    """

    def __init__(self):
        self._entries: List[RunningAction] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(list(self._entries))

    def add(self, action: Action) -> RunningAction:
        running = RunningAction(action)
        self._entries.append(running)
        return running

    def discard_key(self, key: str) -> int:
        kept = [r for r in self._entries if r.key != key]
        dropped = len(self._entries) - len(kept)
        self._entries = kept
        return dropped

    def clear(self):
        self._entries.clear()

    def invoke(self, tracker):
        """
        One invocation pass:
        - HOLD runs while the key is active, removed the first frame it is not
        - PRESS runs once and is removed
        - RELEASE waits for a release edge seen during a pass, then runs once
        A callback error propagates; entries not reached yet stay queued.
        """
        pending = self._entries
        self._entries = []
        i = 0
        try:
            while i < len(pending):
                running = pending[i]
                i += 1
                trigger = running.trigger

                if trigger is Trigger.HOLD:
                    if not tracker.is_active(running.key):
                        continue
                    self._entries.append(running)
                    running.action.invoke()

                elif trigger is Trigger.PRESS:
                    running.action.invoke()

                elif trigger is Trigger.RELEASE:
                    if not tracker.released(running.key):
                        self._entries.append(running)
                        continue
                    running.action.invoke()
        finally:
            if i < len(pending):
                self._entries.extend(pending[i:])
