# core/controls.py
from typing import Dict, Iterable, Sequence

from core.bindings import ActionRegistry
from core.dispatcher import Dispatcher
from core.input import Keyboard
from core.settings import PUSHES_INTERVAL


def build_dispatcher(target, bindings: Iterable[dict], keymap: Dict[str, Sequence[int]],
                     keyboard: Keyboard, pushes_interval: float = PUSHES_INTERVAL) -> Dispatcher:
    """
    bindings -> registry (handlers are methods of `target`),
    keymap   -> one keyboard source per logical key.
    Keys in the keymap with no binding are ignored; bound keys with no
    keymap entry can still be driven through Dispatcher.inject().
    """
    registry = ActionRegistry.from_defs(bindings, target)
    dispatcher = Dispatcher(registry, pushes_interval)
    for key, codes in keymap.items():
        if key in dispatcher.tracker:
            dispatcher.tracker.bind_source(key, keyboard.source(*codes))
    return dispatcher
