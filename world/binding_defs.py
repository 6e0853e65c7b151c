"""
Default control bindings, as plain data (see ActionRegistry.from_defs).

W      tap and hold: walk forward; double-tap and hold: run (both fire early,
       so walking starts on the first press and running on the second)
S      hold: walk backward; double-tap: turn around once the window closes
A / D  face left / right
Space  jump; triple-tap: return to spawn after the window closes
"""
import pygame

BINDINGS = [
    {"key": "W", "count": 1, "trigger": "hold", "immediate": True, "handler": "walk_forward"},
    {"key": "W", "count": 2, "trigger": "hold", "immediate": True, "handler": "run_forward"},

    {"key": "S", "trigger": "hold", "handler": "walk_backward"},
    {"key": "S", "count": 2, "trigger": "press", "handler": "turn_around"},

    {"key": "A", "trigger": "press", "handler": "turn_left"},
    {"key": "D", "trigger": "press", "handler": "turn_right"},

    {"key": "Space", "trigger": "press", "handler": "jump"},
    {"key": "Space", "count": 3, "trigger": "press", "handler": "respawn"},
]

KEYMAP = {
    "W": (pygame.K_w, pygame.K_UP),
    "S": (pygame.K_s, pygame.K_DOWN),
    "A": (pygame.K_a, pygame.K_LEFT),
    "D": (pygame.K_d, pygame.K_RIGHT),
    "Space": (pygame.K_SPACE,),
}
