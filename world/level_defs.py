"""
Arena layout lives here so it can be edited without touching Level code.

Zone rects are (x, y, w, h) in screen pixels; "angle" is the gravity direction
in degrees away from straight down (90 = left wall, 180 = ceiling, 270 = right wall).
"""

LEVEL = {
    "spawn": (200, 460),
    "zones": [
        {"rect": (80, 380, 60, 100), "angle": 90},
        {"rect": (820, 60, 60, 100), "angle": 270},
        {"rect": (440, 60, 80, 60), "angle": 180},
        {"rect": (440, 430, 80, 60), "angle": 0},
    ],
}
