# core/settings.py

TITLE = "Multi-tap input playground"
WIDTH = 960
HEIGHT = 540
FPS = 60
MAX_DT = 0.05                 # clamp long frames (window drag, breakpoints)

# Input
PUSHES_INTERVAL = 0.25        # seconds after the last press that still count toward a combo

# Locomotion
WALKING_SPEED = 140.0         # px/s
RUNNING_SPEED = 420.0         # px/s
GRAVITY = 2200.0              # px/s^2 along the current gravity direction
MAX_FALL_SPEED = 1200.0       # px/s
JUMP_SPEED = 760.0            # px/s
PLAYER_SIZE = 28

# Arena
ARENA_MARGIN = 40

# Colors (R,G,B)
BG_COLOR = (18, 18, 24)
ARENA_COLOR = (70, 70, 88)
PLAYER_COLOR = (220, 220, 255)
ZONE_COLOR = (120, 190, 255)
HUD_COLOR = (245, 245, 255)
