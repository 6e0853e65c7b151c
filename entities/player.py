# entities/player.py
import pygame

from core.settings import (
    GRAVITY, JUMP_SPEED, MAX_FALL_SPEED, PLAYER_COLOR, PLAYER_SIZE,
    RUNNING_SPEED, WALKING_SPEED,
)
from core.utils import cardinal, clamp
from entities.animator import Animator, MovingState, State


class Player:
    """
    Locomotion target for the input bindings.
    The handlers (walk_forward, run_forward, ...) only record intent for this frame;
    update(dt, bounds) applies it, then drops back to IDLE unless a handler
    sets the state again next frame.
    - "forward" is along the facing side of the axis perpendicular to gravity
    - gravity can point any of the four axis directions (see reorient)
    - ground is the arena edge in the gravity direction
    """

    def __init__(self, x: float, y: float):
        self.size = PLAYER_SIZE
        self.spawn = pygame.Vector2(x, y)
        self.pos = pygame.Vector2(x, y)
        self.rect = pygame.Rect(0, 0, self.size, self.size)
        self.rect.center = (int(x), int(y))

        self.facing = 1
        self.gravity_dir = pygame.Vector2(0, 1)
        self.fall_speed = 0.0          # along gravity_dir, negative while rising
        self.on_ground = False

        self.walking_speed = WALKING_SPEED
        self.running_speed = RUNNING_SPEED
        self.gravity = GRAVITY
        self.max_fall = MAX_FALL_SPEED
        self.jump_speed = JUMP_SPEED

        self.state = State.IDLE
        self.animator = Animator()

        # per-frame intent
        self._move = 0.0
        self._turn = 0.0

    @property
    def forward(self) -> pygame.Vector2:
        return self.gravity_dir.rotate(-90) * self.facing

    # -------------------------
    # Bound handlers
    # -------------------------
    def walk_forward(self):
        self._move = self.walking_speed
        self.state = State.MOVING
        self.animator.moving_state = MovingState.WALKING

    def run_forward(self):
        self._move = self.running_speed
        self.state = State.MOVING
        self.animator.moving_state = MovingState.RUNNING

    def walk_backward(self):
        self._move = -self.walking_speed
        self.state = State.MOVING
        self.animator.moving_state = MovingState.WALKING

    def turn_left(self):
        self.facing = -1
        self._turn = -1.0

    def turn_right(self):
        self.facing = 1
        self._turn = 1.0

    def turn_around(self):
        self.facing = -self.facing
        self._turn = float(self.facing)

    def jump(self):
        if not self.on_ground:
            return
        self.fall_speed = -self.jump_speed
        self.on_ground = False
        self.state = State.JUMPING

    def respawn(self):
        self.pos.update(self.spawn)
        self.reorient(0)
        self.fall_speed = 0.0
        self.on_ground = False

    def reorient(self, angle: float):
        """Point gravity `angle` degrees away from straight down."""
        new_dir = cardinal(pygame.Vector2(0, 1).rotate(angle))
        if new_dir == self.gravity_dir:
            return
        self.gravity_dir = new_dir
        self.fall_speed = 0.0
        self.on_ground = False

    # -------------------------
    # Frame update
    # -------------------------
    def update(self, dt: float, bounds: pygame.Rect):
        current = self.state
        if not self.on_ground or self.fall_speed < 0.0:
            current = State.JUMPING

        # walk / run
        if self._move:
            self.pos += self.forward * (self._move * dt)

        # gravity
        self.fall_speed = min(self.max_fall, self.fall_speed + self.gravity * dt)
        self.pos += self.gravity_dir * (self.fall_speed * dt)

        self._snap_to_bounds(bounds)

        self.animator.update(current, self._turn)

        self.state = State.IDLE
        self._move = 0.0
        self._turn = 0.0

    def _snap_to_bounds(self, bounds: pygame.Rect):
        half = self.size * 0.5
        lo_x, hi_x = bounds.left + half, bounds.right - half
        lo_y, hi_y = bounds.top + half, bounds.bottom - half

        x = clamp(self.pos.x, lo_x, hi_x)
        y = clamp(self.pos.y, lo_y, hi_y)

        g = self.gravity_dir
        grounded = (
            (g.y > 0 and y >= hi_y) or (g.y < 0 and y <= lo_y)
            or (g.x > 0 and x >= hi_x) or (g.x < 0 and x <= lo_x)
        )

        self.pos.update(x, y)
        self.rect.center = (int(round(x)), int(round(y)))

        self.on_ground = grounded and self.fall_speed >= 0.0
        if self.on_ground:
            self.fall_speed = 0.0

    def draw(self, surf: pygame.Surface):
        pygame.draw.rect(surf, PLAYER_COLOR, self.rect)
        pygame.draw.rect(surf, (20, 20, 26), self.rect, 2)

        # facing marker
        tip = self.pos + self.forward * (self.size * 0.5)
        pygame.draw.line(surf, (255, 200, 80), self.pos, tip, 3)
