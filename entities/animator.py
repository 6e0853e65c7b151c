# entities/animator.py
from dataclasses import dataclass
from enum import Enum


class State(Enum):
    IDLE = "idle"
    MOVING = "moving"
    JUMPING = "jumping"


class MovingState(Enum):
    WALKING = "walking"
    RUNNING = "running"


@dataclass(frozen=True)
class AnimatorParams:
    speed: float = 0.0
    jump: bool = False
    direction: float = 0.0


class Animator:
    """
    Maps the player's state to animation parameters.
    Nothing is blended here; the last computed params are kept for whoever draws.
    """

    def __init__(self):
        self.moving_state = MovingState.WALKING
        self.params = AnimatorParams()

    def update(self, state: State, direction: float = 0.0) -> AnimatorParams:
        if state is State.MOVING:
            speed = 1.0 if self.moving_state is MovingState.RUNNING else 0.5
            self.params = AnimatorParams(speed, False, direction)
        elif state is State.JUMPING:
            self.params = AnimatorParams(0.0, True, 0.0)
        else:
            self.params = AnimatorParams(0.0, False, direction)
        return self.params
