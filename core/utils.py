# core/utils.py
import pygame


def clamp(value: float, lo: float, hi: float) -> float:
    return lo if value < lo else hi if value > hi else value


def cardinal(vec: pygame.Vector2) -> pygame.Vector2:
    """Snap a direction to the nearest of the four axis directions."""
    if abs(vec.x) > abs(vec.y):
        return pygame.Vector2(1 if vec.x > 0 else -1, 0)
    return pygame.Vector2(0, 1 if vec.y >= 0 else -1)
