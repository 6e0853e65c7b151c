# world/level.py
from typing import Optional

import pygame

from core.settings import ARENA_COLOR, ARENA_MARGIN, HEIGHT, WIDTH
from entities.player import Player
from world.gravity_zone import GravityZone
from world.level_defs import LEVEL


class Level:
    def __init__(self, level_def: Optional[dict] = None,
                 bounds: Optional[pygame.Rect] = None):
        level_def = LEVEL if level_def is None else level_def

        if bounds is None:
            bounds = pygame.Rect(ARENA_MARGIN, ARENA_MARGIN,
                                 WIDTH - ARENA_MARGIN * 2, HEIGHT - ARENA_MARGIN * 2)
        self.bounds = pygame.Rect(bounds)

        sx, sy = level_def.get("spawn", self.bounds.center)
        self.player = Player(sx, sy)

        self.zones = [GravityZone(z["rect"], z.get("angle", 0)) for z in level_def.get("zones", [])]

    def update(self, dt: float):
        self.player.update(dt, self.bounds)
        for zone in self.zones:
            zone.update(self.player)

    def draw(self, surf: pygame.Surface):
        pygame.draw.rect(surf, ARENA_COLOR, self.bounds, 3)
        for zone in self.zones:
            zone.draw(surf)
        self.player.draw(surf)
