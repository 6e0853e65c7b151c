# world/gravity_zone.py
import logging

import pygame

from core.settings import ZONE_COLOR


logger = logging.getLogger(__name__)


class GravityZone:
    """
    Trigger area: the frame a player enters it, gravity is turned to `angle`
    (degrees from straight down, snapped to the four axis directions).
    Staying inside does nothing; leaving and re-entering triggers again.
    """

    def __init__(self, rect, angle: float):
        self.rect = pygame.Rect(rect)
        self.angle = float(angle)
        self._inside = set()

    def update(self, player) -> bool:
        inside = self.rect.colliderect(player.rect)
        pid = id(player)
        if not inside:
            self._inside.discard(pid)
            return False
        if pid in self._inside:
            return False

        self._inside.add(pid)
        player.reorient(self.angle)
        logger.debug("gravity zone %s entered, angle %.0f", tuple(self.rect), self.angle)
        return True

    def draw(self, surf: pygame.Surface):
        pygame.draw.rect(surf, ZONE_COLOR, self.rect, 2)
        # arrow along the zone's gravity
        c = pygame.Vector2(self.rect.center)
        d = pygame.Vector2(0, 1).rotate(self.angle) * (min(self.rect.size) * 0.35)
        pygame.draw.line(surf, ZONE_COLOR, c - d, c + d, 2)
        pygame.draw.circle(surf, ZONE_COLOR, (int(c.x + d.x), int(c.y + d.y)), 4)
