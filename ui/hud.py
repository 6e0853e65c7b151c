# ui/hud.py
from typing import Optional

import pygame

from core.settings import HUD_COLOR, WIDTH


BUTTON_W = 64
BUTTON_H = 30


class HUD:
    """
    - Player state + animator params
    - Open press windows (key, count, time left)
    - On-screen buttons: clicking one injects its key for a frame
    """

    def __init__(self, buttons=("W", "S", "Space"), font_size: int = 18):
        pygame.font.init()
        fs = max(10, min(48, int(font_size)))
        self.font = pygame.font.SysFont("consolas", fs)

        self.buttons = []
        x = WIDTH - 14 - len(buttons) * (BUTTON_W + 6)
        for key in buttons:
            self.buttons.append((key, pygame.Rect(x, 8, BUTTON_W, BUTTON_H)))
            x += BUTTON_W + 6

    def button_at(self, pos) -> Optional[str]:
        for key, rect in self.buttons:
            if rect.collidepoint(pos):
                return key
        return None

    def draw(self, surf: pygame.Surface, level, dispatcher):
        p = level.player
        x = 14
        y = 10

        params = p.animator.params
        lines = [
            f"STATE {_state_label(params, p.animator.moving_state)}"
            f"  speed {params.speed:.1f}  jump {int(params.jump)}  dir {params.direction:+.0f}",
            f"GRAVITY ({p.gravity_dir.x:+.0f}, {p.gravity_dir.y:+.0f})  facing {p.facing:+d}",
        ]
        for t in dispatcher.pending():
            left = max(0.0, dispatcher.pushes_interval - t.elapsed)
            lines.append(f"{t.key} x{t.count}  {left * 1000:.0f} ms")

        for line in lines:
            surf.blit(self.font.render(line, True, HUD_COLOR), (x, y))
            y += 18

        for key, rect in self.buttons:
            held = key in dispatcher.tracker and dispatcher.tracker.is_active(key)
            pygame.draw.rect(surf, (80, 210, 120) if held else (40, 40, 55), rect)
            pygame.draw.rect(surf, (230, 230, 240), rect, 2)
            t = self.font.render(key, True, HUD_COLOR)
            surf.blit(t, t.get_rect(center=rect.center))


def _state_label(params, moving_state) -> str:
    if params.jump:
        return "jumping"
    if params.speed:
        return moving_state.value
    return "idle"
