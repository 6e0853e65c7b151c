# core/game.py
import logging

import pygame

from core.controls import build_dispatcher
from core.input import Keyboard
from core.settings import TITLE, WIDTH, HEIGHT, FPS, MAX_DT, BG_COLOR, PUSHES_INTERVAL
from world.binding_defs import BINDINGS, KEYMAP
from world.level import Level
from ui.hud import HUD


logger = logging.getLogger(__name__)


class Game:
    def __init__(self, pushes_interval: float = PUSHES_INTERVAL, fps: int = FPS):
        pygame.init()
        pygame.display.set_caption(TITLE)

        self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        self.clock = pygame.time.Clock()
        self.fps = fps
        self.running = True

        self.keyboard = Keyboard()
        self.level = Level()
        self.dispatcher = build_dispatcher(
            self.level.player, BINDINGS, KEYMAP, self.keyboard, pushes_interval,
        )
        self.hud = HUD()

    def run(self):
        logger.info("starting, pushes interval %.3fs", self.dispatcher.pushes_interval)
        while self.running:
            dt = self.clock.tick(self.fps) / 1000.0
            if dt > MAX_DT:
                dt = MAX_DT

            self._handle_events()
            self.keyboard.update()

            try:
                self.dispatcher.tick(dt)
            except Exception:
                # rest of this frame's input is dropped; keep running
                logger.exception("input callback failed")

            self.level.update(dt)

            self.screen.fill(BG_COLOR)
            self.level.draw(self.screen)
            self.hud.draw(self.screen, self.level, self.dispatcher)
            pygame.display.flip()

        logger.info("stopped")
        pygame.quit()

    def _handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                key = self.hud.button_at(event.pos)
                if key is not None:
                    self.dispatcher.inject(key)
