"""Window, input dispatch and the frame loop."""
from __future__ import annotations

import asyncio
import logging
import os

import pygame

from .config import FPS, GameSettings
from .drawing import DragGesture
from .playfield import Playfield
from .renderer import Renderer
from .sound import SoundManager
from .stars import StarField

logger = logging.getLogger(__name__)

LEFT_BUTTON = 1
RIGHT_BUTTON = 3


class NotefallGame:
    def __init__(self, settings: GameSettings = None):
        pygame.init()
        pygame.display.set_caption("NOTEFALL")

        self.settings = settings or GameSettings()
        self.screen = pygame.display.set_mode((self.settings.width, self.settings.height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()

        self.sound_manager = SoundManager()
        self.playfield = Playfield(self.settings, self.sound_manager)
        self.gesture = DragGesture()
        self.stars = StarField()
        self.stars.regenerate(self.settings.width, self.settings.height)
        self.renderer = Renderer(self.screen)

        self.playfield.start()
        self.running = True

    def resize(self, width, height):
        logger.info("Window resized. Adjusting stars and ground...")
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        self.renderer.set_screen(self.screen)
        self.stars.regenerate(width, height)
        self.playfield.resize(width, height)

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.resize(event.w, event.h)

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.unicode:
                    self.playfield.select_platform_type(event.unicode)

            elif event.type == pygame.MOUSEBUTTONDOWN:
                if event.button == LEFT_BUTTON:
                    # Audio starts on the first press
                    self.sound_manager.initialize()
                    self.gesture.begin(event.pos)
                elif event.button == RIGHT_BUTTON:
                    self.playfield.delete_platform_at(event.pos)

            elif event.type == pygame.MOUSEMOTION:
                self.gesture.update(event.pos)

            elif event.type == pygame.MOUSEBUTTONUP:
                if event.button == LEFT_BUTTON and self.gesture.active:
                    request = self.gesture.end(event.pos, self.playfield.state.selected_platform_type)
                    self.playfield.place_platform(request)

    def update(self, dt):
        self.playfield.update(dt)
        self.playfield.cleanup_offscreen()

    def draw(self):
        self.renderer.draw(self.playfield, self.stars, self.gesture)
        pygame.display.flip()

    async def run(self):
        logger.info("Starting loop...")
        while self.running:
            dt = 1.0 / FPS

            self.handle_events()
            self.update(dt)
            self.draw()
            self.clock.tick(FPS)
            await asyncio.sleep(0)

        pygame.quit()


def main():
    logging.basicConfig(
        level=os.environ.get("NOTEFALL_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    game = NotefallGame()
    asyncio.run(game.run())
