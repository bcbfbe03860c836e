"""Per-frame drawing of the starfield, bodies and HUD."""
from __future__ import annotations

import pygame
import pymunk

from .config import COLOR_BG, COLOR_DEFAULT_BODY, COLOR_INDICATOR, COLOR_OUTLINE, COLOR_TEXT
from .drawing import DragGesture
from .platform_types import PlatformTypeDef
from .stars import StarField


class Renderer:
    def __init__(self, screen: pygame.Surface):
        self.screen = screen
        self.font = pygame.font.Font(None, 32)
        self.small_font = pygame.font.Font(None, 28)

    def set_screen(self, screen: pygame.Surface):
        self.screen = screen

    def draw(self, playfield, stars: StarField, gesture: DragGesture):
        self.screen.fill(COLOR_BG)
        stars.shimmer()
        self._draw_stars(stars)
        self._draw_bodies(playfield)
        self._draw_preview_line(gesture, playfield.selected_type)
        self._draw_score(playfield.score)
        self._draw_selected_type(playfield.selected_type)

    def _draw_stars(self, stars: StarField):
        for star in stars.stars:
            shade = int(255 * star.alpha)
            pygame.draw.circle(self.screen, (shade, shade, shade),
                               (int(star.x), int(star.y)), max(1, round(star.radius)))

    def _draw_bodies(self, playfield):
        size = self.screen.get_size()

        # Registry order, so later bodies always paint over earlier ones
        for shape, info in playfield.registry:
            color = getattr(info, 'color', COLOR_DEFAULT_BODY)
            opacity = getattr(info, 'opacity', 1.0)
            if opacity < 1.0:
                overlay = pygame.Surface(size, pygame.SRCALPHA)
                self._draw_shape(overlay, shape, (*color, int(255 * opacity)), (*COLOR_OUTLINE, 255))
                self.screen.blit(overlay, (0, 0))
            else:
                self._draw_shape(self.screen, shape, color, COLOR_OUTLINE)

    @staticmethod
    def _draw_shape(surface, shape, fill, outline):
        if isinstance(shape, pymunk.Circle):
            pos = shape.body.local_to_world(shape.offset)
            center = (int(pos.x), int(pos.y))
            pygame.draw.circle(surface, fill, center, int(shape.radius))
            pygame.draw.circle(surface, outline, center, int(shape.radius), 1)
        elif isinstance(shape, pymunk.Poly):
            points = [shape.body.local_to_world(v) for v in shape.get_vertices()]
            points = [(p.x, p.y) for p in points]
            pygame.draw.polygon(surface, fill, points)
            pygame.draw.polygon(surface, outline, points, 1)

    def _draw_preview_line(self, gesture: DragGesture, type_def: PlatformTypeDef):
        if not gesture.active or type_def is None:
            return
        pygame.draw.line(self.screen, type_def.color, gesture.start, gesture.current, 5)

    def _draw_score(self, score: int):
        text = self.font.render(f"Score: {score}", True, COLOR_TEXT)
        self.screen.blit(text, text.get_rect(topleft=(20, 20)))

    def _draw_selected_type(self, type_def: PlatformTypeDef):
        if type_def is None:
            return
        width = self.screen.get_width()
        text = self.small_font.render(f"Type: {type_def.key}", True, COLOR_INDICATOR)
        text_rect = text.get_rect(topright=(width - 20, 20))
        self.screen.blit(text, text_rect)

        icon_rect = pygame.Rect(0, 0, 36, 12)
        icon_rect.midright = (text_rect.left - 12, text_rect.centery)
        self._draw_type_icon(type_def, icon_rect)

    def _draw_type_icon(self, type_def: PlatformTypeDef, rect: pygame.Rect):
        color = type_def.color
        if type_def.is_plain:
            pygame.draw.rect(self.screen, color, rect.inflate(0, -4))
        elif type_def.is_accelerator:
            # Chevrons pointing along the boost direction
            for offset in (0, 12, 24):
                x = rect.left + offset
                pygame.draw.lines(self.screen, color, False,
                                  [(x, rect.top), (x + 8, rect.centery), (x, rect.bottom)], 3)
        elif type_def.is_temporary:
            icon = pygame.Surface(rect.size, pygame.SRCALPHA)
            segment = rect.width // type_def.max_hits
            for i in range(type_def.max_hits):
                alpha = int(255 * (1.0 - i / (type_def.max_hits + 1)))
                pygame.draw.rect(icon, (*color, alpha), (i * segment, 2, segment - 3, rect.height - 4))
            self.screen.blit(icon, rect)
