"""Shimmering starfield drawn behind the playfield."""
from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List

from .config import MAX_OPACITY, MIN_OPACITY, STAR_AREA_PER_STAR, STAR_MAX_RADIUS, STAR_MAX_SHIMMER


@dataclass
class Star:
    x: float
    y: float
    radius: float
    alpha: float
    delta_alpha: float


@dataclass
class StarField:
    """Decorative stars; never touches physics."""

    rng: random.Random = field(default_factory=random.Random)
    stars: List[Star] = field(default_factory=list)

    @staticmethod
    def star_count(width: int, height: int) -> int:
        return int(width * height // STAR_AREA_PER_STAR)

    def regenerate(self, width: int, height: int) -> None:
        rng = self.rng
        self.stars = [
            Star(
                x=rng.random() * width,
                y=rng.random() * height,
                radius=rng.random() * STAR_MAX_RADIUS,
                alpha=rng.random() * 0.5 + 0.5,
                delta_alpha=(rng.random() - 0.5) * 2 * STAR_MAX_SHIMMER,
            )
            for _ in range(self.star_count(width, height))
        ]

    def shimmer(self) -> None:
        for star in self.stars:
            star.alpha += star.delta_alpha
            if star.alpha <= MIN_OPACITY or star.alpha >= MAX_OPACITY:
                star.delta_alpha = -star.delta_alpha
            star.alpha = max(MIN_OPACITY, min(MAX_OPACITY, star.alpha))

    def __len__(self) -> int:
        return len(self.stars)


__all__ = ["Star", "StarField"]
