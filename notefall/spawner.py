"""Time-driven creation of balls and targets."""
from __future__ import annotations

import logging
import random

from .bodies import BodyRegistry, make_ball, make_target
from .config import (
    BALL_RADIUS,
    BALL_SPAWN_JITTER,
    TARGET_BAND_BOTTOM_OFFSET,
    TARGET_BAND_TOP,
    TARGET_RADIUS,
    GameSettings,
)
from .scheduler import Scheduler

logger = logging.getLogger(__name__)


class Spawner:
    def __init__(self, registry: BodyRegistry, scheduler: Scheduler, settings: GameSettings,
                 rng: random.Random = None):
        self.registry = registry
        self.scheduler = scheduler
        self.settings = settings
        self.rng = rng or random.Random()
        self.width = settings.width
        self.height = settings.height

    def resize(self, width, height):
        self.width = width
        self.height = height

    def start(self):
        self.scheduler.call_every(self.settings.ball_spawn_interval, self.spawn_ball)
        self.spawn_target()

    def spawn_ball(self):
        x = self.width / 2 + (self.rng.random() - 0.5) * 2 * BALL_SPAWN_JITTER
        y = -BALL_RADIUS * 2
        shape, info = make_ball((x, y))
        self.registry.add(shape, info)
        logger.debug("Spawned ball at %.1f, %.1f", x, y)
        return shape

    def target_bounds(self):
        """Rectangle ``(x_min, x_max, y_min, y_max)`` new targets are placed in."""
        margin = TARGET_RADIUS * 2
        return (
            margin,
            self.width - margin,
            self.height * TARGET_BAND_TOP,
            self.height - TARGET_BAND_BOTTOM_OFFSET,
        )

    def spawn_target(self):
        x_min, x_max, y_min, y_max = self.target_bounds()
        x = self.rng.random() * (x_max - x_min) + x_min
        y = self.rng.random() * (y_max - y_min) + y_min
        shape, info = make_target((x, y))
        self.registry.add(shape, info)
        logger.info("Spawned target at %.1f, %.1f", x, y)
        return shape

    def schedule_target_respawn(self):
        # Each call yields its own target; overlapping hits are not merged.
        self.scheduler.call_later(self.settings.target_respawn_delay, self.spawn_target)
