"""Scoring, audio and platform wear in response to collisions.

The space's begin handlers only record :class:`CollisionPair` objects; the
reactor consumes them after each physics step, in the order they were
reported. Bodies can therefore be removed safely while reacting.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable

import pymunk
from pymunk import Vec2d

from .bodies import BodyKind, BodyRegistry, PlatformInfo, TargetInfo
from .config import (
    ACCELERATOR_FORCE_SCALE,
    FORCE_TO_IMPULSE,
    GROUND_NOTE,
    GROUND_NOTE_DURATION,
    GROUND_NOTE_VOLUME,
    MAX_IMPACT_SPEED,
    MAX_IMPACT_VOLUME,
    MAX_OPACITY,
    MIN_IMPACT_VOLUME,
    MIN_OPACITY,
    PLATFORM_HIT_POINTS,
    PLATFORM_NOTE_DURATION,
    TARGET_NOTE_DURATION,
    TARGET_NOTE_VOLUME,
    TEMPORARY_BASE_OPACITY,
    TEMPORARY_OPACITY_SPAN,
)
from .state import GameState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CollisionPair:
    """Two shapes that began touching, with their velocities at that moment."""

    shape_a: pymunk.Shape
    shape_b: pymunk.Shape
    velocity_a: Vec2d = Vec2d(0, 0)
    velocity_b: Vec2d = Vec2d(0, 0)

    @classmethod
    def from_arbiter(cls, arbiter: pymunk.Arbiter) -> "CollisionPair":
        shape_a, shape_b = arbiter.shapes
        return cls(shape_a, shape_b, shape_a.body.velocity, shape_b.body.velocity)


def impact_volume(vertical_speed: float) -> float:
    volume = MIN_IMPACT_VOLUME + (abs(vertical_speed) / MAX_IMPACT_SPEED) * (MAX_IMPACT_VOLUME - MIN_IMPACT_VOLUME)
    return min(MAX_IMPACT_VOLUME, max(MIN_IMPACT_VOLUME, volume))


def temporary_opacity(current_hits: int, max_hits: int) -> float:
    opacity = TEMPORARY_BASE_OPACITY - current_hits * (TEMPORARY_OPACITY_SPAN / max_hits)
    return min(MAX_OPACITY, max(MIN_OPACITY, opacity))


def accelerator_impulse(angle: float, boost_factor: float) -> Vec2d:
    magnitude = boost_factor * ACCELERATOR_FORCE_SCALE
    return Vec2d(math.cos(angle), math.sin(angle)) * magnitude * FORCE_TO_IMPULSE


class CollisionReactor:
    def __init__(self, registry: BodyRegistry, state: GameState, sound_manager=None, spawner=None):
        self.registry = registry
        self.state = state
        self.sound_manager = sound_manager
        self.spawner = spawner

    def _play(self, frequency, duration, volume):
        if self.sound_manager is not None and self.sound_manager.ready:
            self.sound_manager.play_note(frequency, duration, volume)

    def react(self, pairs: Iterable[CollisionPair]) -> int:
        handled = 0
        for pair in pairs:
            if self.react_to(pair):
                handled += 1
        return handled

    def react_to(self, pair: CollisionPair) -> bool:
        info_a = self.registry.info(pair.shape_a)
        info_b = self.registry.info(pair.shape_b)
        if info_a is None or info_b is None:
            # One side was already destroyed earlier in this batch.
            return False

        if info_a.kind == BodyKind.BALL:
            ball, ball_velocity, other, other_info = pair.shape_a, pair.velocity_a, pair.shape_b, info_b
        elif info_b.kind == BodyKind.BALL:
            ball, ball_velocity, other, other_info = pair.shape_b, pair.velocity_b, pair.shape_a, info_a
        else:
            return False

        kind = other_info.kind
        if kind == BodyKind.PLATFORM:
            self._on_platform_hit(ball, ball_velocity, other, other_info)
        elif kind == BodyKind.TARGET:
            self._on_target_hit(other, other_info)
        elif kind == BodyKind.GROUND:
            self._on_ground_hit()
        else:
            return False
        return True

    def _on_platform_hit(self, ball: pymunk.Shape, ball_velocity: Vec2d, platform: pymunk.Shape, info: PlatformInfo):
        type_def = info.type_def
        self._play(type_def.note_frequency, PLATFORM_NOTE_DURATION, impact_volume(ball_velocity.y))
        self.state.award(PLATFORM_HIT_POINTS)

        if type_def.is_accelerator:
            impulse = accelerator_impulse(info.angle, type_def.boost_factor)
            ball.body.apply_impulse_at_world_point(impulse, ball.body.position)
            logger.debug("Boosted ball by %s", impulse)

        if type_def.is_temporary:
            info.current_hits += 1
            info.opacity = temporary_opacity(info.current_hits, type_def.max_hits)
            if info.hits_remaining <= 0:
                self.registry.remove(platform)
                logger.info("Temporary platform broke after %d hits", info.current_hits)

    def _on_target_hit(self, target: pymunk.Shape, info: TargetInfo):
        self.state.award(info.point_value)
        self._play(info.hit_note, TARGET_NOTE_DURATION, TARGET_NOTE_VOLUME)
        self.registry.remove(target)
        logger.info("Target hit! Score: %d", self.state.score)
        if self.spawner is not None:
            self.spawner.schedule_target_respawn()

    def _on_ground_hit(self):
        self._play(GROUND_NOTE, GROUND_NOTE_DURATION, GROUND_NOTE_VOLUME)
