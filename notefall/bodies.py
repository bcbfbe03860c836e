"""Live gameplay bodies and the metadata attached to them.

pymunk shapes carry nothing gameplay-specific except their ``collision_type``.
Everything else lives in a side table owned by :class:`BodyRegistry`, which is
also the only place that adds shapes to or removes them from the space.
"""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import ClassVar, Dict, List, Optional, Tuple, Union

import pymunk
from pymunk import Vec2d

from .config import (
    BALL_AIR_FRICTION,
    BALL_ELASTICITY,
    BALL_FRICTION,
    BALL_MASS,
    BALL_RADIUS,
    COLOR_BALL,
    COLOR_GROUND,
    COLOR_TARGET,
    FPS,
    GROUND_ELASTICITY,
    GROUND_FRICTION,
    GROUND_HEIGHT,
    MAX_OPACITY,
    PLATFORM_FRICTION,
    PLATFORM_THICKNESS,
    TARGET_HIT_NOTE,
    TARGET_POINTS,
    TARGET_RADIUS,
    TEMPORARY_BASE_OPACITY,
)
from .platform_types import PlatformTypeDef

logger = logging.getLogger(__name__)


class BodyKind(enum.IntEnum):
    """Body variants; the value doubles as the pymunk collision type."""

    BALL = 1
    PLATFORM = 2
    TARGET = 3
    GROUND = 4


@dataclass
class BallInfo:
    kind: ClassVar[BodyKind] = BodyKind.BALL
    radius: float = BALL_RADIUS
    color: Tuple[int, int, int] = COLOR_BALL


@dataclass
class PlatformInfo:
    kind: ClassVar[BodyKind] = BodyKind.PLATFORM
    type_def: PlatformTypeDef = None
    center: Tuple[float, float] = (0.0, 0.0)
    length: float = 0.0
    angle: float = 0.0
    thickness: float = PLATFORM_THICKNESS
    current_hits: int = 0
    opacity: float = MAX_OPACITY

    @property
    def color(self):
        return self.type_def.color

    @property
    def hits_remaining(self) -> int:
        if not self.type_def.is_temporary:
            return 0
        return self.type_def.max_hits - self.current_hits


@dataclass
class TargetInfo:
    kind: ClassVar[BodyKind] = BodyKind.TARGET
    radius: float = TARGET_RADIUS
    point_value: int = TARGET_POINTS
    hit_note: float = TARGET_HIT_NOTE
    color: Tuple[int, int, int] = COLOR_TARGET


@dataclass
class GroundInfo:
    kind: ClassVar[BodyKind] = BodyKind.GROUND
    width: float = 0.0
    height: float = GROUND_HEIGHT
    color: Tuple[int, int, int] = COLOR_GROUND


BodyInfo = Union[BallInfo, PlatformInfo, TargetInfo, GroundInfo]


# =============================================================================
# BODY FACTORIES
# =============================================================================
# Fraction of velocity kept per second
_AIR_DAMPING = (1.0 - BALL_AIR_FRICTION) ** FPS


def _apply_air_friction(body, gravity, damping, dt):
    pymunk.Body.update_velocity(body, gravity, damping * _AIR_DAMPING ** dt, dt)


def make_ball(position, radius=BALL_RADIUS) -> Tuple[pymunk.Circle, BallInfo]:
    moment = pymunk.moment_for_circle(BALL_MASS, 0, radius)
    body = pymunk.Body(BALL_MASS, moment)
    body.position = position
    body.velocity_func = _apply_air_friction
    shape = pymunk.Circle(body, radius)
    shape.elasticity = BALL_ELASTICITY
    shape.friction = BALL_FRICTION
    shape.collision_type = int(BodyKind.BALL)
    return shape, BallInfo(radius=radius)


def make_platform(center, length, angle, type_def: PlatformTypeDef) -> Tuple[pymunk.Poly, PlatformInfo]:
    body = pymunk.Body(body_type=pymunk.Body.STATIC)
    body.position = center
    body.angle = angle
    shape = pymunk.Poly.create_box(body, (length, PLATFORM_THICKNESS))
    shape.elasticity = type_def.restitution
    shape.friction = PLATFORM_FRICTION
    shape.collision_type = int(BodyKind.PLATFORM)
    opacity = TEMPORARY_BASE_OPACITY if type_def.is_temporary else MAX_OPACITY
    info = PlatformInfo(
        type_def=type_def,
        center=(float(center[0]), float(center[1])),
        length=length,
        angle=angle,
        opacity=opacity,
    )
    return shape, info


def make_target(position, point_value=TARGET_POINTS, hit_note=TARGET_HIT_NOTE) -> Tuple[pymunk.Circle, TargetInfo]:
    body = pymunk.Body(body_type=pymunk.Body.STATIC)
    body.position = position
    shape = pymunk.Circle(body, TARGET_RADIUS)
    shape.sensor = True
    shape.collision_type = int(BodyKind.TARGET)
    return shape, TargetInfo(point_value=point_value, hit_note=hit_note)


def make_ground(width, height) -> Tuple[pymunk.Poly, GroundInfo]:
    body = pymunk.Body(body_type=pymunk.Body.STATIC)
    body.position = (width / 2, height - GROUND_HEIGHT / 2)
    shape = pymunk.Poly.create_box(body, (width, GROUND_HEIGHT))
    shape.elasticity = GROUND_ELASTICITY
    shape.friction = GROUND_FRICTION
    shape.collision_type = int(BodyKind.GROUND)
    return shape, GroundInfo(width=width)


# =============================================================================
# REGISTRY
# =============================================================================
class BodyRegistry:
    """Tracks live bodies and keeps them in lock-step with the space."""

    def __init__(self, space: pymunk.Space):
        self.space = space
        self._info: Dict[pymunk.Shape, BodyInfo] = {}
        self._by_kind: Dict[BodyKind, List[pymunk.Shape]] = {kind: [] for kind in BodyKind}

    def add(self, shape: pymunk.Shape, info: BodyInfo) -> pymunk.Shape:
        if shape in self._info:
            raise ValueError(f"{info.kind.name.lower()} is already registered")
        self.space.add(shape.body, shape)
        self._info[shape] = info
        self._by_kind[info.kind].append(shape)
        return shape

    def remove(self, shape: pymunk.Shape) -> bool:
        info = self._info.pop(shape, None)
        if info is None:
            logger.debug("Ignoring removal of an unregistered shape")
            return False
        self._by_kind[info.kind].remove(shape)
        self.space.remove(shape.body, shape)
        return True

    def info(self, shape: pymunk.Shape) -> Optional[BodyInfo]:
        return self._info.get(shape)

    def all_of_kind(self, kind: BodyKind) -> Tuple[pymunk.Shape, ...]:
        return tuple(self._by_kind[kind])

    @property
    def balls(self):
        return self.all_of_kind(BodyKind.BALL)

    @property
    def platforms(self):
        return self.all_of_kind(BodyKind.PLATFORM)

    @property
    def targets(self):
        return self.all_of_kind(BodyKind.TARGET)

    @property
    def ground(self) -> Optional[pymunk.Shape]:
        grounds = self._by_kind[BodyKind.GROUND]
        return grounds[0] if grounds else None

    def replace_ground(self, shape: pymunk.Shape, info: GroundInfo) -> pymunk.Shape:
        if self.ground is not None:
            self.remove(self.ground)
        return self.add(shape, info)

    def platform_at(self, point) -> Optional[pymunk.Shape]:
        """First live platform containing ``point``, in creation order."""
        point = Vec2d(*point)
        for shape in self._by_kind[BodyKind.PLATFORM]:
            if shape.point_query(point).distance <= 0:
                return shape
        return None

    def remove_offscreen_balls(self, limit_y: float) -> int:
        balls = self._by_kind[BodyKind.BALL]
        removed = 0
        for i in range(len(balls) - 1, -1, -1):
            shape = balls[i]
            if shape.body.position.y > limit_y:
                del balls[i]
                del self._info[shape]
                self.space.remove(shape.body, shape)
                removed += 1
        return removed

    def __contains__(self, shape) -> bool:
        return shape in self._info

    def __len__(self) -> int:
        return len(self._info)

    def __iter__(self):
        return iter(list(self._info.items()))
