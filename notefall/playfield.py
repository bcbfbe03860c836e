"""Physics world and gameplay wiring, independent of any window."""
from __future__ import annotations

import logging
import random
from typing import List, Optional

import pymunk

from .bodies import BodyKind, BodyRegistry, make_ground, make_platform
from .config import (
    DELETE_NOTE,
    DELETE_NOTE_DURATION,
    DELETE_NOTE_VOLUME,
    OFFSCREEN_MARGIN,
    PLATFORM_DELETE_PENALTY,
    GameSettings,
)
from .drawing import PlacementRequest
from .platform_types import PlatformTypeRegistry
from .reactor import CollisionPair, CollisionReactor
from .scheduler import Scheduler
from .spawner import Spawner
from .state import GameState

logger = logging.getLogger(__name__)


class Playfield:
    def __init__(self, settings: GameSettings = None, sound_manager=None,
                 platform_types: PlatformTypeRegistry = None, rng: random.Random = None):
        self.settings = settings or GameSettings()
        self.width = self.settings.width
        self.height = self.settings.height
        self.sound_manager = sound_manager
        self.platform_types = platform_types or PlatformTypeRegistry()
        self.state = GameState(self.settings.starting_platform_type)

        self.space = pymunk.Space()
        self.space.gravity = self.settings.gravity
        self.registry = BodyRegistry(self.space)
        self.scheduler = Scheduler()
        self.spawner = Spawner(self.registry, self.scheduler, self.settings, rng)
        self.reactor = CollisionReactor(self.registry, self.state, sound_manager, self.spawner)

        self._pending_pairs: List[CollisionPair] = []
        self._setup_collision_handlers()

    def _setup_collision_handlers(self):
        self.space.on_collision(
            collision_type_a=int(BodyKind.BALL),
            collision_type_b=int(BodyKind.TARGET),
            begin=self._on_contact_begin,
        )
        for kind in (BodyKind.PLATFORM, BodyKind.GROUND):
            self.space.on_collision(
                collision_type_a=int(BodyKind.BALL),
                collision_type_b=int(kind),
                begin=self._on_contact_begin,
                pre_solve=self._match_restitution,
            )

    def _on_contact_begin(self, arbiter, space, data):
        self._pending_pairs.append(CollisionPair.from_arbiter(arbiter))

    @staticmethod
    def _match_restitution(arbiter, space, data):
        # Bounce with the livelier surface, not the product of the two
        shape_a, shape_b = arbiter.shapes
        arbiter.restitution = max(shape_a.elasticity, shape_b.elasticity)

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def selected_type(self):
        return self.platform_types.lookup(self.state.selected_platform_type)

    def start(self):
        self.create_ground()
        self.spawner.start()
        logger.info("Game initialized with physics (%dx%d).", self.width, self.height)

    def create_ground(self):
        shape, info = make_ground(self.width, self.height)
        return self.registry.replace_ground(shape, info)

    def resize(self, width, height):
        self.width = width
        self.height = height
        self.spawner.resize(width, height)
        self.create_ground()
        logger.info("Playfield resized to %dx%d", width, height)

    # -------------------------------------------------------------------------
    # Simulation
    # -------------------------------------------------------------------------
    def step_physics(self, dt: float):
        """One physics step followed by the reaction to its collision pairs."""
        self.space.step(dt)
        pairs, self._pending_pairs = self._pending_pairs, []
        self.reactor.react(pairs)

    def update(self, dt: float):
        self.scheduler.advance(dt)
        sub_dt = dt / self.settings.substeps
        for _ in range(self.settings.substeps):
            self.step_physics(sub_dt)

    def cleanup_offscreen(self) -> int:
        return self.registry.remove_offscreen_balls(self.height + OFFSCREEN_MARGIN)

    # -------------------------------------------------------------------------
    # Player actions
    # -------------------------------------------------------------------------
    def select_platform_type(self, key: str) -> bool:
        if self.platform_types.lookup(key) is None:
            return False
        self.state.selected_platform_type = key
        logger.info("Platform type selected: %s", key)
        return True

    def place_platform(self, request: Optional[PlacementRequest]) -> Optional[pymunk.Shape]:
        if request is None:
            return None
        type_def = self.platform_types.lookup(request.type_key)
        if type_def is None:
            logger.info("Unknown platform type %r, not created.", request.type_key)
            return None
        shape, info = make_platform(request.center, request.length, request.angle, type_def)
        self.registry.add(shape, info)
        logger.info(
            "Platform created at (%.1f, %.1f) L:%.1f A:%.2f type %s",
            request.center[0], request.center[1], request.length, request.angle, type_def.key,
        )
        return shape

    def delete_platform_at(self, point) -> bool:
        platform = self.registry.platform_at(point)
        if platform is None:
            logger.info("No platform found at (%.0f, %.0f).", point[0], point[1])
            return False
        self.registry.remove(platform)
        self.state.penalize(PLATFORM_DELETE_PENALTY)
        logger.info("Platform deleted. Score: %d", self.state.score)
        if self.sound_manager is not None and self.sound_manager.ready:
            self.sound_manager.play_note(DELETE_NOTE, DELETE_NOTE_DURATION, DELETE_NOTE_VOLUME)
        return True
