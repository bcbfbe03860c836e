import random

import pymunk
import pytest

from notefall.bodies import BodyRegistry
from notefall.config import GameSettings
from notefall.scheduler import Scheduler
from notefall.spawner import Spawner


@pytest.fixture
def spawner():
    settings = GameSettings(width=800, height=600)
    return Spawner(BodyRegistry(pymunk.Space()), Scheduler(), settings, random.Random(7))


def test_ball_spawns_near_center_above_screen(spawner):
    for _ in range(50):
        ball = spawner.spawn_ball()
        assert 400 - 25 <= ball.body.position.x <= 400 + 25
        assert ball.body.position.y == -30
        assert ball.elasticity == 0.7
        assert ball.friction == 0.1


def test_targets_land_inside_band(spawner):
    x_min, x_max, y_min, y_max = spawner.target_bounds()
    assert (x_min, x_max, y_min, y_max) == (50, 750, 360, 500)
    for _ in range(50):
        target = spawner.spawn_target()
        x, y = target.body.position
        assert x_min <= x <= x_max
        assert y_min <= y <= y_max


def test_start_spawns_target_and_schedules_balls(spawner):
    spawner.start()
    assert len(spawner.registry.targets) == 1
    assert spawner.registry.balls == ()
    spawner.scheduler.advance(1.0)
    assert len(spawner.registry.balls) == 1
    spawner.scheduler.advance(2.0)
    assert len(spawner.registry.balls) == 3


def test_respawn_fires_after_delay(spawner):
    spawner.schedule_target_respawn()
    spawner.scheduler.advance(0.49)
    assert spawner.registry.targets == ()
    spawner.scheduler.advance(0.02)
    assert len(spawner.registry.targets) == 1


def test_overlapping_respawns_each_spawn(spawner):
    spawner.schedule_target_respawn()
    spawner.scheduler.advance(0.2)
    spawner.schedule_target_respawn()
    spawner.scheduler.advance(1.0)
    assert len(spawner.registry.targets) == 2


def test_resize_moves_target_band(spawner):
    spawner.resize(1000, 1000)
    assert spawner.target_bounds() == (50, 950, 600, 900)
