import math

import pymunk
import pytest

from notefall.bodies import BodyKind, BodyRegistry, make_ball, make_ground, make_platform, make_target
from notefall.config import GRAVITY
from notefall.platform_types import PlatformTypeRegistry


@pytest.fixture
def registry():
    return BodyRegistry(pymunk.Space())


def test_add_and_remove_touch_space_and_registry(registry):
    shape, info = make_ball((100, 100))
    registry.add(shape, info)
    assert shape in registry.space.shapes
    assert shape.body in registry.space.bodies
    assert registry.balls == (shape,)

    assert registry.remove(shape)
    assert shape not in registry.space.shapes
    assert shape.body not in registry.space.bodies
    assert registry.balls == ()
    assert registry.info(shape) is None


def test_removing_unknown_shape_is_noop(registry):
    shape, _ = make_ball((0, 0))
    assert registry.remove(shape) is False
    assert len(registry) == 0


def test_double_add_rejected(registry):
    shape, info = make_ball((0, 0))
    registry.add(shape, info)
    with pytest.raises(ValueError):
        registry.add(shape, info)
    assert len(registry.space.shapes) == 1


def test_all_of_kind_is_a_snapshot(registry):
    for x in (10, 20, 30):
        registry.add(*make_ball((x, 0)))
    balls = registry.all_of_kind(BodyKind.BALL)
    for shape in balls:
        registry.remove(shape)
    assert len(balls) == 3
    assert registry.balls == ()


@pytest.mark.parametrize("key", ['1', '2', '3', '4', '5'])
def test_platform_takes_parameters_from_type(registry, key):
    type_def = PlatformTypeRegistry().lookup(key)
    shape, info = make_platform((200, 200), 120, 0.3, type_def)
    registry.add(shape, info)
    assert shape.elasticity == type_def.restitution
    assert info.color == type_def.color
    assert info.type_def.note_frequency == type_def.note_frequency
    assert shape.collision_type == BodyKind.PLATFORM
    assert shape.body.body_type == pymunk.Body.STATIC
    assert shape.body.angle == pytest.approx(0.3)


def test_temporary_platform_starts_translucent():
    type_def = PlatformTypeRegistry().lookup('5')
    _, info = make_platform((0, 0), 50, 0, type_def)
    assert info.opacity == pytest.approx(0.7)
    assert info.hits_remaining == 3


def test_target_is_static_sensor():
    shape, info = make_target((300, 400))
    assert shape.sensor
    assert shape.body.body_type == pymunk.Body.STATIC
    assert info.point_value == 10
    assert info.hit_note == 880.0


def test_replace_ground_keeps_a_single_ground(registry):
    first = registry.replace_ground(*make_ground(800, 600))
    second = registry.replace_ground(*make_ground(1024, 768))
    assert registry.ground is second
    assert first not in registry.space.shapes
    assert registry.all_of_kind(BodyKind.GROUND) == (second,)
    assert second.body.position.y == pytest.approx(768 - 25)


def test_platform_at(registry):
    type_def = PlatformTypeRegistry().lookup('1')
    flat = registry.add(*make_platform((100, 100), 100, 0, type_def))
    tilted = registry.add(*make_platform((300, 300), 100, math.pi / 4, type_def))
    assert registry.platform_at((120, 102)) is flat
    assert registry.platform_at((300 + 20, 300 + 20)) is tilted
    assert registry.platform_at((500, 500)) is None


def test_remove_offscreen_balls(registry):
    low = registry.add(*make_ball((50, 700)))
    high = registry.add(*make_ball((50, 600)))
    assert registry.remove_offscreen_balls(660) == 1
    assert registry.balls == (high,)
    assert low not in registry.space.shapes



def test_air_friction_slows_but_does_not_stall_a_falling_ball():
    space = pymunk.Space()
    space.gravity = GRAVITY
    ball, _ = make_ball((100, 0))
    space.add(ball.body, ball)
    for _ in range(180):
        space.step(1 / 180)
    # Free fall without drag would cover 175 px in one second
    assert 100 < ball.body.position.y < 175
