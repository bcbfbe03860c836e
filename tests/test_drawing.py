import math

import pytest

from notefall.drawing import DragGesture


def test_horizontal_drag_geometry():
    gesture = DragGesture()
    gesture.begin((0, 0))
    gesture.update((60, 0))
    request = gesture.end((100, 0), '2')
    assert request.center == (50, 0)
    assert request.length == 100
    assert request.angle == 0
    assert request.type_key == '2'


def test_vertical_drag_angle():
    gesture = DragGesture()
    gesture.begin((10, 10))
    request = gesture.end((10, 70), '1')
    assert request.angle == pytest.approx(math.pi / 2)
    assert request.center == (10, 40)


def test_short_drag_rejected_and_reset():
    gesture = DragGesture()
    gesture.begin((100, 100))
    gesture.update((103, 103))
    assert gesture.end((103, 103), '1') is None
    assert not gesture.active
    assert gesture.start == (0.0, 0.0)
    assert gesture.current == (0.0, 0.0)


def test_update_while_inactive_is_ignored():
    gesture = DragGesture()
    gesture.update((40, 40))
    assert gesture.current == (0.0, 0.0)
    assert gesture.end((40, 40), '1') is None


def test_gesture_resets_after_success():
    gesture = DragGesture()
    gesture.begin((0, 0))
    assert gesture.end((0, 50), '1') is not None
    assert not gesture.active
