# src/tests/test_vector.py
import math
from src.game.vector import Vector


def test_advance_adds_deltas():
    v = Vector(x=10, y=20, dx=3, dy=-4)
    v.advance()
    v.advance()
    assert (v.x, v.y) == (16, 12)


def test_static_distance_when_nothing_moves():
    a = Vector(0, 0, width=10, height=10)
    b = Vector(30, 40, width=10, height=10)
    # no deltas -> plain centre distance, no division by zero
    assert a.min_distance(b) == 50.0
    assert b.min_distance(a) == 50.0


def test_sampling_catches_a_pass_through():
    mover = Vector(0, 0, dx=10)
    target = Vector(5, 0)
    # centres only meet mid-step; sampling at 1/10 increments finds it
    assert mover.min_distance(target) < 1e-9


def test_only_the_unit_step_is_sampled():
    mover = Vector(0, 0, dx=4)
    target = Vector(10, 0)
    # t in [0, 1): closest sample is t=0.75 -> 3 px away, never the end point
    assert math.isclose(mover.min_distance(target), 7.0)


def test_relative_motion_of_both_boxes():
    a = Vector(0, 0, dx=0, dy=6, width=60, height=96)
    b = Vector(0, 100, dx=-6, dy=0, width=32, height=32)
    d = a.min_distance(b)
    assert d <= math.hypot(14, 68)
    assert d > 0
