# ================================
# file: tests/test_raycast.py
# ================================
import math
import numpy as np
import pytest

from core.types import Vector2
from interp import RoboMLInterpreter
from sim import Block, Ray, RayCaster, SceneLayout, Wall
from sim.entities import intersect_segments
from tests.helpers import clock, sensor

ORIGIN = Vector2(5000, 5000)


def test_ray_end_point():
    end = Ray(ORIGIN, math.pi / 2, 100).end()
    assert end.x == pytest.approx(5000)
    assert end.y == pytest.approx(5100)


def test_intersect_segments_picks_nearest():
    segs = np.array([
        [9000, 0, 9000, 10000],
        [7000, 0, 7000, 10000],
    ])
    poi = intersect_segments(Ray(ORIGIN, 0.0), segs)
    assert poi[0] == pytest.approx(7000)
    assert poi[1] == pytest.approx(5000)


def test_parallel_segment_is_not_hit():
    segs = np.array([[0, 5000, 10000, 5000]])
    assert intersect_segments(Ray(ORIGIN, 0.0), segs) is None


def test_empty_segment_list():
    assert intersect_segments(Ray(ORIGIN, 0.0), np.zeros((0, 4))) is None


def test_wall_ahead():
    wall = Wall(Vector2(8000, 2000), Vector2(8000, 8000))
    caster = RayCaster([wall])
    assert caster.distance(Ray(ORIGIN, 0.0)) == pytest.approx(3000)


def test_wall_behind_uses_fallback():
    wall = Wall(Vector2(2000, 2000), Vector2(2000, 8000))
    caster = RayCaster([wall])
    assert caster.cast(Ray(ORIGIN, 0.0)) is None
    assert caster.distance(Ray(ORIGIN, 0.0), fallback=10000) == 10000


def test_wall_missed_beside_the_ray():
    wall = Wall(Vector2(8000, 6000), Vector2(8000, 8000))
    assert RayCaster([wall]).cast(Ray(ORIGIN, 0.0)) is None


def test_block_near_face_is_hit():
    block = Block(Vector2(6000, 4900), Vector2(500, 200))
    poi = block.intersect(Ray(ORIGIN, 0.0))
    assert poi.x == pytest.approx(6000)
    assert poi.y == pytest.approx(5000)


def test_nearest_entity_wins():
    far_wall = Wall(Vector2(8000, 2000), Vector2(8000, 8000))
    block = Block(Vector2(6000, 4900), Vector2(500, 200))
    caster = RayCaster([far_wall, block])
    assert caster.distance(Ray(ORIGIN, 0.0)) == pytest.approx(1000)


def test_entity_to_dict():
    block = Block(Vector2(1, 2), Vector2(3, 4))
    assert block.to_dict() == {"type": "Block", "pos": {"x": 1.0, "y": 2.0}, "size": {"x": 3.0, "y": 4.0}}


def test_distance_sensor_follows_robot_heading():
    layout = SceneLayout(entities=[
        Wall(Vector2(8000, 2000), Vector2(8000, 8000)),
        Wall(Vector2(2000, 7000), Vector2(8000, 7000)),
    ])
    interp = RoboMLInterpreter(layout=layout)
    assert interp.evaluator.evaluate(sensor("getDistance")) == pytest.approx(3000)
    interp.executor.execute(clock(90))
    assert interp.evaluator.evaluate(sensor("getDistance")) == pytest.approx(2000)
