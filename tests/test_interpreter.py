# ================================
# file: tests/test_interpreter.py
# ================================
import json
import math
import pytest

from core.errors import MissingEntryError
from core.types import Vector2
from interp import RoboMLInterpreter
from sim import SceneLayout, Wall
from tests.helpers import (
    call, clock, entry, forward, func, let, loop, num, op, program, ref, assign, speed,
)


def _square():
    i, decl = let("i", num(0))
    side = func("side", [forward(100), clock(90)])
    return program(entry(
        speed(100),
        decl,
        loop(op("<", ref(i), num(4)), [call(side), assign(i, op("+", ref(i), num(1)))]),
    ), side)


def test_square_trajectory(interp):
    scene = interp.interpret(_square())
    assert len(scene.timestamps) == 8
    assert scene.time == pytest.approx(4 * (1000 + 450))
    assert scene.robot["pos"]["x"] == pytest.approx(5000)
    assert scene.robot["pos"]["y"] == pytest.approx(5000)
    assert scene.robot["rad"] == pytest.approx(2 * math.pi)
    times = [ts.time for ts in scene.timestamps]
    assert times == sorted(times)
    assert scene.time == times[-1]


def test_missing_entry_returns_empty_scene(interp):
    scene = interp.interpret(program(func("helper", [forward(10)])))
    assert scene.time == 0
    assert scene.timestamps == ()
    assert scene.robot["pos"] == {"x": 5000.0, "y": 5000.0}
    assert any("entry" in w for w in interp.warnings)


def test_missing_entry_strict():
    interp = RoboMLInterpreter(entry_required=True)
    with pytest.raises(MissingEntryError):
        interp.interpret(program())


def test_custom_entry_name():
    interp = RoboMLInterpreter(entry="main")
    scene = interp.interpret(program(func("main", [forward(30)])))
    assert len(scene.timestamps) == 1


def test_runs_are_independent(interp):
    first = interp.interpret(_square())
    second = interp.interpret(_square())
    assert first.to_dict() == second.to_dict()
    assert len(first.timestamps) == 8


def test_earlier_scene_unchanged_by_later_run(interp):
    first = interp.interpret(program(entry(forward(30))))
    interp.interpret(program(entry(forward(30), forward(30), clock(10))))
    assert len(first.timestamps) == 1
    assert first.robot["pos"]["x"] == pytest.approx(5030)


def test_robot_starts_from_layout_pose():
    layout = SceneLayout(robot_start=Vector2(100, 200), robot_theta=math.pi, robot_speed=50)
    scene = RoboMLInterpreter(layout=layout).interpret(program(entry(forward(50))))
    assert scene.robot["pos"]["x"] == pytest.approx(50)
    assert scene.robot["pos"]["y"] == pytest.approx(200)
    assert scene.time == pytest.approx(1000)


def test_scene_dict_is_json_ready():
    layout = SceneLayout(entities=[Wall(Vector2(0, 0), Vector2(10, 0))])
    scene = RoboMLInterpreter(layout=layout).interpret(program(entry(forward(30))))
    data = json.loads(json.dumps(scene.to_dict()))
    assert set(data) == {"size", "entities", "robot", "time", "timestamps"}
    assert data["entities"][0]["type"] == "Wall"
    assert data["robot"]["type"] == "Robot"
    assert data["timestamps"][0]["time"] == pytest.approx(1000)
