# ================================
# file: tests/test_scene_io.py
# ================================
import json
import os
import pytest

import main
from appio import dumps, execute_json, execute_program, failure_message, log_to_file, success_message
from interp import RoboMLInterpreter
from sim import load_layout
from tests.helpers import call, entry, forward, func, let, num, op, program


def _approach_program():
    # stop 500 mm short of whatever is ahead
    return {"functions": [{
        "name": "entry", "returnType": "void", "parameters": [],
        "instructions": [
            {"$type": "VariableDeclaration", "variable": {"name": "d", "type": "number"},
             "value": {"$type": "SensorAccess", "sensor": "getDistance"}},
            {"$type": "Movement", "direction": "Forward", "unit": "mm",
             "distance": {"$type": "BinaryExpression", "operator": "-",
                          "left": {"$type": "VariableRef", "variable": "d"},
                          "right": {"$type": "NumberLiteral", "value": 500}}},
        ],
    }]}


def test_messages():
    assert success_message({"time": 0}) == {"ok": True, "scene": {"time": 0}, "warnings": []}
    assert failure_message("a", "b") == {"ok": False, "errors": ["a", "b"]}
    assert json.loads(dumps(failure_message("x"))) == {"ok": False, "errors": ["x"]}


def test_execute_program_success():
    message = execute_program(program(entry(forward(30))), RoboMLInterpreter())
    assert message["ok"] is True
    assert len(message["scene"]["timestamps"]) == 1
    assert message["warnings"] == []


def test_execute_program_without_program():
    message = execute_program(None, RoboMLInterpreter())
    assert message == failure_message("Cannot execute: the program has parse or validation errors.")


def test_runtime_error_yields_no_scene():
    _, bad = let("x", op("/", num(5), num(0)))
    message = execute_program(program(entry(forward(30), bad)), RoboMLInterpreter())
    assert message == {"ok": False, "errors": ["Interpretation error: Division by zero"]}


def test_unbounded_recursion_is_reported():
    f = func("f", [])
    f.instructions.append(call(f))
    message = execute_program(program(entry(call(f)), f), RoboMLInterpreter())
    assert message["ok"] is False
    assert "maximum call depth" in message["errors"][0]


def test_missing_entry_warns_in_message():
    message = execute_program(program(), RoboMLInterpreter())
    assert message["ok"] is True
    assert message["scene"]["timestamps"] == []
    assert message["warnings"]


def test_execute_json_reports_format_errors():
    message = execute_json({"functions": [{"name": "entry", "instructions": [{"$type": "Jump"}]}]},
                           RoboMLInterpreter())
    assert message["ok"] is False
    assert message["errors"][0].startswith("Cannot execute:")


def test_sensor_program_against_arena(data_dir):
    layout = load_layout(os.path.join(data_dir, "arena.json"))
    message = execute_json(_approach_program(), RoboMLInterpreter(layout=layout))
    assert message["ok"] is True
    robot = message["scene"]["robot"]
    assert robot["pos"]["x"] == pytest.approx(7500)
    assert len(message["scene"]["entities"]) == 3


def test_log_to_file(tmp_path):
    path = tmp_path / "run.txt"
    with open(path, "w", encoding="utf-8") as f:
        log_to_file(f, "hello", "TEST")
    text = path.read_text()
    assert "[TEST] hello" in text


def test_main_run_square(data_dir):
    message = main.run(os.path.join(data_dir, "square.json"))
    assert message["ok"] is True
    assert len(message["scene"]["timestamps"]) == 8


def test_main_run_missing_file(tmp_path):
    message = main.run(str(tmp_path / "absent.json"))
    assert message["ok"] is False
    assert message["errors"][0].startswith("Cannot execute:")


def test_main_bounded_scene_uses_border(tmp_path, data_dir):
    path = tmp_path / "prog.json"
    path.write_text(json.dumps(_approach_program()))
    message = main.run(str(path), bounded=True)
    assert message["ok"] is True
    assert message["scene"]["robot"]["pos"]["x"] == pytest.approx(9500)
    assert len(message["scene"]["entities"]) == 4


def test_main_cli_writes_output(tmp_path, data_dir):
    out = tmp_path / "scene.json"
    code = main.main(["--program", os.path.join(data_dir, "square.json"),
                      "--scene", os.path.join(data_dir, "arena.json"), "--out", str(out)])
    assert code == 0
    message = json.loads(out.read_text())
    assert message["ok"] is True
    assert message["scene"]["time"] == pytest.approx(4 * (1000 / 150 * 1000 + 450))


def test_main_cli_strict_entry_fails(tmp_path):
    path = tmp_path / "prog.json"
    path.write_text(json.dumps({"functions": []}))
    out = tmp_path / "scene.json"
    code = main.main(["--program", str(path), "--strict-entry", "--out", str(out)])
    assert code == 1
    assert json.loads(out.read_text())["ok"] is False


@pytest.mark.parametrize("instructions", [
    [42],
    [{"$type": "Return", "value": {"$type": "NumberLiteral", "value": "ten"}}],
])
def test_execute_json_reports_malformed_nodes(instructions):
    message = execute_json({"functions": [{"name": "entry", "instructions": instructions}]},
                           RoboMLInterpreter())
    assert message["ok"] is False
    assert message["errors"][0].startswith("Cannot execute:")


def test_main_cli_malformed_program_prints_failure(tmp_path):
    path = tmp_path / "prog.json"
    path.write_text(json.dumps({"functions": [{"name": "entry", "instructions": [42]}]}))
    out = tmp_path / "scene.json"
    assert main.main(["--program", str(path), "--out", str(out)]) == 1
    assert json.loads(out.read_text())["ok"] is False


def test_forwarded_log_lines_print_once(tmp_path, capsys):
    with open(tmp_path / "run.txt", "w", encoding="utf-8") as f:
        interp = RoboMLInterpreter(logger_func=log_to_file, log_file=f)
        interp.log("single line")
        interp.interpret(program())
    out = capsys.readouterr().out
    assert out.count("single line") == 1
    assert out.count("nothing to execute") == 1
    assert "[INTERP] single line" in (tmp_path / "run.txt").read_text()
