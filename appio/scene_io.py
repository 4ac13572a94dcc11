# ================================
# file: appio/scene_io.py
# ================================
"""Process boundary: turn one engine run into a transport message.

Success: {"ok": True, "scene": {...}, "warnings": [...]}
Failure: {"ok": False, "errors": ["Interpretation error: ..."]}

A failed run never carries a partial scene.
"""
from __future__ import annotations
from typing import Dict, Optional
import json

from core.errors import InterpreterError, ProgramFormatError
from lang.program_loader import ProgramLoader
from lang.ast_nodes import Program
from interp.interpreter import RoboMLInterpreter


def success_message(scene_dict: Dict, warnings=()) -> Dict:
    return {"ok": True, "scene": scene_dict, "warnings": list(warnings)}


def failure_message(*errors: str) -> Dict:
    return {"ok": False, "errors": [str(e) for e in errors]}


def execute_program(program: Optional[Program], interpreter: RoboMLInterpreter) -> Dict:
    """Run `program` and report either its scene or the error that aborted it."""
    if program is None:
        return failure_message("Cannot execute: the program has parse or validation errors.")
    try:
        scene = interpreter.interpret(program)
    except InterpreterError as e:
        interpreter.log(f"Interpretation error: {e}", "ERROR")
        return failure_message(f"Interpretation error: {e}")
    except RecursionError:
        # unbounded RoboML recursion exhausts the Python stack
        interpreter.log("Interpretation error: maximum call depth exceeded", "ERROR")
        return failure_message("Interpretation error: maximum call depth exceeded")
    return success_message(scene.to_dict(), interpreter.warnings)


def execute_json(program_data: Dict, interpreter: RoboMLInterpreter) -> Dict:
    """Load a JSON AST dict and execute it; load failures are reported, not raised."""
    loader = ProgramLoader(logger_func=interpreter.logger_func, log_file=interpreter.log_file)
    try:
        program = loader.from_dict(program_data)
    except ProgramFormatError as e:
        return failure_message(f"Cannot execute: {e}")
    return execute_program(program, interpreter)


def dumps(message: Dict, indent: Optional[int] = 2) -> str:
    return json.dumps(message, indent=indent)
