# ================================
# file: lang/program_loader.py
# ================================
"""
Build a linked RoboML Program from its JSON AST.

The JSON mirrors what the language server exports: every node is an object
tagged with "$type", references are either plain names or
{"$refText": name} objects. Example:

    {"functions": [
        {"name": "entry", "returnType": "void", "parameters": [],
         "instructions": [
            {"$type": "Movement", "direction": "Forward", "unit": "cm",
             "distance": {"$type": "NumberLiteral", "value": 10}}
         ]}
    ]}

Names are linked the way the upstream scope provider does it: a variable
reference resolves against the parameters and declarations of its enclosing
function, a call against the program's functions. A name that resolves to
nothing is left as None and surfaces at run time as an unresolved reference.
"""
from __future__ import annotations
from typing import Dict, List, Optional, Tuple
import json

from core.errors import ProgramFormatError
from lang.ast_nodes import (
    Assignment, BinaryExpression, BooleanLiteral, Condition, Direction,
    FunctionCall, FunctionDef, Loop, Movement, NumberLiteral, Program,
    Return, Rotate, RotationDirection, RType, SensorAccess, SetSpeed, Unit,
    Variable, VariableDeclaration, VariableRef,
)


def _ref_text(ref) -> str:
    if isinstance(ref, str):
        return ref
    if isinstance(ref, dict):
        for key in ("$refText", "name", "ref"):
            if isinstance(ref.get(key), str):
                return ref[key]
    raise ProgramFormatError(f"Bad reference: {ref!r}")


def _enum(enum_cls, raw, what: str):
    if raw is None:
        return None
    try:
        return enum_cls(raw)
    except ValueError:
        raise ProgramFormatError(f"Unknown {what}: {raw!r}") from None


class ProgramLoader:
    """Turns JSON AST dicts into linked node objects."""

    def __init__(self, logger_func=None, log_file=None) -> None:
        self.logger_func = logger_func
        self.log_file = log_file
        # per-function symbol table, rebuilt for every function
        self._scope: Dict[str, Variable] = {}
        self._functions: Dict[str, FunctionDef] = {}
        self._pending_calls: List[FunctionCall] = []
        self._unresolved: List[str] = []

    def _log(self, message: str) -> None:
        if self.logger_func and self.log_file:
            self.logger_func(self.log_file, message, "LOADER")
        else:
            print(f"[LOADER] {message}")

    # --------- public ---------
    def load(self, path: str) -> Program:
        """Load a program from a JSON file."""
        with open(path, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ProgramFormatError(f"{path}: invalid JSON ({e})") from e
        self._log(f"Loading program: {path}")
        return self.from_dict(data)

    def from_dict(self, data: Dict) -> Program:
        if not isinstance(data, dict) or not isinstance(data.get("functions"), list):
            raise ProgramFormatError("Program must be an object with a 'functions' list")

        self._functions = {}
        self._pending_calls = []
        self._unresolved = []

        program = Program()
        raw_functions = data["functions"]
        # declare every function first so calls can be linked in any order
        for raw in raw_functions:
            if not isinstance(raw, dict):
                raise ProgramFormatError(f"Function must be an object, got {raw!r}")
            fn = FunctionDef(name=str(raw.get("name", "")),
                             return_type=_enum(RType, raw.get("returnType", "void"), "return type"))
            program.functions.append(fn)
            self._functions.setdefault(fn.name, fn)

        for fn, raw in zip(program.functions, raw_functions):
            try:
                self._build_function(fn, raw)
            except ProgramFormatError:
                raise
            except KeyError as e:
                raise ProgramFormatError(f"Function '{fn.name}': missing field {e}") from e
            except (TypeError, ValueError, AttributeError) as e:
                # non-object nodes and non-numeric literals
                raise ProgramFormatError(f"Function '{fn.name}': malformed node ({e})") from e

        for call in self._pending_calls:
            call.function = self._functions.get(call.name)
            if call.function is None:
                self._unresolved.append(f"function '{call.name}'")

        if self._unresolved:
            self._log(f"Unresolved references: {', '.join(self._unresolved)}")
        self._log(f"Functions found: {[fn.name for fn in program.functions]}")
        return program

    # --------- functions ---------
    def _build_function(self, fn: FunctionDef, raw: Dict) -> None:
        self._scope = {}
        for p in raw.get("parameters", []):
            var = Variable(name=str(p["name"]), type=_enum(RType, p.get("type", "number"), "type"))
            fn.parameters.append(var)
            self._scope[var.name] = var

        instructions = raw.get("instructions", [])
        self._collect_declarations(instructions)
        fn.instructions = [self._instruction(i) for i in instructions]

    def _collect_declarations(self, raws: List[Dict]) -> None:
        """Pre-register declared variables, including those nested in blocks."""
        for raw in raws:
            kind = raw.get("$type")
            if kind == "VariableDeclaration":
                decl = raw.get("variable", raw)
                name = str(decl["name"])
                if name not in self._scope:
                    self._scope[name] = Variable(name=name,
                                                 type=_enum(RType, decl.get("type", "number"), "type"))
            elif kind == "Condition":
                self._collect_declarations(raw.get("thenBody", []))
                self._collect_declarations(raw.get("elseBody", []) or [])
            elif kind == "Loop":
                self._collect_declarations(raw.get("body", []))

    def _variable(self, ref) -> Tuple[Optional[Variable], str]:
        name = _ref_text(ref)
        var = self._scope.get(name)
        if var is None:
            self._unresolved.append(f"variable '{name}'")
        return var, name

    # --------- instructions ---------
    def _instruction(self, raw: Dict):
        kind = raw.get("$type")
        if kind == "VariableDeclaration":
            decl = raw.get("variable", raw)
            return VariableDeclaration(variable=self._scope[str(decl["name"])],
                                       value=self._expression(raw["value"]),
                                       unit=_enum(Unit, raw.get("unit"), "unit"))
        if kind == "Assignment":
            var, name = self._variable(raw["assignee"])
            return Assignment(assignee=var, value=self._expression(raw["value"]), name=name)
        if kind == "Condition":
            return Condition(condition=self._expression(raw["condition"]),
                             then_body=[self._instruction(i) for i in raw.get("thenBody", [])],
                             else_body=[self._instruction(i) for i in raw.get("elseBody", []) or []])
        if kind == "Loop":
            return Loop(condition=self._expression(raw["condition"]),
                        body=[self._instruction(i) for i in raw.get("body", [])])
        if kind == "Movement":
            return Movement(direction=_enum(Direction, raw["direction"], "direction"),
                            distance=self._expression(raw["distance"]),
                            unit=_enum(Unit, raw.get("unit"), "unit"))
        if kind == "Rotate":
            return Rotate(direction=_enum(RotationDirection, raw["direction"], "rotation"),
                          angle=self._expression(raw["angle"]))
        if kind == "SetSpeed":
            return SetSpeed(value=self._expression(raw["value"]),
                            unit=_enum(Unit, raw.get("unit"), "unit"))
        if kind == "Return":
            return Return(value=self._expression(raw["value"]))
        if kind == "FunctionCall":
            return self._call(raw)
        raise ProgramFormatError(f"Unknown instruction type: {kind!r}")

    # --------- expressions ---------
    def _expression(self, raw: Dict):
        if not isinstance(raw, dict):
            raise ProgramFormatError(f"Expected an expression node, got {raw!r}")
        kind = raw.get("$type")
        if kind == "NumberLiteral":
            return NumberLiteral(value=float(raw["value"]))
        if kind == "BooleanLiteral":
            value = raw["value"]
            if isinstance(value, str):
                value = value == "true"
            return BooleanLiteral(value=bool(value))
        if kind == "BinaryExpression":
            return BinaryExpression(operator=str(raw["operator"]),
                                    left=self._expression(raw["left"]),
                                    right=self._expression(raw["right"]))
        if kind == "VariableRef":
            var, name = self._variable(raw["variable"])
            return VariableRef(variable=var, name=name)
        if kind == "SensorAccess":
            return SensorAccess(sensor=str(raw["sensor"]))
        if kind == "FunctionCall":
            return self._call(raw)
        raise ProgramFormatError(f"Unknown expression type: {kind!r}")

    def _call(self, raw: Dict) -> FunctionCall:
        call = FunctionCall(name=_ref_text(raw["function"]),
                            arguments=[self._expression(a) for a in raw.get("arguments", [])])
        self._pending_calls.append(call)
        return call


def load_program(path: str, logger_func=None, log_file=None) -> Program:
    return ProgramLoader(logger_func=logger_func, log_file=log_file).load(path)
