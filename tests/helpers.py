# ================================
# file: tests/helpers.py
# ================================
"""Small AST builders so tests read like RoboML source."""
from __future__ import annotations
from typing import Optional, Tuple

from lang.ast_nodes import (
    Assignment, BinaryExpression, BooleanLiteral, Condition, Direction, FunctionCall,
    FunctionDef, Loop, Movement, NumberLiteral, Program, Return, Rotate, RotationDirection,
    RType, SensorAccess, SetSpeed, Unit, Variable, VariableDeclaration, VariableRef,
)


def num(v) -> NumberLiteral:
    return NumberLiteral(float(v))


def true() -> BooleanLiteral:
    return BooleanLiteral(True)


def false() -> BooleanLiteral:
    return BooleanLiteral(False)


def op(operator: str, left, right) -> BinaryExpression:
    return BinaryExpression(operator, left, right)


def ref(var: Variable) -> VariableRef:
    return VariableRef(variable=var, name=var.name)


def sensor(name: str) -> SensorAccess:
    return SensorAccess(name)


def let(name: str, value, unit: Optional[Unit] = None,
        rtype: RType = RType.NUMBER) -> Tuple[Variable, VariableDeclaration]:
    var = Variable(name, rtype)
    return var, VariableDeclaration(var, value, unit)


def assign(var: Variable, value) -> Assignment:
    return Assignment(assignee=var, value=value, name=var.name)


def call(fn: FunctionDef, *args) -> FunctionCall:
    return FunctionCall(function=fn, arguments=list(args), name=fn.name)


def forward(d, unit: Optional[Unit] = None) -> Movement:
    return Movement(Direction.FORWARD, num(d) if isinstance(d, (int, float)) else d, unit)


def move(direction: Direction, d, unit: Optional[Unit] = None) -> Movement:
    return Movement(direction, num(d) if isinstance(d, (int, float)) else d, unit)


def clock(a) -> Rotate:
    return Rotate(RotationDirection.CLOCK, num(a) if isinstance(a, (int, float)) else a)


def counter(a) -> Rotate:
    return Rotate(RotationDirection.COUNTER, num(a) if isinstance(a, (int, float)) else a)


def speed(v, unit: Optional[Unit] = None) -> SetSpeed:
    return SetSpeed(num(v) if isinstance(v, (int, float)) else v, unit)


def ret(value) -> Return:
    return Return(value)


def if_(cond, then, otherwise=()) -> Condition:
    return Condition(cond, list(then), list(otherwise))


def loop(cond, body) -> Loop:
    return Loop(cond, list(body))


def func(name: str, instructions, params=(), returns: RType = RType.VOID) -> FunctionDef:
    return FunctionDef(name, list(params), returns, list(instructions))


def entry(*instructions) -> FunctionDef:
    return func("entry", instructions)


def program(*functions) -> Program:
    return Program(list(functions))
