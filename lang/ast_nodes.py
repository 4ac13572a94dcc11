# ================================
# file: lang/ast_nodes.py
# ================================
"""
RoboML abstract syntax tree.
Nodes arrive already linked: VariableRef/Assignment point at the Variable
they use and FunctionCall points at its FunctionDef. The engine never
mutates these nodes.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union


class RType(Enum):
    NUMBER = "number"
    BOOLEAN = "boolean"
    VOID = "void"


class Unit(Enum):
    MM = "mm"
    CM = "cm"


class Direction(Enum):
    FORWARD = "Forward"
    BACKWARD = "Backward"
    LEFT = "Left"
    RIGHT = "Right"


class RotationDirection(Enum):
    CLOCK = "Clock"
    COUNTER = "Counter"


@dataclass(eq=False)
class Variable:
    """A binding site: function parameter or declared variable."""
    name: str
    type: RType = RType.NUMBER


# ---------- expressions ----------

@dataclass(eq=False)
class NumberLiteral:
    value: float


@dataclass(eq=False)
class BooleanLiteral:
    value: bool


@dataclass(eq=False)
class BinaryExpression:
    operator: str
    left: "Expression"
    right: "Expression"


@dataclass(eq=False)
class VariableRef:
    variable: Optional[Variable] = field(default=None, repr=False)
    name: str = ""   # source text of the reference, kept for error messages


@dataclass(eq=False)
class FunctionCall:
    function: Optional["FunctionDef"] = field(default=None, repr=False)
    arguments: List["Expression"] = field(default_factory=list)
    name: str = ""


@dataclass(eq=False)
class SensorAccess:
    sensor: str


Expression = Union[NumberLiteral, BooleanLiteral, BinaryExpression,
                   VariableRef, FunctionCall, SensorAccess]


# ---------- instructions ----------

@dataclass(eq=False)
class VariableDeclaration:
    variable: Variable
    value: Expression
    unit: Optional[Unit] = None


@dataclass(eq=False)
class Assignment:
    assignee: Optional[Variable] = field(default=None, repr=False)
    value: Optional[Expression] = None
    name: str = ""


@dataclass(eq=False)
class Condition:
    condition: Expression
    then_body: List["Instruction"] = field(default_factory=list)
    else_body: List["Instruction"] = field(default_factory=list)


@dataclass(eq=False)
class Loop:
    condition: Expression
    body: List["Instruction"] = field(default_factory=list)


@dataclass(eq=False)
class Movement:
    direction: Direction
    distance: Expression
    unit: Optional[Unit] = None


@dataclass(eq=False)
class Rotate:
    direction: RotationDirection
    angle: Expression


@dataclass(eq=False)
class SetSpeed:
    value: Expression
    unit: Optional[Unit] = None


@dataclass(eq=False)
class Return:
    value: Expression


Instruction = Union[VariableDeclaration, Assignment, Condition, Loop,
                    Movement, Rotate, SetSpeed, Return, FunctionCall]


# ---------- program ----------

@dataclass(eq=False)
class FunctionDef:
    name: str
    parameters: List[Variable] = field(default_factory=list)
    return_type: RType = RType.VOID
    instructions: List[Instruction] = field(default_factory=list)


@dataclass(eq=False)
class Program:
    functions: List[FunctionDef] = field(default_factory=list)

    def function(self, name: str) -> Optional[FunctionDef]:
        for fn in self.functions:
            if fn.name == name:
                return fn
        return None
