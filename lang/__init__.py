# ================================
# file: lang/__init__.py
# ================================
"""
RoboML language model: linked AST node classes and the JSON AST loader.
Parsing and validation happen upstream; this package only carries their output.
"""
from lang.ast_nodes import (
    Program, FunctionDef, Variable, RType, Unit, Direction, RotationDirection,
    NumberLiteral, BooleanLiteral, BinaryExpression, VariableRef, FunctionCall, SensorAccess,
    VariableDeclaration, Assignment, Condition, Loop, Movement, Rotate, SetSpeed, Return,
)
from lang.program_loader import ProgramLoader, load_program

__all__ = [
    # Program structure
    'Program', 'FunctionDef', 'Variable', 'RType', 'Unit', 'Direction', 'RotationDirection',

    # Expressions
    'NumberLiteral', 'BooleanLiteral', 'BinaryExpression', 'VariableRef', 'FunctionCall',
    'SensorAccess',

    # Instructions
    'VariableDeclaration', 'Assignment', 'Condition', 'Loop', 'Movement', 'Rotate',
    'SetSpeed', 'Return',

    # Loading
    'ProgramLoader', 'load_program',
]
