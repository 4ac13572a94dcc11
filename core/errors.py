# ================================
# file: core/errors.py
# ================================
"""
Error taxonomy for program execution.
Every error here aborts the run; the boundary in appio.scene_io turns
them into error strings. Loop-cap overflow is not an error (see executor).
"""
from __future__ import annotations
from typing import Optional


class InterpreterError(RuntimeError):
    def __init__(self, message: str, node: Optional[object] = None):
        super().__init__(message)
        self.message = message
        self.node = node

    def __str__(self) -> str:
        return self.message


class UndefinedVariableError(InterpreterError):
    """Read of, or assignment to, a name bound in no frame."""
    def __init__(self, name: str, assigning: bool = False):
        if assigning:
            message = f"Cannot assign to undefined variable: {name}"
        else:
            message = f"Undefined variable: {name}"
        super().__init__(message)
        self.name = name


class UnresolvedReferenceError(InterpreterError):
    """Variable or function link left dangling by the linker."""


class UnknownExpressionKind(InterpreterError):
    pass


class UnknownInstructionKind(InterpreterError):
    pass


class UnknownOperator(InterpreterError):
    pass


class UnknownSensorError(InterpreterError):
    def __init__(self, sensor: str):
        super().__init__(f"Unknown sensor: {sensor}")
        self.sensor = sensor


class DivisionByZeroError(InterpreterError, ArithmeticError):
    def __init__(self, message: str = "Division by zero", node: Optional[object] = None):
        super().__init__(message, node)


class MissingEntryError(InterpreterError):
    """Raised only when the entry function is required (ENTRY_REQUIRED)."""
    def __init__(self, name: str):
        super().__init__(f"Program has no '{name}' function")
        self.name = name


class ProgramFormatError(ValueError):
    """Malformed JSON program or scene layout."""
