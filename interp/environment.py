# ================================
# file: interp/environment.py
# ================================
"""Variable scopes and the function table.

Frames are pushed and popped only around function calls; conditionals and
loops run in the caller's frame, so a variable declared inside an `if` or a
loop body stays visible to later statements of the same call.
"""
from __future__ import annotations
from typing import Callable, Dict, List, Optional, Sequence, Union

from core.errors import UndefinedVariableError, UnresolvedReferenceError
from lang.ast_nodes import FunctionDef, Program

Value = Union[float, bool]


class Environment:
    """Stack of name -> value frames, most recent last."""
    def __init__(self) -> None:
        self.frames: List[Dict[str, Value]] = [{}]

    def reset(self) -> None:
        self.frames = [{}]

    @property
    def depth(self) -> int:
        return len(self.frames)

    def push(self) -> None:
        self.frames.append({})

    def pop(self) -> None:
        if len(self.frames) <= 1:
            raise RuntimeError("cannot pop the global frame")
        self.frames.pop()

    def declare(self, name: str, value: Value) -> None:
        self.frames[-1][name] = value

    def read(self, name: str) -> Value:
        for frame in reversed(self.frames):
            if name in frame:
                return frame[name]
        raise UndefinedVariableError(name)

    def update(self, name: str, value: Value) -> None:
        for frame in reversed(self.frames):
            if name in frame:
                frame[name] = value
                return
        raise UndefinedVariableError(name, assigning=True)


class FunctionRegistry:
    """name -> FunctionDef, built once per run.
    Duplicate names and the entry signature are checked upstream; the first
    definition of a name wins here.
    """
    def __init__(self, program: Optional[Program] = None) -> None:
        self.functions: Dict[str, FunctionDef] = {}
        if program is not None:
            self.load(program)

    def load(self, program: Program) -> None:
        self.functions = {}
        for fn in program.functions:
            self.functions.setdefault(fn.name, fn)

    def get(self, name: str) -> Optional[FunctionDef]:
        return self.functions.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self.functions

    def call(self, fn: Optional[FunctionDef], args: Sequence[Value], env: Environment,
             execute_block: Callable) -> Optional[Value]:
        """Run `fn` in a fresh frame with `args` bound positionally.

        `execute_block(instructions)` returns the block's ExecResult.
        Returns the value carried by a Return, or None for "no value".
        """
        if fn is None:
            raise UnresolvedReferenceError("Unresolved function reference")
        env.push()
        try:
            for param, value in zip(fn.parameters, args):
                env.declare(param.name, value)
            result = execute_block(fn.instructions)
        finally:
            env.pop()
        if result.returning:
            return result.value
        return None
