# ================================
# file: interp/results.py
# ================================
"""Outcome of executing an instruction or a block.

Exactly two cases: Completed (fall through to the next instruction) and
Returning(value) (unwind to the nearest function-call boundary).
"""
from __future__ import annotations
from typing import Optional, Union


class ExecResult:
    __slots__ = ()
    returning: bool = False
    value = None


class Completed(ExecResult):
    __slots__ = ()

    def __repr__(self) -> str:
        return "Completed"


class Returning(ExecResult):
    __slots__ = ("value",)
    returning = True

    def __init__(self, value: Optional[Union[float, bool]]) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"Returning({self.value!r})"


COMPLETED = Completed()
