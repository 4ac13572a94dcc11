# ================================
# file: interp/executor.py
# ================================
from __future__ import annotations
from typing import TYPE_CHECKING, Optional, Sequence

from core.config import (
    UNIT_TO_MM, DEFAULT_UNIT, DEG_TO_RAD, MAX_LOOP_ITERATIONS,
    ROTATE_MS_PER_DEG, MS_PER_S,
)
from core.errors import DivisionByZeroError, UnknownInstructionKind, UnresolvedReferenceError
from lang.ast_nodes import (
    Assignment, Condition, Direction, FunctionCall, Loop, Movement, Return,
    Rotate, RotationDirection, SetSpeed, Unit, VariableDeclaration,
)
from interp.results import COMPLETED, ExecResult, Returning

if TYPE_CHECKING:
    from interp.interpreter import RoboMLInterpreter


def to_mm(value: float, unit: Optional[Unit]) -> float:
    return value * UNIT_TO_MM[unit.value if unit else DEFAULT_UNIT]


class InstructionExecutor:
    """Runs instruction sequences; the first Returning result stops a block
    and travels up unchanged to the enclosing function call.
    """
    def __init__(self, engine: "RoboMLInterpreter", max_loop_iterations: int = MAX_LOOP_ITERATIONS) -> None:
        self.engine = engine
        self.max_loop_iterations = max_loop_iterations
        self._dispatch = {
            VariableDeclaration: self._declare,
            Assignment: self._assign,
            Condition: self._condition,
            Loop: self._loop,
            Movement: self._movement,
            Rotate: self._rotate,
            SetSpeed: self._set_speed,
            Return: self._return,
            FunctionCall: self._call,
        }

    def execute_block(self, instructions: Sequence) -> ExecResult:
        for instr in instructions:
            result = self.execute(instr)
            if result.returning:
                return result
        return COMPLETED

    def execute(self, node) -> ExecResult:
        handler = self._dispatch.get(type(node))
        if handler is None:
            raise UnknownInstructionKind(f"Unknown instruction type: {type(node).__name__}", node)
        return handler(node)

    # --------- bindings ---------
    def _declare(self, node: VariableDeclaration) -> ExecResult:
        # bindings hold the number in its declared unit; movement converts to mm
        value = self.engine.evaluator.evaluate(node.value)
        self.engine.env.declare(node.variable.name, value)
        return COMPLETED

    def _assign(self, node: Assignment) -> ExecResult:
        if node.assignee is None:
            raise UnresolvedReferenceError(
                f"Unresolved variable in assignment{': ' + node.name if node.name else ''}", node)
        value = self.engine.evaluator.evaluate(node.value)
        self.engine.env.update(node.assignee.name, value)
        return COMPLETED

    # --------- control flow ---------
    def _condition(self, node: Condition) -> ExecResult:
        if self.engine.evaluator.evaluate(node.condition):
            return self.execute_block(node.then_body)
        if node.else_body:
            return self.execute_block(node.else_body)
        return COMPLETED

    def _loop(self, node: Loop) -> ExecResult:
        evaluate = self.engine.evaluator.evaluate
        iterations = 0
        while evaluate(node.condition):
            if iterations >= self.max_loop_iterations:
                self.engine.warn(f"Max loop iterations ({self.max_loop_iterations}) reached - breaking out")
                break
            result = self.execute_block(node.body)
            if result.returning:
                return result
            iterations += 1
        return COMPLETED

    def _return(self, node: Return) -> ExecResult:
        return Returning(self.engine.evaluator.evaluate(node.value))

    def _call(self, node: FunctionCall) -> ExecResult:
        self.engine.evaluator.call(node)
        return COMPLETED

    # --------- robot ---------
    def _movement(self, node: Movement) -> ExecResult:
        engine = self.engine
        dist = to_mm(engine.evaluator.evaluate(node.distance), node.unit)
        robot = engine.robot
        if robot.speed == 0:
            raise DivisionByZeroError("Movement at zero speed", node)
        if node.direction is Direction.FORWARD:
            robot.move(dist)
        elif node.direction is Direction.BACKWARD:
            robot.move(-dist)
        elif node.direction is Direction.LEFT:
            robot.strafe(-dist)
        elif node.direction is Direction.RIGHT:
            robot.strafe(dist)
        else:
            raise UnknownInstructionKind(f"Unknown movement direction: {node.direction!r}", node)
        # |speed| keeps the clock monotonic after a negative setSpeed
        duration = abs(dist) / abs(robot.speed) * MS_PER_S
        ts = engine.recorder.advance_and_record(duration, robot)
        engine.trace(f"move {node.direction.value} {dist:.1f}mm -> "
                     f"({ts.pos.x:.1f}, {ts.pos.y:.1f}) t={ts.time:.0f}ms")
        return COMPLETED

    def _rotate(self, node: Rotate) -> ExecResult:
        engine = self.engine
        angle_deg = engine.evaluator.evaluate(node.angle)
        angle_rad = angle_deg * DEG_TO_RAD
        if node.direction is RotationDirection.CLOCK:
            engine.robot.turn(angle_rad)
        elif node.direction is RotationDirection.COUNTER:
            engine.robot.turn(-angle_rad)
        else:
            raise UnknownInstructionKind(f"Unknown rotation direction: {node.direction!r}", node)
        ts = engine.recorder.advance_and_record(abs(angle_deg) * ROTATE_MS_PER_DEG, engine.robot)
        engine.trace(f"rotate {node.direction.value} {angle_deg}deg -> rad={ts.rad:.3f} t={ts.time:.0f}ms")
        return COMPLETED

    def _set_speed(self, node: SetSpeed) -> ExecResult:
        speed = to_mm(self.engine.evaluator.evaluate(node.value), node.unit)
        self.engine.robot.set_speed(speed)
        self.engine.trace(f"speed -> {speed:.1f}mm/s")
        return COMPLETED
