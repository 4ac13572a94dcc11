# ================================
# file: interp/evaluator.py
# ================================
from __future__ import annotations
from typing import TYPE_CHECKING, Callable, Dict, Optional, Union

from core.config import SENSOR_DISTANCE, SENSOR_TIMESTAMP, DISTANCE_FALLBACK_MM
from core.errors import (
    DivisionByZeroError, UnknownExpressionKind, UnknownOperator,
    UnknownSensorError, UnresolvedReferenceError,
)
from lang.ast_nodes import (
    BinaryExpression, BooleanLiteral, FunctionCall, NumberLiteral,
    SensorAccess, VariableRef,
)

if TYPE_CHECKING:
    from interp.interpreter import RoboMLInterpreter

Value = Union[float, bool]


def _div(left, right, node):
    if right == 0:
        raise DivisionByZeroError(node=node)
    return left / right


# operator -> fn(left, right, node)
OPERATORS: Dict[str, Callable] = {
    '+': lambda l, r, n: l + r,
    '-': lambda l, r, n: l - r,
    '*': lambda l, r, n: l * r,
    '/': _div,
    '<': lambda l, r, n: l < r,
    '>': lambda l, r, n: l > r,
    '==': lambda l, r, n: l == r,
}


class ExpressionEvaluator:
    """Computes expression values against the interpreter's live state.
    Function calls re-enter the instruction executor through the registry.
    """
    def __init__(self, engine: "RoboMLInterpreter") -> None:
        self.engine = engine
        self._dispatch = {
            NumberLiteral: self._number,
            BooleanLiteral: self._boolean,
            BinaryExpression: self._binary,
            VariableRef: self._variable,
            FunctionCall: self.call,
            SensorAccess: self._sensor,
        }

    def evaluate(self, node) -> Optional[Value]:
        handler = self._dispatch.get(type(node))
        if handler is None:
            raise UnknownExpressionKind(f"Unknown expression type: {type(node).__name__}", node)
        return handler(node)

    # --------- leaves ---------
    def _number(self, node: NumberLiteral) -> float:
        return node.value

    def _boolean(self, node: BooleanLiteral) -> bool:
        return node.value

    def _variable(self, node: VariableRef) -> Value:
        if node.variable is None:
            raise UnresolvedReferenceError(
                f"Unresolved variable reference{': ' + node.name if node.name else ''}", node)
        return self.engine.env.read(node.variable.name)

    # --------- composite ---------
    def _binary(self, node: BinaryExpression) -> Value:
        op = OPERATORS.get(node.operator)
        if op is None:
            raise UnknownOperator(f"Unknown operator: {node.operator}", node)
        left = self.evaluate(node.left)
        right = self.evaluate(node.right)
        return op(left, right, node)

    def call(self, node: FunctionCall) -> Optional[Value]:
        """Evaluate arguments left to right, then run the callee.
        Void callees yield None; using that as a value is rejected upstream.
        """
        if node.function is None:
            raise UnresolvedReferenceError(
                f"Unresolved function reference{': ' + node.name if node.name else ''}", node)
        args = [self.evaluate(a) for a in node.arguments]
        engine = self.engine
        return engine.functions.call(node.function, args, engine.env, engine.executor.execute_block)

    def _sensor(self, node: SensorAccess) -> float:
        engine = self.engine
        if node.sensor == SENSOR_DISTANCE:
            return engine.caster.distance(engine.robot.sensing_ray(), DISTANCE_FALLBACK_MM)
        if node.sensor == SENSOR_TIMESTAMP:
            return engine.clock.time
        raise UnknownSensorError(node.sensor)
