# ================================
# file: interp/__init__.py
# ================================
"""
Interpreter Package

Environment, evaluator, executor and the run orchestrator.
"""
from interp.environment import Environment, FunctionRegistry
from interp.results import ExecResult, Completed, Returning, COMPLETED
from interp.evaluator import ExpressionEvaluator
from interp.executor import InstructionExecutor, to_mm
from interp.interpreter import RoboMLInterpreter

__all__ = [
    'Environment', 'FunctionRegistry',
    'ExecResult', 'Completed', 'Returning', 'COMPLETED',
    'ExpressionEvaluator', 'InstructionExecutor', 'to_mm',
    'RoboMLInterpreter',
]
