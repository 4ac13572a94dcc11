# ================================
# file: core/__init__.py
# ================================
"""
Core Package

Exports fundamental types, configuration, and the error taxonomy.
"""
from core.types import Vector2, Timestamp
from core.config import (
    # Scene configuration
    SCENE_SIZE_X, SCENE_SIZE_Y,

    # Robot configuration
    ROBOT_SIZE_X, ROBOT_SIZE_Y, ROBOT_START_X, ROBOT_START_Y, ROBOT_START_THETA,
    ROBOT_DEFAULT_SPEED,

    # Sensor configuration
    RAY_LENGTH_MM, DISTANCE_FALLBACK_MM, SENSOR_DISTANCE, SENSOR_TIMESTAMP,

    # Interpreter configuration
    ENTRY_FUNCTION, ENTRY_REQUIRED, MAX_LOOP_ITERATIONS, ROTATE_MS_PER_DEG,
    UNIT_TO_MM, DEFAULT_UNIT,
)
from core.errors import (
    InterpreterError, UndefinedVariableError, UnresolvedReferenceError,
    UnknownExpressionKind, UnknownInstructionKind, UnknownOperator,
    UnknownSensorError, DivisionByZeroError, MissingEntryError, ProgramFormatError,
)

__all__ = [
    # Types
    'Vector2', 'Timestamp',

    # Configuration
    'SCENE_SIZE_X', 'SCENE_SIZE_Y',
    'ROBOT_SIZE_X', 'ROBOT_SIZE_Y', 'ROBOT_START_X', 'ROBOT_START_Y', 'ROBOT_START_THETA',
    'ROBOT_DEFAULT_SPEED',
    'RAY_LENGTH_MM', 'DISTANCE_FALLBACK_MM', 'SENSOR_DISTANCE', 'SENSOR_TIMESTAMP',
    'ENTRY_FUNCTION', 'ENTRY_REQUIRED', 'MAX_LOOP_ITERATIONS', 'ROTATE_MS_PER_DEG',
    'UNIT_TO_MM', 'DEFAULT_UNIT',

    # Errors
    'InterpreterError', 'UndefinedVariableError', 'UnresolvedReferenceError',
    'UnknownExpressionKind', 'UnknownInstructionKind', 'UnknownOperator',
    'UnknownSensorError', 'DivisionByZeroError', 'MissingEntryError', 'ProgramFormatError',
]
