# ================================
# file: core/config.py
# ================================
"""
Global configuration for the RoboML execution engine.
All lengths are millimeters, angles radians unless noted, time milliseconds.

Organization:
1. Scene
2. Robot Physical Parameters
3. Sensor Configuration
4. Interpreter
5. Units
6. Logging
"""
from __future__ import annotations
import math

# ================================
# 1. SCENE
# ================================
SCENE_SIZE_X: float = 10000.0       # Scene width (mm)
SCENE_SIZE_Y: float = 10000.0       # Scene height (mm)
DEFAULT_ENTITY_TYPE: str = "Wall"   # Type tag used when a layout omits it

# ================================
# 2. ROBOT PHYSICAL PARAMETERS
# ================================
ROBOT_SIZE_X: float = 250.0         # Robot footprint (mm)
ROBOT_SIZE_Y: float = 250.0
ROBOT_START_X: float = SCENE_SIZE_X / 2.0   # Start at scene centre
ROBOT_START_Y: float = SCENE_SIZE_Y / 2.0
ROBOT_START_THETA: float = 0.0      # Heading (rad), +x axis
ROBOT_DEFAULT_SPEED: float = 30.0   # mm/s

# ================================
# 3. SENSOR CONFIGURATION
# ================================
RAY_LENGTH_MM: float = 100000.0     # Sensing ray length, larger than any scene
DISTANCE_FALLBACK_MM: float = 10000.0  # getDistance result when nothing is hit
INTERSECT_EPS: float = 1e-9         # Parallel-line tolerance for ray tests

SENSOR_DISTANCE: str = "getDistance"
SENSOR_TIMESTAMP: str = "getTimestamp"

# ================================
# 4. INTERPRETER
# ================================
ENTRY_FUNCTION: str = "entry"       # Program entry point (no arguments)
ENTRY_REQUIRED: bool = False        # True: missing entry raises instead of empty scene
MAX_LOOP_ITERATIONS: int = 100_000  # Hard cap on loop body executions
ROTATE_MS_PER_DEG: float = 5.0      # Rotation duration per degree (ms)
MS_PER_S: float = 1000.0

# ================================
# 5. UNITS
# ================================
# Factor converting one unit to internal millimeters.
UNIT_TO_MM: dict = {
    'mm': 1.0,
    'cm': 10.0,
}
DEFAULT_UNIT: str = 'mm'
DEG_TO_RAD: float = math.pi / 180.0

# ================================
# 6. LOGGING
# ================================
INTERP_VERBOSE: bool = False        # Trace every movement/rotation to console
LOG_DIR: str = "logs"               # Run logs written by main.py --log
