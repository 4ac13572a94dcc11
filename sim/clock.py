# ================================
# file: sim/clock.py
# ================================
"""Virtual simulation time and the append-only trajectory it stamps.
Only Movement and Rotate advance time; each advance records one pose.
"""
from __future__ import annotations
from typing import List

from core.types import Timestamp
from .robot_sim import RobotSim


class SimulationClock:
    """Monotonic virtual time in milliseconds, starting at 0."""
    def __init__(self) -> None:
        self.time: float = 0.0

    def reset(self) -> None:
        self.time = 0.0

    def advance(self, duration_ms: float) -> float:
        if duration_ms < 0:
            raise ValueError(f"clock cannot run backwards ({duration_ms} ms)")
        self.time += duration_ms
        return self.time


class TrajectoryRecorder:
    """Chronological pose log; never reordered or pruned during a run."""
    def __init__(self, clock: SimulationClock) -> None:
        self.clock = clock
        self.timestamps: List[Timestamp] = []

    def reset(self) -> None:
        self.timestamps = []

    def advance_and_record(self, duration_ms: float, robot: RobotSim) -> Timestamp:
        """Advance the clock and append the robot pose at the new time."""
        now = self.clock.advance(duration_ms)
        ts = robot.snapshot(now)
        self.timestamps.append(ts)
        return ts

    def __len__(self) -> int:
        return len(self.timestamps)
