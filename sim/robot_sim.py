# ================================
# file: sim/robot_sim.py
# ================================
from __future__ import annotations
from typing import Dict, Optional
import math
from core.types import Vector2, Timestamp
from core.config import (
    ROBOT_START_X, ROBOT_START_Y, ROBOT_START_THETA,
    ROBOT_SIZE_X, ROBOT_SIZE_Y, ROBOT_DEFAULT_SPEED, RAY_LENGTH_MM
)
from .entities import Ray

class RobotSim:
    """Kinematic robot model driven by interpreted Movement/Rotate/SetSpeed.
    Motion is instantaneous; the simulation clock accounts for duration.
    Heading grows without normalization so a trajectory keeps its winding.
    Coordinates follow the renderer: x right, y down, positive turn clockwise.
    """
    def __init__(self, pos: Optional[Vector2] = None, rad: float = ROBOT_START_THETA,
                 size: Optional[Vector2] = None, speed: float = ROBOT_DEFAULT_SPEED) -> None:
        self._start_pos = (pos or Vector2(ROBOT_START_X, ROBOT_START_Y)).copy()
        self._start_rad = float(rad)
        self._start_speed = float(speed)
        self.size = (size or Vector2(ROBOT_SIZE_X, ROBOT_SIZE_Y)).copy()
        self.pos = self._start_pos.copy()
        self.rad = self._start_rad
        self.speed = self._start_speed

    def reset(self) -> None:
        """Back to the start pose and speed."""
        self.pos = self._start_pos.copy()
        self.rad = self._start_rad
        self.speed = self._start_speed

    def move(self, dist: float) -> None:
        """Translate along the heading; negative backs up."""
        self.pos.x += dist * math.cos(self.rad)
        self.pos.y += dist * math.sin(self.rad)

    def strafe(self, dist: float) -> None:
        """Translate perpendicular to the heading; positive is to the right."""
        side = self.rad + math.pi / 2.0
        self.pos.x += dist * math.cos(side)
        self.pos.y += dist * math.sin(side)

    def turn(self, d_rad: float) -> None:
        self.rad += d_rad

    def set_speed(self, speed: float) -> None:
        self.speed = float(speed)

    def sensing_ray(self) -> Ray:
        return Ray(self.pos, self.rad, RAY_LENGTH_MM)

    def snapshot(self, time_ms: float) -> Timestamp:
        return Timestamp(time_ms, self.pos, self.size, self.rad, self.speed)

    def to_dict(self) -> Dict:
        return {
            "type": "Robot",
            "pos": self.pos.to_dict(),
            "size": self.size.to_dict(),
            "rad": self.rad,
            "speed": self.speed,
        }
