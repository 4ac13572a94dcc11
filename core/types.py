# ================================
# file: core/types.py
# ================================
"""Shared data structures for positions and recorded robot poses.
Use minimal typing: Tuple/Optional/Dict only.
"""
from __future__ import annotations
from typing import Dict, Tuple
import math


class Vector2:
    """2D vector in scene coordinates.


    Attributes
    -----------
    x, y : millimeters
    """
    __slots__ = ("x", "y")


    def __init__(self, x: float, y: float) -> None:
        self.x = float(x)
        self.y = float(y)


    def copy(self) -> "Vector2":
        return Vector2(self.x, self.y)


    def minus(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)


    def norm(self) -> float:
        return math.hypot(self.x, self.y)


    def distance_to(self, other: "Vector2") -> float:
        return self.minus(other).norm()


    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y}


    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.x == other.x and self.y == other.y


    def __repr__(self) -> str:
        return f"Vector2({self.x}, {self.y})"




class Timestamp:
    """Robot pose recorded at one simulation time.

    Parameters
    ----------
    time : float
    Simulation time in milliseconds.
    pos, size : Vector2
    Copied on construction; later robot motion does not leak in.
    rad : float
    Heading in radians.
    speed : float
    Speed in mm/s.
    """
    __slots__ = ("time", "pos", "size", "rad", "speed")


    def __init__(self, time: float, pos: Vector2, size: Vector2,
        rad: float, speed: float) -> None:
        object.__setattr__(self, "time", float(time))
        object.__setattr__(self, "pos", pos.copy())
        object.__setattr__(self, "size", size.copy())
        object.__setattr__(self, "rad", float(rad))
        object.__setattr__(self, "speed", float(speed))


    def __setattr__(self, name, value) -> None:
        raise AttributeError("Timestamp is immutable")


    def to_dict(self) -> Dict:
        return {
            "type": "Robot",
            "pos": self.pos.to_dict(),
            "size": self.size.to_dict(),
            "rad": self.rad,
            "speed": self.speed,
            "time": self.time,
        }


    def __repr__(self) -> str:
        return (f"Timestamp(time={self.time:.1f}, pos=({self.pos.x:.1f}, {self.pos.y:.1f}), "
                f"rad={self.rad:.3f}, speed={self.speed:.1f})")
