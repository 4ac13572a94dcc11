# ================================
# file: sim/entities.py
# ================================
"""Static scene obstacles and the sensing ray.
Every entity reduces to line segments; intersection is vectorized with numpy
over an entity's segments.
"""
from abc import ABC, abstractmethod
from typing import Dict, Optional
import math
import numpy as np

from core.config import INTERSECT_EPS, RAY_LENGTH_MM
from core.types import Vector2


class Ray:
    """Finite ray from `origin` along `angle` (radians)."""
    __slots__ = ("origin", "angle", "length")

    def __init__(self, origin: Vector2, angle: float, length: float = RAY_LENGTH_MM) -> None:
        self.origin = origin.copy()
        self.angle = float(angle)
        self.length = float(length)

    def end(self) -> Vector2:
        return Vector2(self.origin.x + self.length * math.cos(self.angle),
                       self.origin.y + self.length * math.sin(self.angle))


def intersect_segments(ray: Ray, segments: np.ndarray) -> Optional[np.ndarray]:
    """Nearest hit of `ray` on `segments` (N x 4 array of x1,y1,x2,y2), or None.

    t parametrizes the segment, u the ray; both must lie in [0, 1].
    Parallel and collinear pairs never count as hits.
    """
    segs = np.atleast_2d(np.asarray(segments, dtype=float))
    if segs.size == 0:
        return None
    x1, y1, x2, y2 = segs[:, 0], segs[:, 1], segs[:, 2], segs[:, 3]
    x3, y3 = ray.origin.x, ray.origin.y
    end = ray.end()
    x4, y4 = end.x, end.y

    den = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
    valid = np.abs(den) > INTERSECT_EPS
    safe_den = np.where(valid, den, 1.0)
    t = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / safe_den
    u = -((x1 - x2) * (y1 - y3) - (y1 - y2) * (x1 - x3)) / safe_den

    hit = valid & (t >= 0.0) & (t <= 1.0) & (u >= 0.0) & (u <= 1.0)
    if not np.any(hit):
        return None

    px = x1 + t * (x2 - x1)
    py = y1 + t * (y2 - y1)
    dist = np.where(hit, np.hypot(px - x3, py - y3), np.inf)
    k = int(np.argmin(dist))
    return np.array([px[k], py[k]])


class Entity(ABC):
    """Static obstacle; immutable for the run."""
    type: str = "Entity"

    def __init__(self, pos: Vector2, size: Vector2) -> None:
        self.pos = pos.copy()
        self.size = size.copy()

    @abstractmethod
    def segments(self) -> np.ndarray:
        """Outline as an N x 4 array of (x1, y1, x2, y2)."""
        pass

    def intersect(self, ray: Ray) -> Optional[Vector2]:
        poi = intersect_segments(ray, self.segments())
        if poi is None:
            return None
        return Vector2(poi[0], poi[1])

    def to_dict(self) -> Dict:
        return {"type": self.type, "pos": self.pos.to_dict(), "size": self.size.to_dict()}

    def __repr__(self) -> str:
        return f"{self.type}(pos={self.pos!r}, size={self.size!r})"


class Wall(Entity):
    """Line segment; `pos` and `size` are its two endpoints."""
    type = "Wall"

    def segments(self) -> np.ndarray:
        return np.array([[self.pos.x, self.pos.y, self.size.x, self.size.y]], dtype=float)


class Block(Entity):
    """Axis-aligned rectangle with corner `pos` and extent `size`."""
    type = "Block"

    def segments(self) -> np.ndarray:
        x0, y0 = self.pos.x, self.pos.y
        x1, y1 = x0 + self.size.x, y0 + self.size.y
        return np.array([
            [x0, y0, x1, y0],
            [x1, y0, x1, y1],
            [x1, y1, x0, y1],
            [x0, y1, x0, y0],
        ], dtype=float)


ENTITY_TYPES: Dict[str, type] = {
    Wall.type: Wall,
    Block.type: Block,
}
