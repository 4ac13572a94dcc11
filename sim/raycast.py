# ================================
# file: sim/raycast.py
# ================================
from __future__ import annotations
from typing import Optional, Sequence

from core.config import DISTANCE_FALLBACK_MM
from core.types import Vector2
from .entities import Entity, Ray


class RayCaster:
    """Nearest-obstacle query against the static entities of a scene.
    Nothing is cached: the robot moves between reads.
    """
    def __init__(self, entities: Sequence[Entity] = ()) -> None:
        self.entities = list(entities)

    def cast(self, ray: Ray) -> Optional[Vector2]:
        """Closest intersection point along `ray`, or None."""
        best: Optional[Vector2] = None
        best_d = float("inf")
        for e in self.entities:
            poi = e.intersect(ray)
            if poi is None:
                continue
            d = ray.origin.distance_to(poi)
            if d < best_d:
                best, best_d = poi, d
        return best

    def distance(self, ray: Ray, fallback: float = DISTANCE_FALLBACK_MM) -> float:
        """Distance (mm) from the ray origin to the nearest hit, `fallback` if none."""
        poi = self.cast(ray)
        if poi is None:
            return float(fallback)
        return ray.origin.distance_to(poi)
