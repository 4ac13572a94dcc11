# ================================
# file: sim/scene.py
# ================================
from __future__ import annotations
from typing import Dict, List, Optional, Sequence
import json
import math
import numpy as np

from core.config import (
    SCENE_SIZE_X, SCENE_SIZE_Y, ROBOT_START_X, ROBOT_START_Y, ROBOT_START_THETA,
    ROBOT_SIZE_X, ROBOT_SIZE_Y, ROBOT_DEFAULT_SPEED, DEFAULT_ENTITY_TYPE,
)
from core.errors import ProgramFormatError
from core.types import Vector2, Timestamp
from .entities import Entity, Wall, Block, ENTITY_TYPES
from .robot_sim import RobotSim


class SceneLayout:
    """Static part of a scene: size, obstacles and the robot start state.
    Shared read-only by every run of an interpreter.
    """
    def __init__(self, size: Optional[Vector2] = None, entities: Sequence[Entity] = (),
                 robot_start: Optional[Vector2] = None, robot_theta: float = ROBOT_START_THETA,
                 robot_size: Optional[Vector2] = None, robot_speed: float = ROBOT_DEFAULT_SPEED) -> None:
        self.size = (size or Vector2(SCENE_SIZE_X, SCENE_SIZE_Y)).copy()
        self.entities: List[Entity] = list(entities)
        self.robot_start = (robot_start or Vector2(ROBOT_START_X, ROBOT_START_Y)).copy()
        self.robot_theta = float(robot_theta)
        self.robot_size = (robot_size or Vector2(ROBOT_SIZE_X, ROBOT_SIZE_Y)).copy()
        self.robot_speed = float(robot_speed)

    def make_robot(self) -> RobotSim:
        return RobotSim(pos=self.robot_start, rad=self.robot_theta,
                        size=self.robot_size, speed=self.robot_speed)

    def with_boundary(self) -> "SceneLayout":
        """Copy of this layout with the four scene border walls appended."""
        w, h = self.size.x, self.size.y
        border = [
            Wall(Vector2(0, 0), Vector2(w, 0)),
            Wall(Vector2(w, 0), Vector2(w, h)),
            Wall(Vector2(w, h), Vector2(0, h)),
            Wall(Vector2(0, h), Vector2(0, 0)),
        ]
        return SceneLayout(self.size, self.entities + border, self.robot_start,
                           self.robot_theta, self.robot_size, self.robot_speed)


class Scene:
    """Result of one run. Built once, then only read and serialized."""
    def __init__(self, size: Vector2, entities: Sequence[Entity], robot: Dict,
                 time: float, timestamps: Sequence[Timestamp]) -> None:
        self.size = size.copy()
        self.entities = tuple(entities)
        self.robot = dict(robot)
        self.time = float(time)
        self.timestamps = tuple(timestamps)

    def to_dict(self) -> Dict:
        """Flat, JSON-safe record for the playback client."""
        return {
            "size": self.size.to_dict(),
            "entities": [e.to_dict() for e in self.entities],
            "robot": {
                "type": "Robot",
                "pos": dict(self.robot["pos"]),
                "size": dict(self.robot["size"]),
                "rad": self.robot["rad"],
                "speed": self.robot["speed"],
            },
            "time": self.time,
            "timestamps": [ts.to_dict() for ts in self.timestamps],
        }


# ---------------------------------------------------------------
# JSON layout loading
# ---------------------------------------------------------------
def _pair(raw, what: str) -> Vector2:
    """[x, y] or {"x":..,"y":..} -> Vector2"""
    if isinstance(raw, dict):
        try:
            return Vector2(raw["x"], raw["y"])
        except KeyError as e:
            raise ProgramFormatError(f"{what}: missing key {e}") from e
    try:
        arr = np.asarray(raw, dtype=float).reshape(-1)
    except (TypeError, ValueError):
        raise ProgramFormatError(f"{what}: expected 2 numbers, got {raw!r}") from None
    if arr.shape != (2,):
        raise ProgramFormatError(f"{what}: expected 2 numbers, got {raw!r}")
    return Vector2(arr[0], arr[1])


def layout_from_dict(data: Dict) -> SceneLayout:
    """Build a layout from a JSON object.

    Keys (all optional):
    - "size": [W, H]
    - "segments": [{"start": [x, y], "end": [x, y]}]   -> Wall
    - "blocks": [{"pos": [x, y], "size": [w, h]}]      -> Block
    - "entities": [{"type", "pos": {x, y}, "size": {x, y}}] (scene output format)
    - "start_point": [x, y], "start_theta_deg": float, "robot_size": [w, h], "speed": float
    """
    if not isinstance(data, dict):
        raise ProgramFormatError("Scene layout must be a JSON object")

    entities: List[Entity] = []
    for i, seg in enumerate(data.get("segments", [])):
        if "start" not in seg or "end" not in seg:
            raise ProgramFormatError(f"segment {i}: needs 'start' and 'end'")
        entities.append(Wall(_pair(seg["start"], f"segment {i}"), _pair(seg["end"], f"segment {i}")))
    for i, blk in enumerate(data.get("blocks", [])):
        entities.append(Block(_pair(blk.get("pos"), f"block {i}"), _pair(blk.get("size"), f"block {i}")))
    for i, ent in enumerate(data.get("entities", [])):
        kind = ent.get("type", DEFAULT_ENTITY_TYPE)
        cls = ENTITY_TYPES.get(kind)
        if cls is None:
            raise ProgramFormatError(f"entity {i}: unknown type {kind!r}")
        entities.append(cls(_pair(ent.get("pos"), f"entity {i}"), _pair(ent.get("size"), f"entity {i}")))

    size = _pair(data["size"], "size") if "size" in data else None
    start = _pair(data["start_point"], "start_point") if "start_point" in data else None
    if start is None and size is not None:
        start = Vector2(size.x / 2.0, size.y / 2.0)
    theta = math.radians(float(data.get("start_theta_deg", 0.0)))
    robot_size = _pair(data["robot_size"], "robot_size") if "robot_size" in data else None
    speed = float(data.get("speed", ROBOT_DEFAULT_SPEED))

    return SceneLayout(size=size, entities=entities, robot_start=start, robot_theta=theta,
                       robot_size=robot_size, robot_speed=speed)


def load_layout(path: str, logger_func=None, log_file=None) -> SceneLayout:
    """Load a scene layout from a JSON file."""
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ProgramFormatError(f"{path}: invalid JSON ({e})") from e

    layout = layout_from_dict(data)
    msg = (f"Scene layout {path}: size={layout.size.as_tuple()}, "
           f"{len(layout.entities)} entities, start={layout.robot_start.as_tuple()}")
    if logger_func and log_file:
        logger_func(log_file, msg, "SCENE")
    else:
        print(f"[SCENE] {msg}")
    return layout
