# ================================
# file: sim/__init__.py
# ================================
"""Simulation world: static obstacles, robot kinematics, distance sensing,
virtual clock and trajectory recording.
"""
from .entities import Entity, Wall, Block, Ray
from .robot_sim import RobotSim
from .raycast import RayCaster
from .clock import SimulationClock, TrajectoryRecorder
from .scene import Scene, SceneLayout, layout_from_dict, load_layout


__all__ = ["Entity", "Wall", "Block", "Ray", "RobotSim", "RayCaster",
           "SimulationClock", "TrajectoryRecorder",
           "Scene", "SceneLayout", "layout_from_dict", "load_layout"]
