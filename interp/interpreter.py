# ================================
# file: interp/interpreter.py
# ================================
from __future__ import annotations
"""Execution engine entrypoint.

    interp = RoboMLInterpreter(layout=load_layout("arena.json"))
    scene = interp.interpret(program)      # sim.Scene
    payload = scene.to_dict()              # JSON-safe, for the playback client

One instance may run many programs; every run starts from a clean
environment, registry, clock, robot pose and trajectory.
"""
from typing import List, Optional

from core.config import ENTRY_FUNCTION, ENTRY_REQUIRED, INTERP_VERBOSE, MAX_LOOP_ITERATIONS
from core.errors import MissingEntryError
from lang.ast_nodes import Program
from sim import RayCaster, Scene, SceneLayout, SimulationClock, TrajectoryRecorder
from interp.environment import Environment, FunctionRegistry
from interp.evaluator import ExpressionEvaluator
from interp.executor import InstructionExecutor


class RoboMLInterpreter:
    """Tree-walking interpreter producing a time-stamped robot trajectory."""

    def __init__(self, layout: Optional[SceneLayout] = None,
                 entry: str = ENTRY_FUNCTION,
                 entry_required: bool = ENTRY_REQUIRED,
                 max_loop_iterations: int = MAX_LOOP_ITERATIONS,
                 verbose: bool = INTERP_VERBOSE,
                 logger_func=None, log_file=None) -> None:
        self.layout = layout or SceneLayout()
        self.entry = entry
        self.entry_required = entry_required
        self.verbose = verbose
        self.logger_func = logger_func
        self.log_file = log_file

        self.env = Environment()
        self.functions = FunctionRegistry()
        self.robot = self.layout.make_robot()
        self.clock = SimulationClock()
        self.recorder = TrajectoryRecorder(self.clock)
        self.caster = RayCaster(self.layout.entities)
        self.warnings: List[str] = []

        self.evaluator = ExpressionEvaluator(self)
        self.executor = InstructionExecutor(self, max_loop_iterations=max_loop_iterations)

    # --------- logging ---------
    def log(self, message: str, tag: str = "INTERP") -> None:
        # log_to_file echoes to the console itself
        if self.logger_func and self.log_file:
            self.logger_func(self.log_file, message, tag)
        else:
            print(f"[{tag}] {message}")

    def trace(self, message: str) -> None:
        """Per-instruction detail, only when verbose."""
        if self.verbose:
            self.log(message)

    def warn(self, message: str) -> None:
        """Non-fatal condition; kept in `warnings` and logged."""
        self.warnings.append(message)
        self.log(message, "WARN")

    # --------- run ---------
    def reset(self) -> None:
        self.env.reset()
        self.functions = FunctionRegistry()
        self.robot.reset()
        self.clock.reset()
        self.recorder.reset()
        self.warnings = []

    def interpret(self, program: Program) -> Scene:
        """Run `entry` of `program` to completion and return the resulting scene.
        Fatal errors (core.errors) propagate; no partial scene is produced.
        """
        self.reset()
        self.functions.load(program)
        self.log("Starting interpretation...")
        self.log(f"Functions found: {list(self.functions.functions)}")

        entry = self.functions.get(self.entry)
        if entry is None:
            if self.entry_required:
                raise MissingEntryError(self.entry)
            self.warn(f"No '{self.entry}' function found - nothing to execute")
            return self.snapshot()

        self.functions.call(entry, [], self.env, self.executor.execute_block)

        scene = self.snapshot()
        self.log(f"Interpretation complete: timestamps={len(scene.timestamps)} "
                 f"time={scene.time:.0f}ms")
        self.log(f"Robot final pos: ({self.robot.pos.x:.1f}, {self.robot.pos.y:.1f}) "
                 f"rad={self.robot.rad:.3f}")
        return scene

    def snapshot(self) -> Scene:
        """Freeze the current state into a Scene value."""
        return Scene(size=self.layout.size,
                     entities=self.layout.entities,
                     robot=self.robot.to_dict(),
                     time=self.clock.time,
                     timestamps=self.recorder.timestamps)
