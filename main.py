# ================================
# file: main.py
# ================================
from __future__ import annotations
"""Project entrypoint: executes a RoboML program and prints the resulting scene.
- The program is a JSON AST exported by the RoboML language server.
- The optional scene layout is a JSON obstacle file (walls as segments).

Usage:
    python main.py --program ./data/square.json
    python main.py --program ./data/square.json --scene ./data/arena.json --bounded --log
"""
import argparse
import json
import sys
from datetime import datetime
from typing import Optional

from core.config import ENTRY_FUNCTION, MAX_LOOP_ITERATIONS
from appio import log_to_file, open_run_log, execute_json, failure_message, dumps
from interp import RoboMLInterpreter
from sim import SceneLayout, load_layout


def run(program_path: str, scene_path: Optional[str] = None, bounded: bool = False,
        entry: str = ENTRY_FUNCTION, strict_entry: bool = False,
        max_loop_iterations: int = MAX_LOOP_ITERATIONS,
        verbose: bool = False, use_log: bool = False) -> dict:
    """Wire loader, layout and interpreter, run once, return the boundary message.
    Parameters
    ----------
    program_path : JSON AST of the program.
    scene_path   : Obstacle layout JSON. If None, an empty default scene is used.
    bounded      : Add the four scene border walls to the layout.
    strict_entry : Fail instead of returning an empty scene when entry is missing.
    use_log      : Also write a timestamped run log under logs/.
    """
    log_file = open_run_log() if use_log else None
    logger_func = log_to_file if log_file else None

    try:
        if log_file:
            log_to_file(log_file, "=" * 60)
            log_to_file(log_file, "RoboML execution log")
            log_to_file(log_file, f"Start: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
            log_to_file(log_file, f"Program: {program_path}")
            log_to_file(log_file, f"Scene: {scene_path if scene_path else 'default empty scene'}")
            log_to_file(log_file, "=" * 60)

        try:
            layout = load_layout(scene_path, logger_func, log_file) if scene_path else SceneLayout()
            with open(program_path, "r", encoding="utf-8") as f:
                program_data = json.load(f)
        except (OSError, ValueError) as e:
            return failure_message(f"Cannot execute: {e}")

        if bounded:
            layout = layout.with_boundary()

        interpreter = RoboMLInterpreter(layout=layout, entry=entry, entry_required=strict_entry,
                                        max_loop_iterations=max_loop_iterations, verbose=verbose,
                                        logger_func=logger_func, log_file=log_file)
        return execute_json(program_data, interpreter)
    finally:
        if log_file:
            log_file.close()


def _parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Execute a RoboML program and print its scene as JSON")
    ap.add_argument("--program", type=str, required=True, help="program JSON AST path")
    ap.add_argument("--scene", type=str, default=None, help="scene layout JSON path")
    ap.add_argument("--bounded", action="store_true", help="add scene border walls")
    ap.add_argument("--entry", type=str, default=ENTRY_FUNCTION, help="entry function name")
    ap.add_argument("--strict-entry", action="store_true", help="fail when the entry function is missing")
    ap.add_argument("--max-loop", type=int, default=MAX_LOOP_ITERATIONS, help="loop iteration cap")
    ap.add_argument("--verbose", action="store_true", help="trace every robot command")
    ap.add_argument("--log", action="store_true", help="write a run log under logs/")
    ap.add_argument("--out", type=str, default=None, help="write the result message here instead of stdout")
    return ap.parse_args(argv)


def main(argv=None) -> int:
    args = _parse_args(argv)
    message = run(args.program, scene_path=args.scene, bounded=args.bounded, entry=args.entry,
                  strict_entry=args.strict_entry, max_loop_iterations=args.max_loop,
                  verbose=args.verbose, use_log=args.log)
    if args.out:
        with open(args.out, "w", encoding="utf-8") as f:
            f.write(dumps(message) + "\n")
    else:
        sys.stdout.write(dumps(message) + "\n")
    return 0 if message["ok"] else 1


if __name__ == "__main__":
    sys.exit(main())
