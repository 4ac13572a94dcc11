# ================================
# file: appio/__init__.py
# ================================
from appio.logger import log_to_file, open_run_log
from appio.scene_io import execute_program, execute_json, success_message, failure_message, dumps

__all__ = ["log_to_file", "open_run_log", "execute_program", "execute_json",
           "success_message", "failure_message", "dumps"]
