# ================================
# file: appio/logger.py
# ================================
from __future__ import annotations
from datetime import datetime
from typing import IO
import os

from core.config import LOG_DIR


def log_to_file(log_file, message, module="MAIN"):
    """Write message to log file with timestamp and module"""
    timestamp = datetime.now().strftime("%H:%M:%S.%f")[:-3]
    log_entry = f"[{timestamp}] [{module}] {message}\n"
    log_file.write(log_entry)
    log_file.flush()  # Ensure immediate write
    print(log_entry.strip())  # Also print to console


def open_run_log(prefix: str = "roboml_run", log_dir: str = LOG_DIR) -> IO[str]:
    """Create `<log_dir>/<prefix>_<YYYYmmdd_HHMMSS>.txt` and return it open for writing."""
    os.makedirs(log_dir, exist_ok=True)
    log_filename = f"{prefix}_{datetime.now().strftime('%Y%m%d_%H%M%S')}.txt"
    return open(os.path.join(log_dir, log_filename), 'w', encoding='utf-8')
