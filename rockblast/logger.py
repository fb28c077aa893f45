"""Lightweight leveled logging.

Every module grabs a named logger via ``get_logger("waves")`` and writes
``[HH:MM:SS] LEVEL name: message`` lines. The minimum level comes from the
``ROCKBLAST_LOG_LEVEL`` environment variable (DEBUG, INFO, WARN, ERROR).
"""

from __future__ import annotations

import os
import sys
import time
from dataclasses import dataclass, field
from typing import TextIO

_LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}
_DEFAULT_LEVEL_NAME = os.environ.get("ROCKBLAST_LOG_LEVEL", "INFO").upper()
_MIN_LEVEL = _LEVELS.get(_DEFAULT_LEVEL_NAME, 20)


def set_level(name: str) -> None:
    """Change the process-wide minimum level (unknown names are ignored)."""
    global _MIN_LEVEL
    _MIN_LEVEL = _LEVELS.get(name.upper(), _MIN_LEVEL)


@dataclass
class Logger:
    name: str
    stream: TextIO | None = field(default_factory=lambda: sys.stdout)

    def enabled_for(self, level: str) -> bool:
        return _LEVELS[level] >= _MIN_LEVEL

    def _log(self, level: str, *parts):
        if not self.enabled_for(level) or self.stream is None:
            return
        ts = time.strftime("%H:%M:%S")
        msg = " ".join(str(p) for p in parts)
        try:
            self.stream.write(f"[{ts}] {level:<5} {self.name}: {msg}\n")
            self.stream.flush()
        except (OSError, ValueError, AttributeError):
            # Windowed launches (pythonw) may not have a usable stdout.
            return

    def debug(self, *parts):
        self._log("DEBUG", *parts)

    def info(self, *parts):
        self._log("INFO", *parts)

    def warn(self, *parts):
        self._log("WARN", *parts)

    def error(self, *parts):
        self._log("ERROR", *parts)


def get_logger(name: str = "rockblast") -> Logger:
    return Logger(name)


__all__ = ["get_logger", "set_level", "Logger"]
