"""Shared type aliases and enums for the plucky underline."""

from __future__ import annotations

from enum import Enum
from typing import Callable

FrameHandle = int
FrameCallback = Callable[[float], None]
PathSink = Callable[[str], None]


class Phase(Enum):
    IDLE = "idle"
    PULLING = "pulling"
    RELEASING = "releasing"


class ConfigError(ValueError):
    """Raised when a configuration value is out of range or unparsable."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(message)
