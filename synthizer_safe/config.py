"""
Configuration - How the engine is located and how it logs.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from synthizer_safe.constants import LoggingBackend, LogLevel
from synthizer_safe.native.loader import LIBRARY_ENV_VAR

LOG_LEVEL_ENV_VAR = "SYNTHIZER_LOG_LEVEL"
LOGGING_BACKEND_ENV_VAR = "SYNTHIZER_LOGGING_BACKEND"


def _env(name: str) -> str | None:
    value = os.environ.get(name)
    return value or None


@dataclass
class SynthizerConfig:
    """Engine configuration.

    Each field defaults from the environment:
        SYNTHIZER_LIBRARY           path to the shared library
        SYNTHIZER_LOG_LEVEL         error, warn, info or debug
        SYNTHIZER_LOGGING_BACKEND   stderr or none

    A field left as None is not forwarded to the engine.
    """
    library_path: Path | None = field(default_factory=lambda: _env(LIBRARY_ENV_VAR))
    log_level: LogLevel | None = field(default_factory=lambda: _env(LOG_LEVEL_ENV_VAR))
    logging_backend: LoggingBackend | None = field(
        default_factory=lambda: _env(LOGGING_BACKEND_ENV_VAR)
    )

    def __post_init__(self):
        if self.library_path is not None:
            self.library_path = Path(self.library_path)
        if isinstance(self.log_level, str):
            self.log_level = LogLevel.from_name(self.log_level)
        elif self.log_level is not None:
            self.log_level = LogLevel(self.log_level)
        if isinstance(self.logging_backend, str):
            self.logging_backend = LoggingBackend.from_name(self.logging_backend)
        elif self.logging_backend is not None:
            self.logging_backend = LoggingBackend(self.logging_backend)

    @classmethod
    def from_env(cls) -> "SynthizerConfig":
        """Build a config purely from the current environment."""
        return cls()
