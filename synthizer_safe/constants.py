"""
Engine Constants - Property IDs and enumerations.

Values are the native encoding from synthizer_constants.h and must match
the engine exactly. A wrong value is either rejected by the engine or,
worse, read with the wrong shape.
"""

from __future__ import annotations

import logging
from enum import Enum, IntEnum


class Property(IntEnum):
    """Native property IDs (SYZ_PROPERTIES)."""

    AZIMUTH = 0
    BUFFER = 1
    CLOSENESS_BOOST = 2
    CLOSENESS_BOOST_DISTANCE = 3
    DISTANCE_MAX = 4
    DISTANCE_MODEL = 5
    DISTANCE_REF = 6
    ELEVATION = 7
    GAIN = 8
    PANNER_STRATEGY = 9
    PANNING_SCALAR = 10
    POSITION = 11
    ORIENTATION = 12
    ROLLOFF = 13
    LOOPING = 14
    NOISE_TYPE = 15


class PannerStrategy(IntEnum):
    """How a spatialized source is panned."""

    HRTF = 0
    STEREO = 1


class DistanceModel(IntEnum):
    """Attenuation curve of a 3D source."""

    NONE = 0
    LINEAR = 1
    EXPONENTIAL = 2
    INVERSE = 3


class NoiseType(IntEnum):
    """Noise colour produced by a NoiseGenerator."""

    UNIFORM = 0
    VM = 1
    FILTERED_BROWN = 2


class LogLevel(IntEnum):
    """Native engine log levels."""

    ERROR = 0
    WARN = 10
    INFO = 20
    DEBUG = 30

    @classmethod
    def from_logging(cls, level: int) -> "LogLevel":
        """Map a Python ``logging`` level to the native level.

        Raises:
            ValueError: If the level has no native counterpart.
        """
        mapping = {
            logging.ERROR: cls.ERROR,
            logging.WARNING: cls.WARN,
            logging.INFO: cls.INFO,
            logging.DEBUG: cls.DEBUG,
        }
        try:
            return mapping[level]
        except KeyError:
            raise ValueError(f"Log level not supported: {logging.getLevelName(level)}") from None

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        """Parse a level name such as ``"debug"`` or ``"warning"``."""
        normalized = name.strip().upper()
        if normalized == "WARNING":
            normalized = "WARN"
        try:
            return cls[normalized]
        except KeyError:
            raise ValueError(f"Unknown log level: {name!r}") from None


class LoggingBackend(IntEnum):
    """Where the native engine writes its log."""

    NONE = 0
    STDERR = 1

    @classmethod
    def from_name(cls, name: str) -> "LoggingBackend":
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown logging backend: {name!r}") from None


class StreamProtocol(Enum):
    """Protocol tag for stream-backed buffers and generators."""

    FILE = "file"
