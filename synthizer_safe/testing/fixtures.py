"""
Test Fixtures - Sample data and ready-made engines for tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from synthizer_safe.testing.mock import MockSynthizer

if TYPE_CHECKING:
    from synthizer_safe.engine import Synthizer


def create_test_samples(
    duration: float = 1.0,
    sample_rate: int = 44100,
    channels: int = 1,
    frequency: float = 440.0,
    amplitude: float = 0.5,
) -> np.ndarray:
    """
    Create a sine tone.

    Returns:
        ``(frames,)`` float32 for mono, ``(frames, channels)`` otherwise.
    """
    num_samples = int(duration * sample_rate)
    t = np.arange(num_samples, dtype=np.float32) / sample_rate
    tone = (np.sin(2 * np.pi * frequency * t) * amplitude).astype(np.float32)
    if channels == 1:
        return tone
    return np.repeat(tone[:, np.newaxis], channels, axis=1)


def create_test_engine(mock: MockSynthizer | None = None) -> "Synthizer":
    """Create an initialized guard backed by a MockSynthizer."""
    from synthizer_safe.config import SynthizerConfig
    from synthizer_safe.engine import Synthizer

    config = SynthizerConfig(library_path=None, log_level=None, logging_backend=None)
    return Synthizer(config, lib=mock or MockSynthizer())
