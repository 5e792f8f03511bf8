"""Test configuration and fixtures."""

from __future__ import annotations

import pytest

from synthizer_safe import Context, Synthizer, SynthizerConfig
from synthizer_safe.testing import MockSynthizer


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the caller's Synthizer environment out of the tests."""
    for name in ("SYNTHIZER_LIBRARY", "SYNTHIZER_LOG_LEVEL", "SYNTHIZER_LOGGING_BACKEND"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def mock() -> MockSynthizer:
    """Provide a fresh mock native library with one registered file."""
    lib = MockSynthizer()
    lib.register_file("beep.wav", channels=2, frames=88200, sample_rate=44100)
    return lib


@pytest.fixture
def engine(mock: MockSynthizer):
    """Provide an initialized guard, shut down after the test."""
    guard = Synthizer(SynthizerConfig(), lib=mock)
    yield guard
    guard.close()


@pytest.fixture
def context(engine: Synthizer) -> Context:
    """Provide a context on the test engine."""
    return engine.new_context()
