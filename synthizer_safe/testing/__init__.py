"""
Testing Utilities - Run code against a mock engine.

Components:
    MockSynthizer      - In-process stand-in for the native library
    MockErrorCode      - Status codes the mock returns
    CallRecord         - One recorded native call
    create_test_samples, create_test_engine

Usage:
    from synthizer_safe.testing import MockSynthizer, create_test_engine

    mock = MockSynthizer()
    engine = create_test_engine(mock)
    source = engine.new_context().new_direct_source()
    assert mock.kind_of(source.handle.value) == "direct_source"
"""

from synthizer_safe.testing.mock import (
    CallRecord,
    MockErrorCode,
    MockFile,
    MockObject,
    MockSynthizer,
)
from synthizer_safe.testing.fixtures import (
    create_test_engine,
    create_test_samples,
)

__all__ = [
    # Mock
    "MockSynthizer",
    "MockErrorCode",
    "MockFile",
    "MockObject",
    "CallRecord",
    # Fixtures
    "create_test_engine",
    "create_test_samples",
]
