"""
Synthizer Errors - Error types and native status translation.

Error hierarchy:
    SynthizerSafeError (base)
    ├── SynthizerError          (native call returned a non-zero status)
    ├── HandleReleasedError     (handle used after release)
    ├── EngineClosedError       (object created after guard shutdown)
    ├── LibraryNotFoundError    (native library could not be loaded)
    └── FatalNativeError        (HALT-level: release/shutdown failed)

The native status space is opaque. A SynthizerError carries the raw code
and nothing more is inferred from it.
"""

from __future__ import annotations

from typing import Any, TypeVar

T = TypeVar("T")


class SynthizerSafeError(Exception):
    """Base error for everything raised by this package."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class SynthizerError(SynthizerSafeError):
    """
    A native call failed.

    Attributes:
        code: The raw status code returned by the engine.
        call: Name of the native function, when known.
    """

    def __init__(
        self,
        code: int,
        call: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        if call:
            message = f"Synthizer error: {code} (from {call})"
        else:
            message = f"Synthizer error: {code}"
        super().__init__(message, details)
        self.code = code
        self.call = call


class HandleReleasedError(SynthizerSafeError):
    """
    Raised when a released handle is used.

    The native handle value may already belong to another object, so the
    call is refused before it reaches the engine.
    """

    def __init__(self, kind: str = "handle", details: dict[str, Any] | None = None):
        super().__init__(f"{kind} has already been released", details)
        self.kind = kind


class EngineClosedError(SynthizerSafeError):
    """Raised when an object is created through a guard that was closed.

    The call is refused before it reaches the engine.
    """

    def __init__(self, operation: str, details: dict[str, Any] | None = None):
        super().__init__(f"Synthizer is shut down; cannot {operation}", details)
        self.operation = operation


class LibraryNotFoundError(SynthizerSafeError):
    """Raised when the native Synthizer library cannot be located or loaded."""

    def __init__(
        self,
        message: str,
        searched: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, details)
        self.searched = searched or []


class FatalNativeError(SynthizerSafeError):
    """
    CRITICAL: the engine refused to free a handle or to shut down.

    This is a HALT-level error. The native heap may be corrupt. It is not a
    SynthizerError and is not meant to be recovered from.
    """

    def __init__(
        self,
        operation: str,
        code: int,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(f"[FATAL] {operation} failed with native code {code}", details)
        self.operation = operation
        self.code = code
        self.halt_required = True


def check(code: int, value: T = None, call: str | None = None) -> T:
    """Translate a native status code.

    Args:
        code: Status returned by the native call.
        value: Success value to pass through unchanged.
        call: Native function name, used only in the error message.

    Returns:
        ``value`` when ``code`` is zero.

    Raises:
        SynthizerError: If ``code`` is non-zero.
    """
    if code != 0:
        raise SynthizerError(code, call=call)
    return value
