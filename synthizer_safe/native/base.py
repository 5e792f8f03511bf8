"""
Native Base - The C-ABI surface this package calls.

Both a loaded ``ctypes.CDLL`` and ``synthizer_safe.testing.MockSynthizer``
satisfy NativeLibrary. Out-parameters are always ctypes pointers, strings
are NUL-terminated ``c_char`` buffers, and every call except
``syz_setLogLevel`` returns a status code.

NATIVE CONTRACT:
    Callers MUST:
        - Check the status before reading any out-parameter
        - Pass handles as plain integers
        - Only pair a property ID with the shape the engine declares for it

    Callers MUST NOT:
        - Free a handle more than once
        - Call anything but logging configuration before initialize
        - Call anything after shutdown
"""

from __future__ import annotations

import ctypes
from typing import Any, Protocol, runtime_checkable

SyzHandle = ctypes.c_uint64
SyzErrorCode = ctypes.c_int

HandlePointer = Any
StringBuffer = Any


@runtime_checkable
class NativeLibrary(Protocol):
    """The raw Synthizer functions, as exposed through ctypes."""

    # Library lifecycle and logging
    def syz_configureLoggingBackend(self, backend: int, param: Any) -> int: ...
    def syz_setLogLevel(self, level: int) -> None: ...
    def syz_initialize(self) -> int: ...
    def syz_shutdown(self) -> int: ...
    def syz_handleFree(self, handle: int) -> int: ...

    # Typed property access
    def syz_getI(self, out: Any, target: int, prop: int) -> int: ...
    def syz_setI(self, target: int, prop: int, value: int) -> int: ...
    def syz_getD(self, out: Any, target: int, prop: int) -> int: ...
    def syz_setD(self, target: int, prop: int, value: float) -> int: ...
    def syz_getO(self, out: HandlePointer, target: int, prop: int) -> int: ...
    def syz_setO(self, target: int, prop: int, value: int) -> int: ...
    def syz_getD3(self, x: Any, y: Any, z: Any, target: int, prop: int) -> int: ...
    def syz_setD3(self, target: int, prop: int, x: float, y: float, z: float) -> int: ...
    def syz_getD6(
        self, x1: Any, y1: Any, z1: Any, x2: Any, y2: Any, z2: Any, target: int, prop: int
    ) -> int: ...
    def syz_setD6(
        self, target: int, prop: int,
        x1: float, y1: float, z1: float, x2: float, y2: float, z2: float,
    ) -> int: ...

    # Object creation
    def syz_createContext(self, out: HandlePointer) -> int: ...
    def syz_createBufferFromStream(
        self, out: HandlePointer, protocol: StringBuffer, path: StringBuffer, options: StringBuffer
    ) -> int: ...
    def syz_createBufferFromFloatArray(
        self, out: HandlePointer, sr: int, channels: int, frames: int, data: Any
    ) -> int: ...
    def syz_createStreamingGenerator(
        self, out: HandlePointer, context: int,
        protocol: StringBuffer, path: StringBuffer, options: StringBuffer,
    ) -> int: ...
    def syz_createBufferGenerator(self, out: HandlePointer, context: int) -> int: ...
    def syz_createNoiseGenerator(self, out: HandlePointer, context: int, channels: int) -> int: ...
    def syz_createDirectSource(self, out: HandlePointer, context: int) -> int: ...
    def syz_createPannedSource(self, out: HandlePointer, context: int) -> int: ...
    def syz_createSource3D(self, out: HandlePointer, context: int) -> int: ...

    # Buffer queries
    def syz_bufferGetChannels(self, out: Any, buffer: int) -> int: ...
    def syz_bufferGetLengthInSamples(self, out: Any, buffer: int) -> int: ...
    def syz_bufferGetLengthInSeconds(self, out: Any, buffer: int) -> int: ...

    # Source wiring
    def syz_sourceAddGenerator(self, source: int, generator: int) -> int: ...
    def syz_sourceRemoveGenerator(self, source: int, generator: int) -> int: ...
