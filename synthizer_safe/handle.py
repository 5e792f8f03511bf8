"""
Handle - Owned reference to one native Synthizer object.

Ownership rules:
    - A bound Handle owns exactly one native reference.
    - release() frees it at most once, whichever of close(), guard
      shutdown, or garbage collection gets there first.
    - Handles cannot be copied. Another owning reference comes only from
      an object-property get, which the engine counts.
"""

from __future__ import annotations

import ctypes
import logging
import threading
from typing import TYPE_CHECKING

from synthizer_safe.errors import FatalNativeError, HandleReleasedError, SynthizerSafeError
from synthizer_safe.native.base import SyzHandle

if TYPE_CHECKING:
    from synthizer_safe.engine import Synthizer
    from synthizer_safe.native.base import NativeLibrary

logger = logging.getLogger(__name__)


class Handle:
    """An owning wrapper around a native handle value.

    Example:
        handle = Handle.empty(engine, kind="Context")
        check(engine.lib.syz_createContext(handle.out_param()))
        handle.bind()
        ...
        handle.release()
    """

    def __init__(self, engine: "Synthizer", kind: str = "handle"):
        self._engine = engine
        self._cell = SyzHandle(0)
        self._bound = False
        self._released = False
        self._lock = threading.Lock()
        self._serial: int | None = None
        self.kind = kind

    @classmethod
    def empty(cls, engine: "Synthizer", kind: str = "handle") -> "Handle":
        """Create an unbound handle to receive a native create call's output."""
        return cls(engine, kind)

    @classmethod
    def adopt(cls, engine: "Synthizer", value: int, kind: str = "handle") -> "Handle":
        """Take ownership of a reference the engine has already counted.

        Used for object-property gets, where the engine increments the
        reference count before returning the value.
        """
        handle = cls(engine, kind)
        handle._cell.value = value
        handle.bind()
        return handle

    @property
    def lib(self) -> "NativeLibrary":
        return self._engine.lib

    @property
    def engine(self) -> "Synthizer":
        return self._engine

    @property
    def value(self) -> int:
        """The raw handle value.

        Raises:
            HandleReleasedError: If the handle was released.
        """
        if self._released:
            raise HandleReleasedError(self.kind, details={"handle": self._cell.value})
        return self._cell.value

    @property
    def bound(self) -> bool:
        return self._bound

    @property
    def released(self) -> bool:
        return self._released

    def out_param(self):
        """Pointer for a native create call to write the new handle into."""
        if self._bound or self._released:
            raise SynthizerSafeError(f"{self.kind} handle is already bound")
        return ctypes.pointer(self._cell)

    def bind(self) -> None:
        """Mark the handle as owning a reference and register it with the engine.

        Raises:
            EngineClosedError: If the guard has been closed.
        """
        if self._cell.value == 0:
            raise SynthizerSafeError(f"{self.kind} handle was not set by the engine")
        with self._lock:
            self._serial = self._engine._track(self)
            self._bound = True
        logger.debug("Bound %s handle %d", self.kind, self._cell.value)

    def release(self) -> None:
        """Free the native reference.

        Only the first call reaches the engine; later calls, and calls on
        a handle that was never bound, do nothing. A call made while the
        first is still freeing waits for it to finish, and the handle stays
        registered with the guard until the native free has returned.

        Raises:
            FatalNativeError: If the engine reports a failure freeing the
                handle. The native heap may be corrupt at this point.
        """
        with self._lock:
            if self._released or not self._bound:
                self._released = True
                return
            self._released = True
            value = self._cell.value
            try:
                code = self._engine.lib.syz_handleFree(value)
            finally:
                self._engine._untrack(self._serial)

        if code != 0:
            logger.critical("syz_handleFree(%d) failed for %s with code %d", value, self.kind, code)
            raise FatalNativeError(
                "syz_handleFree",
                code,
                details={"handle": value, "kind": self.kind},
            )
        logger.debug("Released %s handle %d", self.kind, value)

    def __copy__(self):
        raise TypeError(
            "Handles cannot be copied; read the object property again to get another reference"
        )

    def __deepcopy__(self, memo):
        return self.__copy__()

    def __del__(self):
        if getattr(self, "_bound", False) and not getattr(self, "_released", True):
            self.release()

    def __repr__(self) -> str:
        state = "released" if self._released else ("bound" if self._bound else "empty")
        return f"Handle({self.kind}, {self._cell.value}, {state})"
