"""
Engine Lifecycle - The guard bracketing native initialize and shutdown.

One guard per process. Creating it initializes the engine; closing it
releases every handle still alive (newest first) and then shuts the engine
down, exactly once. Every handle keeps a strong reference to its guard, so
a guard that is garbage collected without close() has no live handles left.
Once closed, the guard refuses to create or register new objects.

Usage:
    with Synthizer() as engine:
        context = engine.new_context()
        ...
"""

from __future__ import annotations

import itertools
import logging
import os
import threading
import weakref
from typing import TYPE_CHECKING

import numpy as np

from synthizer_safe.config import SynthizerConfig
from synthizer_safe.constants import LoggingBackend, LogLevel, StreamProtocol
from synthizer_safe.errors import EngineClosedError, FatalNativeError, check
from synthizer_safe.native.base import NativeLibrary
from synthizer_safe.native.loader import load_library
from synthizer_safe.objects.buffer import Buffer
from synthizer_safe.objects.context import Context

if TYPE_CHECKING:
    from synthizer_safe.handle import Handle

logger = logging.getLogger(__name__)

_guard_lock = threading.Lock()
_active_guards = 0


def set_log_level(lib: NativeLibrary, level: LogLevel | int) -> None:
    """Set the native engine's log level.

    Args:
        lib: Native library.
        level: A LogLevel, or a Python ``logging`` level
               (ERROR, WARNING, INFO or DEBUG).

    Raises:
        ValueError: For a ``logging`` level with no native counterpart.
    """
    if not isinstance(level, LogLevel):
        level = LogLevel.from_logging(level)
    lib.syz_setLogLevel(int(level))


def configure_logging_backend(lib: NativeLibrary, backend: LoggingBackend) -> None:
    """Choose where the native engine writes its log.

    Raises:
        SynthizerError: If the engine rejects the backend.
    """
    backend = LoggingBackend(backend)
    check(lib.syz_configureLoggingBackend(int(backend), None), call="syz_configureLoggingBackend")


class Synthizer:
    """The engine lifecycle guard.

    Args:
        config: Library location and native logging options.
        lib: An already loaded native library (or a mock). When omitted
             the library is loaded from ``config.library_path``.

    Raises:
        LibraryNotFoundError: If the library cannot be loaded.
        SynthizerError: If logging configuration or initialize fails.
    """

    def __init__(
        self,
        config: SynthizerConfig | None = None,
        lib: NativeLibrary | None = None,
    ):
        global _active_guards

        self.config = config or SynthizerConfig()
        self.lib = lib if lib is not None else load_library(self.config.library_path)

        self._live: dict[int, weakref.ref] = {}
        self._serials = itertools.count(1)
        self._lock = threading.Lock()
        self._initialized = False
        self._closed = False

        # Logging must be configured before initialize.
        if self.config.log_level is not None:
            set_log_level(self.lib, self.config.log_level)
        if self.config.logging_backend is not None:
            configure_logging_backend(self.lib, self.config.logging_backend)

        check(self.lib.syz_initialize(), call="syz_initialize")
        self._initialized = True

        with _guard_lock:
            if _active_guards:
                logger.warning(
                    "Another Synthizer guard is already active; the engine may not "
                    "support concurrent initialization"
                )
            _active_guards += 1
        logger.info("Synthizer initialized")

    @property
    def initialized(self) -> bool:
        return self._initialized and not self._closed

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def live_handles(self) -> int:
        """Number of handles created through this guard and not yet released."""
        with self._lock:
            return sum(1 for ref in self._live.values() if ref() is not None)

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    def new_context(self) -> Context:
        return Context.create(self)

    def new_buffer_from_stream(
        self,
        protocol: StreamProtocol | str,
        path: str | os.PathLike,
        options: str = "",
    ) -> Buffer:
        return Buffer.from_stream(self, protocol, path, options)

    def new_buffer_from_array(self, samples: np.ndarray, sample_rate: int) -> Buffer:
        return Buffer.from_array(self, samples, sample_rate)

    # -------------------------------------------------------------------------
    # Handle registry
    # -------------------------------------------------------------------------

    def _track(self, handle: "Handle") -> int:
        """Register a newly bound handle.

        Raises:
            EngineClosedError: If close() has started.
        """
        with self._lock:
            if self._closed:
                raise EngineClosedError(
                    f"bind {handle.kind} handle", details={"handle": handle.value}
                )
            serial = next(self._serials)
            self._live[serial] = weakref.ref(handle)
            return serial

    def _untrack(self, serial: int | None) -> None:
        with self._lock:
            self._live.pop(serial, None)

    def _drain(self) -> list["Handle"]:
        """Registered handles, newest first.

        Includes handles whose release is still in progress on another
        thread; releasing them again waits for that free to finish.
        """
        with self._lock:
            refs = list(self._live.values())
        handles = (ref() for ref in reversed(refs))
        return [h for h in handles if h is not None]

    # -------------------------------------------------------------------------
    # Shutdown
    # -------------------------------------------------------------------------

    def close(self) -> None:
        """Release remaining handles and shut the engine down.

        Raises:
            FatalNativeError: If a handle cannot be freed or shutdown fails.
        """
        global _active_guards

        with self._lock:
            if self._closed:
                return
            self._closed = True
        if not self._initialized:
            return

        remaining = self._drain()
        live = sum(1 for handle in remaining if not handle.released)
        if live:
            logger.warning("Releasing %d live handle(s) before shutdown", live)
        # Also waits out frees already running on other threads
        for handle in remaining:
            handle.release()

        code = self.lib.syz_shutdown()
        with _guard_lock:
            _active_guards -= 1
        if code != 0:
            logger.critical("syz_shutdown failed with code %d", code)
            raise FatalNativeError("syz_shutdown", code)
        logger.info("Synthizer shut down")

    def __enter__(self) -> "Synthizer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __del__(self):
        if getattr(self, "_initialized", False) and not getattr(self, "_closed", True):
            logger.warning("Synthizer guard collected without close()")
            self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else "initialized"
        return f"<Synthizer {state} live_handles={self.live_handles}>"
