"""
Native Loader - Locate the Synthizer shared library and declare signatures.
"""

from __future__ import annotations

import ctypes
import ctypes.util
import logging
import os
from pathlib import Path

from synthizer_safe.errors import LibraryNotFoundError
from synthizer_safe.native.base import SyzErrorCode, SyzHandle

logger = logging.getLogger(__name__)

LIBRARY_ENV_VAR = "SYNTHIZER_LIBRARY"

_c_int = ctypes.c_int
_c_uint = ctypes.c_uint
_c_double = ctypes.c_double
_handle_out = ctypes.POINTER(SyzHandle)
_int_out = ctypes.POINTER(ctypes.c_int)
_uint_out = ctypes.POINTER(ctypes.c_uint)
_double_out = ctypes.POINTER(ctypes.c_double)

# name -> (argtypes, restype)
SIGNATURES: dict[str, tuple[list, object]] = {
    "syz_configureLoggingBackend": ([_c_int, ctypes.c_void_p], SyzErrorCode),
    "syz_setLogLevel": ([_c_int], None),
    "syz_initialize": ([], SyzErrorCode),
    "syz_shutdown": ([], SyzErrorCode),
    "syz_handleFree": ([SyzHandle], SyzErrorCode),
    "syz_getI": ([_int_out, SyzHandle, _c_int], SyzErrorCode),
    "syz_setI": ([SyzHandle, _c_int, _c_int], SyzErrorCode),
    "syz_getD": ([_double_out, SyzHandle, _c_int], SyzErrorCode),
    "syz_setD": ([SyzHandle, _c_int, _c_double], SyzErrorCode),
    "syz_getO": ([_handle_out, SyzHandle, _c_int], SyzErrorCode),
    "syz_setO": ([SyzHandle, _c_int, SyzHandle], SyzErrorCode),
    "syz_getD3": ([_double_out] * 3 + [SyzHandle, _c_int], SyzErrorCode),
    "syz_setD3": ([SyzHandle, _c_int] + [_c_double] * 3, SyzErrorCode),
    "syz_getD6": ([_double_out] * 6 + [SyzHandle, _c_int], SyzErrorCode),
    "syz_setD6": ([SyzHandle, _c_int] + [_c_double] * 6, SyzErrorCode),
    "syz_createContext": ([_handle_out], SyzErrorCode),
    "syz_createBufferFromStream": (
        [_handle_out, ctypes.c_char_p, ctypes.c_char_p, ctypes.c_char_p],
        SyzErrorCode,
    ),
    "syz_createBufferFromFloatArray": (
        [_handle_out, _c_uint, _c_uint, ctypes.c_ulonglong, ctypes.POINTER(ctypes.c_float)],
        SyzErrorCode,
    ),
    "syz_createStreamingGenerator": (
        [_handle_out, SyzHandle, ctypes.c_char_p, ctypes.c_char_p, ctypes.c_char_p],
        SyzErrorCode,
    ),
    "syz_createBufferGenerator": ([_handle_out, SyzHandle], SyzErrorCode),
    "syz_createNoiseGenerator": ([_handle_out, SyzHandle, _c_uint], SyzErrorCode),
    "syz_createDirectSource": ([_handle_out, SyzHandle], SyzErrorCode),
    "syz_createPannedSource": ([_handle_out, SyzHandle], SyzErrorCode),
    "syz_createSource3D": ([_handle_out, SyzHandle], SyzErrorCode),
    "syz_bufferGetChannels": ([_uint_out, SyzHandle], SyzErrorCode),
    "syz_bufferGetLengthInSamples": ([_uint_out, SyzHandle], SyzErrorCode),
    "syz_bufferGetLengthInSeconds": ([_double_out, SyzHandle], SyzErrorCode),
    "syz_sourceAddGenerator": ([SyzHandle, SyzHandle], SyzErrorCode),
    "syz_sourceRemoveGenerator": ([SyzHandle, SyzHandle], SyzErrorCode),
}


def candidate_paths(path: Path | str | None = None) -> list[str]:
    """List library locations in the order they are tried.

    Explicit path first, then ``SYNTHIZER_LIBRARY``, then whatever
    ``ctypes.util.find_library("synthizer")`` reports.
    """
    candidates: list[str] = []
    if path:
        candidates.append(str(path))
    env = os.environ.get(LIBRARY_ENV_VAR)
    if env:
        candidates.append(env)
    found = ctypes.util.find_library("synthizer")
    if found:
        candidates.append(found)
    return candidates


def bind_signatures(lib: ctypes.CDLL) -> ctypes.CDLL:
    """Declare argtypes/restype for every function this package calls.

    Raises:
        LibraryNotFoundError: If the library lacks one of the functions.
    """
    for name, (argtypes, restype) in SIGNATURES.items():
        try:
            func = getattr(lib, name)
        except AttributeError:
            raise LibraryNotFoundError(
                f"Synthizer library is missing {name}",
                details={"symbol": name},
            ) from None
        func.argtypes = argtypes
        func.restype = restype
    return lib


def load_library(path: Path | str | None = None) -> ctypes.CDLL:
    """Load the native Synthizer library.

    Args:
        path: Explicit library file. Falls back to the environment and the
              system search path.

    Returns:
        The loaded library with signatures declared.

    Raises:
        LibraryNotFoundError: If no candidate could be loaded.
    """
    candidates = candidate_paths(path)
    errors: dict[str, str] = {}

    for candidate in candidates:
        try:
            lib = ctypes.CDLL(candidate)
        except OSError as e:
            logger.debug("Could not load %s: %s", candidate, e)
            errors[candidate] = str(e)
            continue
        logger.info("Loaded Synthizer from %s", candidate)
        return bind_signatures(lib)

    raise LibraryNotFoundError(
        f"Synthizer library not found. Set {LIBRARY_ENV_VAR} or install libsynthizer.",
        searched=candidates,
        details={"errors": errors},
    )
