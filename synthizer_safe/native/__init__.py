"""
Native module - The C-ABI boundary.

Nothing outside this package touches ctypes signatures or string encoding;
everything else goes through NativeLibrary.
"""

from synthizer_safe.native.base import NativeLibrary, SyzErrorCode, SyzHandle
from synthizer_safe.native.loader import (
    LIBRARY_ENV_VAR,
    SIGNATURES,
    bind_signatures,
    candidate_paths,
    load_library,
)
from synthizer_safe.native.marshal import (
    c_path,
    c_string,
    float_pointer,
    float_samples,
    stream_args,
)

__all__ = [
    "NativeLibrary",
    "SyzErrorCode",
    "SyzHandle",
    "LIBRARY_ENV_VAR",
    "SIGNATURES",
    "bind_signatures",
    "candidate_paths",
    "load_library",
    "c_path",
    "c_string",
    "float_pointer",
    "float_samples",
    "stream_args",
]
