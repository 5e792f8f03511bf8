"""
Marshaling - Python values to native string and sample buffers.
"""

from __future__ import annotations

import ctypes
import os

import numpy as np

from synthizer_safe.constants import StreamProtocol


def c_string(value: str | bytes, name: str = "string") -> ctypes.Array:
    """Encode a value as a NUL-terminated ``char`` buffer.

    Raises:
        ValueError: If the encoded value contains a NUL byte.
    """
    encoded = value if isinstance(value, bytes) else value.encode("utf-8")
    if b"\0" in encoded:
        raise ValueError(f"{name} contains an embedded NUL byte: {value!r}")
    return ctypes.create_string_buffer(encoded)


def c_path(path: str | os.PathLike) -> ctypes.Array:
    """Encode a file-system path as a NUL-terminated buffer."""
    return c_string(os.fsencode(path), "path")


def stream_args(
    protocol: StreamProtocol | str,
    path: str | os.PathLike,
    options: str,
) -> tuple[ctypes.Array, ctypes.Array, ctypes.Array]:
    """Marshal the (protocol, path, options) triple for stream constructors."""
    protocol = StreamProtocol(protocol)
    return (
        c_string(protocol.value, "protocol"),
        c_path(path),
        c_string(options, "options"),
    )


def float_samples(samples: np.ndarray) -> tuple[np.ndarray, int, int]:
    """Prepare samples for a float-array buffer.

    Args:
        samples: ``(frames,)`` mono or ``(frames, channels)`` interleaved.

    Returns:
        Tuple of (contiguous float32 array, channels, frames). The array
        must be kept alive for the duration of the native call.
    """
    data = np.ascontiguousarray(samples, dtype=np.float32)
    if data.ndim == 1:
        channels = 1
    elif data.ndim == 2:
        channels = data.shape[1]
    else:
        raise ValueError(f"samples must be 1-D or 2-D, got {data.ndim} dimensions")
    return data, channels, data.shape[0]


def float_pointer(data: np.ndarray):
    """Pointer to the first sample of a float32 array."""
    return data.ctypes.data_as(ctypes.POINTER(ctypes.c_float))
