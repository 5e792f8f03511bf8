"""
Buffer - Decoded audio held by the engine.

Buffers are created against the engine, not a context, and can be shared
by any number of BufferGenerators.
"""

from __future__ import annotations

import ctypes
import os
from datetime import timedelta
from typing import TYPE_CHECKING

import numpy as np

from synthizer_safe.constants import StreamProtocol
from synthizer_safe.errors import check
from synthizer_safe.native.marshal import float_pointer, float_samples, stream_args
from synthizer_safe.objects.base import NativeObject

if TYPE_CHECKING:
    from synthizer_safe.engine import Synthizer


class Buffer(NativeObject):
    """A native audio buffer.

    Example:
        buffer = Buffer.from_stream(engine, StreamProtocol.FILE, "beep.wav")
        print(buffer.channels, buffer.duration)
    """

    @classmethod
    def from_stream(
        cls,
        engine: "Synthizer",
        protocol: StreamProtocol | str,
        path: str | os.PathLike,
        options: str = "",
    ) -> "Buffer":
        """Decode a whole stream into a buffer.

        Args:
            engine: Initialized engine.
            protocol: Stream protocol, currently only ``"file"``.
            path: Resource locator, a file path for ``"file"``.
            options: Protocol-specific options string.

        Raises:
            ValueError: If any argument contains a NUL byte.
            SynthizerError: If the engine cannot open or decode the stream.
        """
        protocol_buf, path_buf, options_buf = stream_args(protocol, path, options)
        return cls._create(
            engine, "syz_createBufferFromStream", protocol_buf, path_buf, options_buf
        )

    @classmethod
    def from_array(
        cls,
        engine: "Synthizer",
        samples: np.ndarray,
        sample_rate: int,
    ) -> "Buffer":
        """Create a buffer from in-memory samples.

        Args:
            engine: Initialized engine.
            samples: ``(frames,)`` mono or ``(frames, channels)`` float data
                     in [-1, 1]. Converted to contiguous float32.
            sample_rate: Sample rate in Hz.
        """
        data, channels, frames = float_samples(samples)
        return cls._create(
            engine,
            "syz_createBufferFromFloatArray",
            int(sample_rate),
            channels,
            frames,
            float_pointer(data),
        )

    @property
    def channels(self) -> int:
        out = ctypes.c_uint()
        code = self.handle.lib.syz_bufferGetChannels(ctypes.pointer(out), self.handle.value)
        check(code, call="syz_bufferGetChannels")
        return out.value

    @property
    def length_in_samples(self) -> int:
        out = ctypes.c_uint()
        code = self.handle.lib.syz_bufferGetLengthInSamples(ctypes.pointer(out), self.handle.value)
        check(code, call="syz_bufferGetLengthInSamples")
        return out.value

    @property
    def length_in_seconds(self) -> float:
        out = ctypes.c_double()
        code = self.handle.lib.syz_bufferGetLengthInSeconds(ctypes.pointer(out), self.handle.value)
        check(code, call="syz_bufferGetLengthInSeconds")
        return out.value

    @property
    def duration(self) -> timedelta:
        return timedelta(seconds=self.length_in_seconds)
