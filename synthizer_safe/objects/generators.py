"""
Generators - Objects that produce audio for sources.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from synthizer_safe.capabilities import Generator
from synthizer_safe.constants import NoiseType, Property, StreamProtocol
from synthizer_safe.native.marshal import stream_args
from synthizer_safe.objects.base import NativeObject
from synthizer_safe.objects.buffer import Buffer
from synthizer_safe.properties import BoolProperty, DoubleProperty, EnumProperty, ObjectProperty

if TYPE_CHECKING:
    from synthizer_safe.objects.context import Context


class StreamingGenerator(NativeObject, Generator):
    """Decodes a stream on the fly instead of loading it into a buffer."""

    @classmethod
    def create(
        cls,
        context: "Context",
        protocol: StreamProtocol | str,
        path: str | os.PathLike,
        options: str = "",
    ) -> "StreamingGenerator":
        protocol_buf, path_buf, options_buf = stream_args(protocol, path, options)
        return cls._create(
            context.engine,
            "syz_createStreamingGenerator",
            context.handle.value,
            protocol_buf,
            path_buf,
            options_buf,
        )


class BufferGenerator(NativeObject, Generator):
    """Plays a Buffer.

    ``buffer`` returns a new Buffer wrapper that owns its own reference,
    so it can be closed independently of the one that was assigned.
    """

    buffer = ObjectProperty(Property.BUFFER, Buffer, kind="Buffer")
    position = DoubleProperty(Property.POSITION, doc="Playback position in seconds.")
    looping = BoolProperty(Property.LOOPING)

    @classmethod
    def create(cls, context: "Context") -> "BufferGenerator":
        return cls._create(context.engine, "syz_createBufferGenerator", context.handle.value)


class NoiseGenerator(NativeObject, Generator):
    """Generates noise with ``channels`` channels."""

    noise_type = EnumProperty(Property.NOISE_TYPE, NoiseType)

    @classmethod
    def create(cls, context: "Context", channels: int = 1) -> "NoiseGenerator":
        return cls._create(
            context.engine, "syz_createNoiseGenerator", context.handle.value, int(channels)
        )
