"""
Context - The parent of every generator and source.

The context's own position, orientation and gain describe the listener.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from synthizer_safe.constants import Property, StreamProtocol
from synthizer_safe.objects.base import NativeObject
from synthizer_safe.objects.generators import BufferGenerator, NoiseGenerator, StreamingGenerator
from synthizer_safe.objects.sources import DirectSource, PannedSource, Source3D
from synthizer_safe.properties import Double3Property, Double6Property, DoubleProperty

if TYPE_CHECKING:
    from synthizer_safe.engine import Synthizer


class Context(NativeObject):
    """An audio context.

    Example:
        with Synthizer() as engine:
            context = engine.new_context()
            source = context.new_source3d()
            source.position = (1.0, 0.0, 0.0)
    """

    gain = DoubleProperty(Property.GAIN, doc="Master gain.")
    position = Double3Property(Property.POSITION, doc="Listener position.")
    orientation = Double6Property(Property.ORIENTATION, doc="Listener (at, up) vectors.")

    @classmethod
    def create(cls, engine: "Synthizer") -> "Context":
        """Create a context.

        Raises:
            SynthizerError: If the engine is not initialized, among others.
        """
        return cls._create(engine, "syz_createContext")

    def new_streaming_generator(
        self,
        protocol: StreamProtocol | str,
        path: str | os.PathLike,
        options: str = "",
    ) -> StreamingGenerator:
        return StreamingGenerator.create(self, protocol, path, options)

    def new_buffer_generator(self) -> BufferGenerator:
        return BufferGenerator.create(self)

    def new_noise_generator(self, channels: int = 1) -> NoiseGenerator:
        return NoiseGenerator.create(self, channels)

    def new_direct_source(self) -> DirectSource:
        return DirectSource.create(self)

    def new_panned_source(self) -> PannedSource:
        return PannedSource.create(self)

    def new_source3d(self) -> Source3D:
        return Source3D.create(self)
