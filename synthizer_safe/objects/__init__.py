"""
Objects module - Entity wrappers, one Handle each.
"""

from synthizer_safe.objects.base import NativeObject
from synthizer_safe.objects.buffer import Buffer
from synthizer_safe.objects.context import Context
from synthizer_safe.objects.generators import BufferGenerator, NoiseGenerator, StreamingGenerator
from synthizer_safe.objects.sources import DirectSource, PannedSource, Source3D

__all__ = [
    "NativeObject",
    "Buffer",
    "Context",
    "BufferGenerator",
    "NoiseGenerator",
    "StreamingGenerator",
    "DirectSource",
    "PannedSource",
    "Source3D",
]
