"""
synthizer-safe - Safe Python bindings for the Synthizer audio engine.

Every engine object is an integer handle with a native reference count.
This package wraps each handle in an owner that frees it exactly once,
exposes properties with the shape the engine declares for them, and
brackets the engine's lifetime with a guard.

Public API:
    Synthizer        - Lifecycle guard. Initializes and shuts down the engine.
    SynthizerConfig  - Library location and native logging options.
    Context          - Parent of generators and sources; the listener.
    Buffer           - Decoded audio, from a stream or a numpy array.
    BufferGenerator, StreamingGenerator, NoiseGenerator
    DirectSource, PannedSource, Source3D
    Generator, Source, SpatializedSource - Capability protocols
    SynthizerError   - A native call failed (carries the raw code)

Example:
    from synthizer_safe import Synthizer, StreamProtocol

    with Synthizer() as engine:
        context = engine.new_context()
        buffer = engine.new_buffer_from_stream(StreamProtocol.FILE, "beep.wav")
        generator = context.new_buffer_generator()
        generator.buffer = buffer
        generator.looping = True
        source = context.new_source3d()
        source.position = (1.0, 0.0, 0.0)
        source.add_generator(generator)

Testing:
    from synthizer_safe.testing import MockSynthizer
    engine = Synthizer(lib=MockSynthizer())
"""

__version__ = "0.1.0"

from synthizer_safe.capabilities import Generator, Source, SpatializedSource
from synthizer_safe.config import SynthizerConfig
from synthizer_safe.constants import (
    DistanceModel,
    LoggingBackend,
    LogLevel,
    NoiseType,
    PannerStrategy,
    Property,
    StreamProtocol,
)
from synthizer_safe.engine import Synthizer, configure_logging_backend, set_log_level
from synthizer_safe.errors import (
    EngineClosedError,
    FatalNativeError,
    HandleReleasedError,
    LibraryNotFoundError,
    SynthizerError,
    SynthizerSafeError,
)
from synthizer_safe.handle import Handle
from synthizer_safe.objects import (
    Buffer,
    BufferGenerator,
    Context,
    DirectSource,
    NativeObject,
    NoiseGenerator,
    PannedSource,
    Source3D,
    StreamingGenerator,
)

__all__ = [
    "__version__",
    # Lifecycle
    "Synthizer",
    "SynthizerConfig",
    "configure_logging_backend",
    "set_log_level",
    # Objects
    "Handle",
    "NativeObject",
    "Context",
    "Buffer",
    "BufferGenerator",
    "StreamingGenerator",
    "NoiseGenerator",
    "DirectSource",
    "PannedSource",
    "Source3D",
    # Capabilities
    "Generator",
    "Source",
    "SpatializedSource",
    # Constants
    "Property",
    "PannerStrategy",
    "DistanceModel",
    "NoiseType",
    "LogLevel",
    "LoggingBackend",
    "StreamProtocol",
    # Errors
    "SynthizerSafeError",
    "SynthizerError",
    "EngineClosedError",
    "HandleReleasedError",
    "LibraryNotFoundError",
    "FatalNativeError",
]
