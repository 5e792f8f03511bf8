"""
Capabilities - Generator, Source and SpatializedSource.

These are protocols, not base classes: they hold no state, and any object
exposing a ``handle`` can satisfy them. Concrete entities opt in by listing
the protocol as a base, which also gives them the default operations
defined here:

    class DirectSource(NativeObject, Source): ...

    source.add_generator(generator)   # any Generator variant
    source.gain = 0.5
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from synthizer_safe.constants import PannerStrategy, Property
from synthizer_safe.errors import check
from synthizer_safe.handle import Handle
from synthizer_safe.properties import DoubleProperty, EnumProperty

logger = logging.getLogger(__name__)


@runtime_checkable
class Generator(Protocol):
    """Something with a handle usable as a generator."""

    @property
    def handle(self) -> Handle: ...


@runtime_checkable
class Source(Protocol):
    """Something with a handle usable as a source.

    Default operations route through the implementing entity's handle.
    """

    gain = DoubleProperty(Property.GAIN, doc="Linear gain of the source.")

    @property
    def handle(self) -> Handle: ...

    def add_generator(self, generator: Generator) -> None:
        """Start feeding ``generator`` into this source.

        Raises:
            SynthizerError: If either handle is invalid in the engine.
        """
        source = self.handle.value
        check(
            self.handle.lib.syz_sourceAddGenerator(source, generator.handle.value),
            call="syz_sourceAddGenerator",
        )
        logger.debug("Added generator %d to source %d", generator.handle.value, source)

    def remove_generator(self, generator: Generator) -> None:
        """Stop feeding ``generator`` into this source.

        Raises:
            SynthizerError: If the generator is not attached, or either
                handle is invalid.
        """
        source = self.handle.value
        check(
            self.handle.lib.syz_sourceRemoveGenerator(source, generator.handle.value),
            call="syz_sourceRemoveGenerator",
        )
        logger.debug("Removed generator %d from source %d", generator.handle.value, source)


@runtime_checkable
class SpatializedSource(Source, Protocol):
    """A source that is panned by the engine."""

    panner_strategy = EnumProperty(Property.PANNER_STRATEGY, PannerStrategy)
