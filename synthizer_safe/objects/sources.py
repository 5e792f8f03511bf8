"""
Sources - Objects that mix generators into the context.

    DirectSource   no panning
    PannedSource   azimuth/elevation or a panning scalar
    Source3D       position and orientation in the listener's space
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from synthizer_safe.capabilities import Source, SpatializedSource
from synthizer_safe.constants import DistanceModel, Property
from synthizer_safe.objects.base import NativeObject
from synthizer_safe.properties import (
    Double3Property,
    Double6Property,
    DoubleProperty,
    EnumProperty,
)

if TYPE_CHECKING:
    from synthizer_safe.objects.context import Context


class DirectSource(NativeObject, Source):
    """Routes generators straight to the output."""

    @classmethod
    def create(cls, context: "Context") -> "DirectSource":
        return cls._create(context.engine, "syz_createDirectSource", context.handle.value)


class PannedSource(NativeObject, SpatializedSource):
    """A source panned by angle or by a scalar in [-1, 1]."""

    azimuth = DoubleProperty(Property.AZIMUTH, doc="Degrees clockwise from forward.")
    elevation = DoubleProperty(Property.ELEVATION, doc="Degrees above the horizon.")
    panning_scalar = DoubleProperty(Property.PANNING_SCALAR)

    @classmethod
    def create(cls, context: "Context") -> "PannedSource":
        return cls._create(context.engine, "syz_createPannedSource", context.handle.value)


class Source3D(NativeObject, SpatializedSource):
    """A source positioned in 3D space.

    ``orientation`` is the (at, up) pair flattened to six values.
    """

    position = Double3Property(Property.POSITION)
    orientation = Double6Property(Property.ORIENTATION)
    distance_model = EnumProperty(Property.DISTANCE_MODEL, DistanceModel)
    distance_ref = DoubleProperty(Property.DISTANCE_REF)
    distance_max = DoubleProperty(Property.DISTANCE_MAX)
    rolloff = DoubleProperty(Property.ROLLOFF)
    closeness_boost = DoubleProperty(Property.CLOSENESS_BOOST)
    closeness_boost_distance = DoubleProperty(Property.CLOSENESS_BOOST_DISTANCE)

    @classmethod
    def create(cls, context: "Context") -> "Source3D":
        return cls._create(context.engine, "syz_createSource3D", context.handle.value)
