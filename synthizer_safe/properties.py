"""
Typed Property Protocol - get/set by (handle, property ID, shape).

Shapes:
    int       syz_getI  / syz_setI      (also booleans and enums)
    double    syz_getD  / syz_setD
    double3   syz_getD3 / syz_setD3
    double6   syz_getD6 / syz_setD6
    object    syz_getO  / syz_setO

The functions here do not know which shape a property has. Entities
declare that pairing once, as descriptors:

    class Source3D(...):
        position = Double3Property(Property.POSITION)
        rolloff = DoubleProperty(Property.ROLLOFF)

Every get checks the status before touching its out-parameters.
"""

from __future__ import annotations

import ctypes
from enum import IntEnum
from typing import Any, Callable, Generic, Sequence, TypeVar

from synthizer_safe.constants import Property
from synthizer_safe.errors import check
from synthizer_safe.handle import Handle
from synthizer_safe.native.base import SyzHandle

T = TypeVar("T")
E = TypeVar("E", bound=IntEnum)

Vector3 = tuple[float, float, float]
Vector6 = tuple[float, float, float, float, float, float]


# =============================================================================
# Shape functions
# =============================================================================

def get_int(handle: Handle, prop: Property) -> int:
    out = ctypes.c_int()
    check(handle.lib.syz_getI(ctypes.pointer(out), handle.value, int(prop)), call="syz_getI")
    return out.value


def set_int(handle: Handle, prop: Property, value: int) -> None:
    check(handle.lib.syz_setI(handle.value, int(prop), int(value)), call="syz_setI")


def get_double(handle: Handle, prop: Property) -> float:
    out = ctypes.c_double()
    check(handle.lib.syz_getD(ctypes.pointer(out), handle.value, int(prop)), call="syz_getD")
    return out.value


def set_double(handle: Handle, prop: Property, value: float) -> None:
    check(handle.lib.syz_setD(handle.value, int(prop), float(value)), call="syz_setD")


def get_double3(handle: Handle, prop: Property) -> Vector3:
    out = [ctypes.c_double() for _ in range(3)]
    code = handle.lib.syz_getD3(*(ctypes.pointer(c) for c in out), handle.value, int(prop))
    check(code, call="syz_getD3")
    return tuple(c.value for c in out)


def set_double3(handle: Handle, prop: Property, value: Sequence[float]) -> None:
    values = _floats(value, 3)
    check(handle.lib.syz_setD3(handle.value, int(prop), *values), call="syz_setD3")


def get_double6(handle: Handle, prop: Property) -> Vector6:
    out = [ctypes.c_double() for _ in range(6)]
    code = handle.lib.syz_getD6(*(ctypes.pointer(c) for c in out), handle.value, int(prop))
    check(code, call="syz_getD6")
    return tuple(c.value for c in out)


def set_double6(handle: Handle, prop: Property, value: Sequence[float]) -> None:
    values = _floats(value, 6)
    check(handle.lib.syz_setD6(handle.value, int(prop), *values), call="syz_setD6")


def get_object(handle: Handle, prop: Property, kind: str = "handle") -> Handle | None:
    """Read an object-valued property.

    Returns:
        A new owning Handle (the engine counted the reference), or None
        if the slot is empty.
    """
    out = SyzHandle(0)
    check(handle.lib.syz_getO(ctypes.pointer(out), handle.value, int(prop)), call="syz_getO")
    if out.value == 0:
        return None
    return Handle.adopt(handle.engine, out.value, kind)


def set_object(handle: Handle, prop: Property, value: Handle | None) -> None:
    """Point an object-valued property at ``value`` (or clear it with None).

    The caller keeps its own reference; the slot takes another.
    """
    target = 0 if value is None else value.value
    check(handle.lib.syz_setO(handle.value, int(prop), target), call="syz_setO")


def _floats(value: Sequence[float], count: int) -> tuple[float, ...]:
    values = tuple(float(v) for v in value)
    if len(values) != count:
        raise ValueError(f"Expected {count} values, got {len(values)}")
    return values


# =============================================================================
# Descriptors
# =============================================================================

class NativeProperty(Generic[T]):
    """Descriptor binding a property ID to one shape.

    The owning class must expose a ``handle`` attribute.
    """

    def __init__(self, prop: Property, doc: str | None = None):
        self.prop = prop
        self.name = prop.name.lower()
        self.__doc__ = doc

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, obj: Any, objtype: type | None = None):
        if obj is None:
            return self
        return self.read(obj.handle)

    def __set__(self, obj: Any, value: T) -> None:
        self.write(obj.handle, value)

    def read(self, handle: Handle) -> T:
        raise NotImplementedError

    def write(self, handle: Handle, value: T) -> None:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.prop.name})"


class BoolProperty(NativeProperty[bool]):
    """Integer-shaped property holding 0 or 1."""

    def read(self, handle: Handle) -> bool:
        return get_int(handle, self.prop) != 0

    def write(self, handle: Handle, value: bool) -> None:
        set_int(handle, self.prop, 1 if value else 0)


class EnumProperty(NativeProperty[E]):
    """Integer-shaped property holding a member of ``enum``."""

    def __init__(self, prop: Property, enum: type[E], doc: str | None = None):
        super().__init__(prop, doc)
        self.enum = enum

    def read(self, handle: Handle) -> E:
        return self.enum(get_int(handle, self.prop))

    def write(self, handle: Handle, value: E | int) -> None:
        set_int(handle, self.prop, self.enum(value))


class DoubleProperty(NativeProperty[float]):
    def read(self, handle: Handle) -> float:
        return get_double(handle, self.prop)

    def write(self, handle: Handle, value: float) -> None:
        set_double(handle, self.prop, value)


class Double3Property(NativeProperty[Vector3]):
    def read(self, handle: Handle) -> Vector3:
        return get_double3(handle, self.prop)

    def write(self, handle: Handle, value: Sequence[float]) -> None:
        set_double3(handle, self.prop, value)


class Double6Property(NativeProperty[Vector6]):
    def read(self, handle: Handle) -> Vector6:
        return get_double6(handle, self.prop)

    def write(self, handle: Handle, value: Sequence[float]) -> None:
        set_double6(handle, self.prop, value)


class ObjectProperty(NativeProperty[T]):
    """Object-reference property.

    Args:
        prop: Property ID.
        wrap: Callable turning an owning Handle into the entity type,
              usually the entity class itself.
        kind: Name recorded on handles read back from the property.
    """

    def __init__(
        self,
        prop: Property,
        wrap: Callable[[Handle], T],
        kind: str = "handle",
        doc: str | None = None,
    ):
        super().__init__(prop, doc)
        self.wrap = wrap
        self.kind = kind

    def read(self, handle: Handle) -> T | None:
        value = get_object(handle, self.prop, self.kind)
        if value is None:
            return None
        return self.wrap(value)

    def write(self, handle: Handle, value: T | None) -> None:
        set_object(handle, self.prop, None if value is None else value.handle)
