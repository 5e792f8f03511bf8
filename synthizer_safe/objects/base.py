"""
Object Base - The owning wrapper every entity is built on.

An entity has two states, Live and Released, and one transition between
them. Its only state is its Handle.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar

from synthizer_safe.errors import EngineClosedError, check
from synthizer_safe.handle import Handle

if TYPE_CHECKING:
    from synthizer_safe.engine import Synthizer

logger = logging.getLogger(__name__)

O = TypeVar("O", bound="NativeObject")


class NativeObject:
    """Owns one Handle; releases it on close(), ``with`` exit, or collection.

    Subclasses are created through ``_create`` (a native create call) or
    by wrapping a Handle the engine has already counted.
    """

    def __init__(self, handle: Handle):
        self._handle = handle

    @classmethod
    def _create(cls: type[O], engine: "Synthizer", call: str, *args: Any) -> O:
        """Run a native ``syz_create*`` call and wrap the new handle.

        Raises:
            EngineClosedError: If the guard has been closed. Nothing
                reaches the engine.
            SynthizerError: If the engine rejects the creation.
        """
        if engine.closed:
            raise EngineClosedError(f"create {cls.__name__}")
        handle = Handle.empty(engine, kind=cls.__name__)
        create = getattr(engine.lib, call)
        check(create(handle.out_param(), *args), call=call)
        handle.bind()
        logger.debug("Created %s %d", cls.__name__, handle.value)
        return cls(handle)

    @property
    def handle(self) -> Handle:
        return self._handle

    @property
    def engine(self) -> "Synthizer":
        return self._handle.engine

    @property
    def closed(self) -> bool:
        return self._handle.released

    def close(self) -> None:
        """Release the native object. Later calls do nothing."""
        self._handle.release()

    def __enter__(self: O) -> O:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        if self.closed:
            return f"<{type(self).__name__} released>"
        return f"<{type(self).__name__} handle={self._handle.value}>"
