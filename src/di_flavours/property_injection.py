"""Property injection.

``NetworkService`` is created without dependencies. Its delegate is assigned
afterwards and may be replaced or cleared at any time. The service holds the
delegate through a weak reference, so it never keeps the delegate alive: once
the delegate is collected elsewhere, reading the property yields ``None``.
"""

from __future__ import annotations

import weakref

from loguru import logger

from di_flavours.protocols import NetworkServiceDelegate


class NetworkService:
    """Service with an optional, non-owning delegate slot."""

    def __init__(self) -> None:
        self._delegate_ref: weakref.ref[NetworkServiceDelegate] | None = None

    @property
    def delegate(self) -> NetworkServiceDelegate | None:
        if self._delegate_ref is None:
            return None
        return self._delegate_ref()

    @delegate.setter
    def delegate(self, value: NetworkServiceDelegate | None) -> None:
        if value is None:
            self._delegate_ref = None
            logger.debug("NetworkService delegate cleared")
            return
        # Raises TypeError for objects that cannot be weakly referenced.
        self._delegate_ref = weakref.ref(value)
        logger.debug("NetworkService delegate set to {!r}", value)

    @property
    def has_delegate(self) -> bool:
        return self.delegate is not None
