"""Collaborator protocols (capability interfaces).

Every injected dependency is typed against one of these protocols, never
against a concrete class, so any conforming implementation can be
substituted.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class FileManager(Protocol):
    """Storage accessor used by ``FileLoader``.

    Implementations: InMemoryFileManager (collaborators), MagicMock (tests).
    """

    def exists(self, path: str) -> bool: ...

    def contents(self, path: str) -> bytes | None: ...


@runtime_checkable
class NetworkServiceDelegate(Protocol):
    """Marker protocol for objects that can act as a ``NetworkService`` delegate.

    Conformance is nominal by convention only: the protocol has no members.
    Delegates must still support weak references.
    """


@runtime_checkable
class TaskQueue(Protocol):
    """Task-execution context that accepts work without running it inline.

    ``concurrent.futures.Executor`` subclasses conform, as does
    ``DispatchQueue``. The returned handle is implementation-defined.
    """

    def submit(self, fn: Callable[..., Any], /, *args: Any, **kwargs: Any) -> Any: ...
