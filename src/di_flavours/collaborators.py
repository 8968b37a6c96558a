"""Placeholder collaborators used by the demo and the tests."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class InMemoryFileManager:
    """A ``FileManager`` backed by a dict instead of the filesystem."""

    files: dict[str, bytes] = field(default_factory=dict)

    def exists(self, path: str) -> bool:
        return path in self.files

    def contents(self, path: str) -> bytes | None:
        return self.files.get(path)


class Worker:
    """Example class that can act as a ``NetworkServiceDelegate``."""

    def __init__(self, name: str = "worker") -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"Worker(name={self.name!r})"
