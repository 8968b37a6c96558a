"""Initializer injection.

The object is given everything it needs when it is created, so it is usable
right away. The dependency has no default: leaving it out is a ``TypeError``
at the call site, and the frozen dataclass rejects reassignment afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from di_flavours.protocols import FileManager


@dataclass(frozen=True)
class FileLoader:
    """Loads files through the ``FileManager`` it was built with."""

    file_manager: FileManager

    def load(self, path: str) -> bytes | None:
        """Return the contents at *path*, or ``None`` if it does not exist."""
        if not self.file_manager.exists(path):
            logger.debug("File not found: {}", path)
            return None
        return self.file_manager.contents(path)
