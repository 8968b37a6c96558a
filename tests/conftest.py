"""Shared fixtures for di_flavours tests."""

from __future__ import annotations

import pytest

from di_flavours.collaborators import InMemoryFileManager, Worker
from di_flavours.config import get_settings
from di_flavours.property_injection import NetworkService


@pytest.fixture()
def file_manager() -> InMemoryFileManager:
    """An in-memory file manager holding a single file."""
    return InMemoryFileManager({"notes.txt": b"remember the milk"})


@pytest.fixture()
def worker() -> Worker:
    return Worker()


@pytest.fixture()
def network_service() -> NetworkService:
    return NetworkService()


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Make sure each test sees settings built from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
