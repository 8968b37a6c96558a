"""Tests for FileLoader — initializer injection."""

from __future__ import annotations

import dataclasses
from unittest.mock import MagicMock

import pytest

from di_flavours.collaborators import InMemoryFileManager
from di_flavours.initializer import FileLoader
from di_flavours.protocols import FileManager


class TestConstruction:
    def test_holds_injected_file_manager(self, file_manager: InMemoryFileManager):
        loader = FileLoader(file_manager=file_manager)
        assert loader.file_manager is file_manager

    def test_positional_argument_accepted(self, file_manager: InMemoryFileManager):
        assert FileLoader(file_manager).file_manager is file_manager

    def test_missing_dependency_is_rejected(self):
        with pytest.raises(TypeError):
            FileLoader()  # type: ignore[call-arg]

    def test_dependency_is_immutable(self, file_manager: InMemoryFileManager):
        loader = FileLoader(file_manager=file_manager)
        with pytest.raises(dataclasses.FrozenInstanceError):
            loader.file_manager = InMemoryFileManager()  # type: ignore[misc]
        assert loader.file_manager is file_manager

    def test_in_memory_file_manager_conforms(self, file_manager: InMemoryFileManager):
        assert isinstance(file_manager, FileManager)


class TestLoad:
    def test_load_existing_file(self, file_manager: InMemoryFileManager):
        loader = FileLoader(file_manager=file_manager)
        assert loader.load("notes.txt") == b"remember the milk"

    def test_load_missing_file_returns_none(self, file_manager: InMemoryFileManager):
        loader = FileLoader(file_manager=file_manager)
        assert loader.load("missing.txt") is None

    def test_any_conforming_file_manager_can_be_substituted(self):
        fake = MagicMock(spec=["exists", "contents"])
        fake.exists.return_value = True
        fake.contents.return_value = b"mocked"

        loader = FileLoader(file_manager=fake)

        assert loader.load("anything") == b"mocked"
        fake.exists.assert_called_once_with("anything")
        fake.contents.assert_called_once_with("anything")

    def test_missing_file_does_not_read_contents(self):
        fake = MagicMock(spec=["exists", "contents"])
        fake.exists.return_value = False

        assert FileLoader(file_manager=fake).load("gone") is None
        fake.contents.assert_not_called()
