"""Shared pytest fixtures for TAA tests.

Provides:
- ``ui``: a Ui that records every message instead of printing it
- ``storage``: an in-memory Storage that counts saves
- ``failing_storage``: a Storage whose save always fails
- ``model``: an empty DomainModel
- ``populated_model``: module CS2113, class C1 with Midterm (30%) and Final (40%),
  students A001 and A002
- ``run``: helper that parses, validates and executes one command line
"""

from __future__ import annotations

from typing import List, Optional

import pytest

from taa.commands import parse_command
from taa.core.entities import Assessment, Module, Student, TeachingClass
from taa.core.exceptions import PersistenceError
from taa.core.interfaces import Storage, Ui
from taa.core.model import DomainModel
from taa.persistence import to_record


class RecordingUi(Ui):
    def __init__(self, lines: Optional[List[str]] = None):
        self.messages: List[str] = []
        self.errors: List[str] = []
        self._lines = list(lines or [])

    def print_message(self, message: str) -> None:
        self.messages.append(message)

    def print_error(self, message: str) -> None:
        self.errors.append(message)

    def print_welcome(self) -> None:
        self.messages.append("welcome")

    def read_command(self) -> Optional[str]:
        if not self._lines:
            return None
        return self._lines.pop(0)

    @property
    def last_message(self) -> str:
        return self.messages[-1]


class InMemoryStorage(Storage):
    def __init__(self, model: Optional[DomainModel] = None):
        self.save_count = 0
        self.saved = None
        self._model = model

    def save(self, model: DomainModel) -> None:
        self.save_count += 1
        self.saved = to_record(model)

    def load(self) -> DomainModel:
        return self._model if self._model is not None else DomainModel()


class FailingStorage(InMemoryStorage):
    def save(self, model: DomainModel) -> None:
        raise PersistenceError("Failed to save data to test.json: disk full")


@pytest.fixture
def ui() -> RecordingUi:
    return RecordingUi()


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def failing_storage() -> FailingStorage:
    return FailingStorage()


@pytest.fixture
def model() -> DomainModel:
    return DomainModel()


@pytest.fixture
def populated_model() -> DomainModel:
    model = DomainModel()
    model.modules.add_module(Module("CS2113", "Software Engineering"))
    teaching_class = TeachingClass("C1", "CS2113")
    teaching_class.assessments.add_assessment(Assessment("Midterm", 50, 30.0))
    teaching_class.assessments.add_assessment(Assessment("Final", 100, 40.0))
    teaching_class.students.add_student(Student("A001", "Alice Tan"))
    teaching_class.students.add_student(Student("A002", "Bob Lim"))
    model.classes.add_class(teaching_class)
    return model


@pytest.fixture
def run(ui, storage):
    """Run one command line against a model with the shared ui and storage."""
    def _run(line: str, model: DomainModel, storage_override: Optional[Storage] = None):
        command = parse_command(line)
        command.validate()
        command.execute(model, ui, storage_override or storage)
        return command
    return _run
