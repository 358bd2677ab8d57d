"""
Command contract shared by every line command.

A command is built from its raw argument string, then ``validate()`` checks
the arguments and turns them into a typed record, then ``execute()`` applies
the change to the domain model. Each step runs exactly once, in that order.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Tuple

from ..core.enums import CommandState
from ..core.exceptions import (
    CommandStateError, InvalidFormatError, InvalidValueError, MissingArgumentError, UsageError
)
from ..core.interfaces import Storage, Ui
from ..core.model import DomainModel
from .arguments import contains_whitespace, is_integer, is_number, tokenize

logger = logging.getLogger(__name__)


class Command(ABC):
    """Abstract base class for line commands."""

    COMMAND_WORD: str = ""
    KEYS: Tuple[str, ...] = ()
    REQUIRED_KEYS: Tuple[str, ...] = ()
    ONE_OF_KEYS: Tuple[str, ...] = ()
    USAGE: str = ""
    REQUIRES_ARGUMENT = True
    IS_EXIT = False

    def __init__(self, argument: str = ""):
        self._argument = argument.strip()
        self._argument_map = tokenize(self._argument, self.KEYS)
        self._arguments: Any = None
        self._state = CommandState.CREATED

    @property
    def argument(self) -> str:
        return self._argument

    @property
    def argument_map(self) -> Dict[str, str]:
        return self._argument_map.copy()

    @property
    def arguments(self) -> Any:
        """The typed argument record produced by ``validate()``."""
        return self._arguments

    @property
    def state(self) -> CommandState:
        return self._state

    @classmethod
    def get_usage(cls) -> str:
        return f"{cls.COMMAND_WORD} {cls.USAGE}".strip()

    def get_usage_message(self) -> str:
        return f"Usage: {self.get_usage()}"

    def get_missing_argument_message(self) -> str:
        return f"Missing argument(s). Usage: {self.get_usage()}"

    def validate(self) -> Any:
        """Check the arguments and return them as a typed record.

        Raises before anything is mutated: an empty argument string, a missing
        required key or a malformed value all fail here.
        """
        if self._state is not CommandState.CREATED:
            raise CommandStateError(f"{self.COMMAND_WORD} has already been validated.")

        if self.REQUIRES_ARGUMENT and not self._argument:
            raise UsageError(self.get_usage_message())

        if not self.has_required_arguments():
            raise MissingArgumentError(
                self.get_missing_argument_message(),
                details={"present": sorted(self._argument_map)},
            )

        self._arguments = self.parse_arguments()
        self._state = CommandState.VALIDATED
        return self._arguments

    def execute(self, model: DomainModel, ui: Ui, storage: Storage) -> None:
        """Apply the validated command to the model, save it and report back."""
        if self._state is not CommandState.VALIDATED:
            raise CommandStateError(f"{self.COMMAND_WORD} must be validated once before it is executed.")

        self._state = CommandState.EXECUTED
        logger.debug("Executing %s with %r", self.COMMAND_WORD, self._arguments)
        self.apply(model, ui, storage, self._arguments)

    def has_required_arguments(self) -> bool:
        if not all(self.has_value(key) for key in self.REQUIRED_KEYS):
            return False
        if self.ONE_OF_KEYS and not any(self.has_value(key) for key in self.ONE_OF_KEYS):
            return False
        return True

    def has_value(self, key: str) -> bool:
        return bool(self._argument_map.get(key, "").strip())

    def get_value(self, key: str) -> Optional[str]:
        """The stripped value for ``key``, or None if it is absent or blank."""
        if not self.has_value(key):
            return None
        return self._argument_map[key].strip()

    def get_identifier(self, key: str, message: str) -> Optional[str]:
        """Read a value that must not contain whitespace, such as a code or an ID."""
        value = self.get_value(key)
        if value is not None and contains_whitespace(value):
            raise InvalidValueError(message, details={"key": key, "value": value})
        return value

    def get_integer(self, key: str, message: str) -> Optional[int]:
        value = self.get_value(key)
        if value is None:
            return None
        if not is_integer(value):
            raise InvalidFormatError(message, details={"key": key, "value": value})
        return int(value)

    def get_number(self, key: str, message: str) -> Optional[float]:
        value = self.get_value(key)
        if value is None:
            return None
        if not is_number(value):
            raise InvalidFormatError(message, details={"key": key, "value": value})
        return float(value)

    def parse_arguments(self) -> Any:
        """Turn the argument map into the command's typed record."""
        return None

    @abstractmethod
    def apply(self, model: DomainModel, ui: Ui, storage: Storage, arguments: Any) -> None:
        """Carry out the command with already validated arguments."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(argument={self._argument!r}, state={self._state.value})"
