"""
Enumerations and constants for the TAA command-line assistant.
"""

from enum import Enum


class CommandState(Enum):
    """Lifecycle state of a command."""
    CREATED = "created"
    VALIDATED = "validated"
    EXECUTED = "executed"


class NameCasePolicy(Enum):
    """How assessment names are compared for lookup and uniqueness."""
    CASE_SENSITIVE = "case_sensitive"
    CASE_INSENSITIVE = "case_insensitive"

    def normalize(self, name: str) -> str:
        if self is NameCasePolicy.CASE_INSENSITIVE:
            return name.casefold()
        return name

    def matches(self, first: str, second: str) -> bool:
        return self.normalize(first) == self.normalize(second)
