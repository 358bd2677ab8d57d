"""
Collaborator interfaces consumed by the command layer.
"""

from abc import ABC, abstractmethod


class Storage(ABC):
    """Abstract base class for durable storage of the domain model."""

    @abstractmethod
    def save(self, model: 'DomainModel') -> None:
        """Overwrite the stored copy with the whole model."""
        pass

    @abstractmethod
    def load(self) -> 'DomainModel':
        """Load the stored model, or an empty one if nothing is stored."""
        pass


class Ui(ABC):
    """Abstract base class for user-facing output."""

    @abstractmethod
    def print_message(self, message: str) -> None:
        """Show a message to the user."""
        pass
