"""
Custom exceptions for the TAA command-line assistant.
"""

from typing import Optional, Any, Dict


class TaaException(Exception):
    """Base exception for all TAA-related errors."""

    default_error_code: Optional[str] = None

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.default_error_code
        self.details = details or {}


class UsageError(TaaException):
    """Raised when a command is given an empty argument string."""
    default_error_code = "usage"


class MissingArgumentError(TaaException):
    """Raised when the required argument keys of a command are not all present."""
    default_error_code = "missing_argument"


class InvalidFormatError(TaaException):
    """Raised when an argument value cannot be parsed as the expected type."""
    default_error_code = "invalid_format"


class InvalidValueError(TaaException):
    """Raised when an argument value is outside its own valid bounds."""
    default_error_code = "invalid_value"


class AggregateConstraintError(TaaException):
    """Raised when a valid value would break a collection-wide constraint."""
    default_error_code = "aggregate_constraint"


class DuplicateEntityError(TaaException):
    """Raised when attempting to create a duplicate entity."""
    default_error_code = "duplicate"


class ResourceNotFoundError(TaaException):
    """Raised when a requested resource is not found."""
    default_error_code = "not_found"


class PersistenceError(TaaException):
    """Raised when persistence operations fail."""
    default_error_code = "persistence"


class ConfigurationError(TaaException):
    """Raised when configuration is invalid."""
    default_error_code = "configuration"


class UnknownCommandError(TaaException):
    """Raised when the command word does not name a known command."""
    default_error_code = "unknown_command"


class CommandStateError(TaaException):
    """Raised when a command's validate/execute steps are called out of order."""
    default_error_code = "command_state"
