"""
Core module containing the domain model, its rules and collaborator interfaces.
"""

from .entities import *
from .model import *
from .interfaces import *
from .exceptions import *
from .enums import *

__all__ = [
    # Entities
    "AbstractEntity",
    "Module",
    "Assessment",
    "Student",
    "TeachingClass",

    # Collections
    "ModuleList",
    "ClassList",
    "AssessmentList",
    "StudentList",
    "DomainModel",

    # Interfaces
    "Storage",
    "Ui",

    # Enums
    "CommandState",
    "NameCasePolicy",

    # Exceptions
    "TaaException",
    "UsageError",
    "MissingArgumentError",
    "InvalidFormatError",
    "InvalidValueError",
    "AggregateConstraintError",
    "DuplicateEntityError",
    "ResourceNotFoundError",
    "PersistenceError",
    "ConfigurationError",
    "UnknownCommandError",
    "CommandStateError",
]
