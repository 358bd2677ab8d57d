"""
Persistence module for storing the domain model.
"""

from .json_storage import (
    DEFAULT_DATA_FILE, JsonFileStorage, StorageRecord, ClassRecord, ModuleRecord,
    StudentRecord, AssessmentRecord, to_model, to_record
)

__all__ = [
    "DEFAULT_DATA_FILE",
    "JsonFileStorage",
    "StorageRecord",
    "ClassRecord",
    "ModuleRecord",
    "StudentRecord",
    "AssessmentRecord",
    "to_model",
    "to_record",
]
