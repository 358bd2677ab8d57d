"""
JSON file storage for the domain model.
"""

import logging
import os
from typing import Dict, List

from pydantic import BaseModel, Field, ValidationError

from ..core import assessment_rules
from ..core.assessment_rules import MINIMUM_MARKS, WEIGHTAGE_RANGE
from ..core.entities import Assessment, Module, Student, TeachingClass
from ..core.enums import NameCasePolicy
from ..core.exceptions import PersistenceError, TaaException
from ..core.interfaces import Storage
from ..core.model import DomainModel

logger = logging.getLogger(__name__)

DEFAULT_DATA_FILE = os.path.join("data", "taa_data.json")


# Pydantic models for the stored file
class ModuleRecord(BaseModel):
    code: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)


class AssessmentRecord(BaseModel):
    name: str = Field(..., min_length=1)
    maximum_marks: int = Field(..., ge=MINIMUM_MARKS)
    weightage: float = Field(..., ge=WEIGHTAGE_RANGE[0], le=WEIGHTAGE_RANGE[1])


class StudentRecord(BaseModel):
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    marks: Dict[str, float] = {}


class ClassRecord(BaseModel):
    id: str = Field(..., min_length=1)
    module_code: str = Field(..., min_length=1)
    students: List[StudentRecord] = []
    assessments: List[AssessmentRecord] = []


class StorageRecord(BaseModel):
    modules: List[ModuleRecord] = []
    classes: List[ClassRecord] = []


def to_record(model: DomainModel) -> StorageRecord:
    """Convert the in-memory model to its stored form."""
    return StorageRecord(
        modules=[ModuleRecord(code=module.code, name=module.name) for module in model.modules],
        classes=[
            ClassRecord(
                id=teaching_class.id,
                module_code=teaching_class.module_code,
                students=[
                    StudentRecord(id=student.id, name=student.name, marks=student.marks)
                    for student in teaching_class.students
                ],
                assessments=[
                    AssessmentRecord(
                        name=assessment.name,
                        maximum_marks=assessment.maximum_marks,
                        weightage=assessment.weightage,
                    )
                    for assessment in teaching_class.assessments
                ],
            )
            for teaching_class in model.classes
        ],
    )


def to_model(record: StorageRecord, name_policy: NameCasePolicy = NameCasePolicy.CASE_INSENSITIVE) -> DomainModel:
    """Rebuild the in-memory model, re-checking every collection invariant."""
    model = DomainModel(name_policy=name_policy)

    for module_record in record.modules:
        model.modules.add_module(Module(module_record.code, module_record.name))

    for class_record in record.classes:
        model.require_module(class_record.module_code)
        teaching_class = TeachingClass(class_record.id, class_record.module_code, name_policy)
        for assessment_record in class_record.assessments:
            teaching_class.assessments.add_assessment(Assessment(
                assessment_record.name, assessment_record.maximum_marks, assessment_record.weightage
            ))
        for student_record in class_record.students:
            marks = {}
            for assessment_name, value in student_record.marks.items():
                assessment = teaching_class.assessments.get_assessment(assessment_name)
                if assessment is None:
                    logger.warning(
                        "Dropping marks of %s for unknown assessment %r in class %s",
                        student_record.id, assessment_name, class_record.id,
                    )
                    continue
                assessment_rules.check_mark(assessment, value)
                if assessment.name in marks:
                    logger.warning(
                        "Marks of %s for %r in class %s replace marks already loaded for %r",
                        student_record.id, assessment_name, class_record.id, assessment.name,
                    )
                marks[assessment.name] = value
            teaching_class.students.add_student(Student(student_record.id, student_record.name, marks))
        model.classes.add_class(teaching_class)

    return model


class JsonFileStorage(Storage):
    """Stores the whole model in a single JSON file, overwritten on every save."""

    def __init__(self, file_path: str = DEFAULT_DATA_FILE,
                 name_policy: NameCasePolicy = NameCasePolicy.CASE_INSENSITIVE):
        self._file_path = file_path
        self._name_policy = name_policy

    @property
    def file_path(self) -> str:
        return self._file_path

    def _ensure_directory_exists(self) -> None:
        """Ensure the data directory exists."""
        directory = os.path.dirname(self._file_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

    def save(self, model: DomainModel) -> None:
        """Overwrite the data file with the whole model."""
        record = to_record(model)
        try:
            self._ensure_directory_exists()
            with open(self._file_path, "w", encoding="utf-8") as f:
                f.write(record.model_dump_json(indent=2))
        except OSError as e:
            raise PersistenceError(f"Failed to save data to {self._file_path}: {e}")
        logger.debug("Saved %d modules and %d classes to %s", len(record.modules), len(record.classes),
                     self._file_path)

    def load(self) -> DomainModel:
        """Load the model from the data file, or an empty model if there is none yet."""
        if not os.path.exists(self._file_path):
            logger.info("No data file at %s, starting with an empty model", self._file_path)
            return DomainModel(name_policy=self._name_policy)

        try:
            with open(self._file_path, "r", encoding="utf-8") as f:
                record = StorageRecord.model_validate_json(f.read())
        except OSError as e:
            raise PersistenceError(f"Failed to read data from {self._file_path}: {e}")
        except ValidationError as e:
            raise PersistenceError(
                f"Data file {self._file_path} is corrupted: {e.error_count()} invalid field(s)",
                details={"errors": e.errors(include_url=False)},
            )

        try:
            model = to_model(record, self._name_policy)
        except TaaException as e:
            raise PersistenceError(f"Data file {self._file_path} is inconsistent: {e.message}")

        logger.debug("Loaded %d modules and %d classes from %s", model.modules.size, model.classes.size,
                     self._file_path)
        return model
