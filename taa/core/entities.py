"""
Core entities for the TAA command-line assistant.
"""

from abc import ABC
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .model import AssessmentList, StudentList
from .enums import NameCasePolicy


class AbstractEntity(ABC):
    """Base abstract entity with lifecycle timestamps and versioning."""

    def __init__(self):
        self._created_at = datetime.now(timezone.utc)
        self._updated_at = self._created_at
        self._version = 1

    @property
    def created_at(self) -> datetime:
        """Get creation timestamp."""
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        """Get last update timestamp."""
        return self._updated_at

    @property
    def version(self) -> int:
        """Get current version."""
        return self._version

    def update(self, **kwargs) -> None:
        """Update entity with new data."""
        for key, value in kwargs.items():
            if not hasattr(self, f"_{key}"):
                raise AttributeError(f"{self.__class__.__name__} has no field '{key}'")
            setattr(self, f"_{key}", value)
        self._updated_at = datetime.now(timezone.utc)
        self._version += 1

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self})"


class Module(AbstractEntity):
    """A course module, identified by its code."""

    def __init__(self, code: str, name: str):
        super().__init__()
        self._code = code
        self._name = name

    @property
    def code(self) -> str:
        return self._code

    @property
    def name(self) -> str:
        return self._name

    def set_name(self, name: str) -> None:
        """Set the module name."""
        self.update(name=name)

    def __str__(self) -> str:
        return f"{self._code} - {self._name}"


class Assessment(AbstractEntity):
    """A graded assessment of a teaching class."""

    def __init__(self, name: str, maximum_marks: int, weightage: float):
        super().__init__()
        self._name = name
        self._maximum_marks = maximum_marks
        self._weightage = weightage

    @property
    def name(self) -> str:
        return self._name

    @property
    def maximum_marks(self) -> int:
        return self._maximum_marks

    @property
    def weightage(self) -> float:
        return self._weightage

    def set_name(self, name: str) -> None:
        self.update(name=name)

    def set_maximum_marks(self, maximum_marks: int) -> None:
        self.update(maximum_marks=maximum_marks)

    def set_weightage(self, weightage: float) -> None:
        self.update(weightage=weightage)

    def __str__(self) -> str:
        return f"{self._name} (Maximum Marks: {self._maximum_marks}, Weightage: {self._weightage:,.2f}%)"


class Student(AbstractEntity):
    """A student enrolled in a teaching class, with the marks they obtained."""

    def __init__(self, student_id: str, name: str, marks: Optional[Dict[str, float]] = None):
        super().__init__()
        self._id = student_id
        self._name = name
        self._marks: Dict[str, float] = dict(marks or {})

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def marks(self) -> Dict[str, float]:
        return self._marks.copy()

    def set_id(self, student_id: str) -> None:
        self.update(id=student_id)

    def set_name(self, name: str) -> None:
        self.update(name=name)

    def get_mark(self, assessment_name: str) -> Optional[float]:
        """Get the marks recorded for an assessment, if any."""
        return self._marks.get(assessment_name)

    def set_mark(self, assessment_name: str, marks: float) -> None:
        """Record marks for an assessment, replacing any previous value."""
        self._marks[assessment_name] = marks
        self.update()

    def delete_mark(self, assessment_name: str) -> bool:
        """Remove the marks for an assessment. Returns False if none were recorded."""
        if assessment_name not in self._marks:
            return False
        del self._marks[assessment_name]
        self.update()
        return True

    def rename_mark(self, old_name: str, new_name: str) -> None:
        """Move the marks recorded under ``old_name`` to ``new_name``."""
        if old_name in self._marks:
            self._marks[new_name] = self._marks.pop(old_name)
            self.update()

    def __str__(self) -> str:
        return f"{self._id} - {self._name}"


class TeachingClass(AbstractEntity):
    """One offering of a module, owning its students and assessments."""

    def __init__(self, class_id: str, module_code: str,
                 name_policy: NameCasePolicy = NameCasePolicy.CASE_INSENSITIVE):
        super().__init__()
        self._id = class_id
        self._module_code = module_code
        self._students = StudentList()
        self._assessments = AssessmentList(name_policy)

    @property
    def id(self) -> str:
        return self._id

    @property
    def module_code(self) -> str:
        return self._module_code

    @property
    def students(self) -> StudentList:
        return self._students

    @property
    def assessments(self) -> AssessmentList:
        return self._assessments

    def set_id(self, class_id: str) -> None:
        self.update(id=class_id)

    def summary(self) -> Dict[str, Any]:
        """Counts shown when listing classes."""
        return {
            "students": len(self._students),
            "assessments": len(self._assessments),
            "total_weightage": self._assessments.total_weightage(),
        }

    def __str__(self) -> str:
        summary = self.summary()
        return (
            f"{self._id} (Module: {self._module_code}, Students: {summary['students']}, "
            f"Assessments: {summary['assessments']}, Total Weightage: {summary['total_weightage']:,.2f}%)"
        )
