"""
Ordered domain collections with per-collection uniqueness rules.

Listing follows insertion order; lookups scan on the unique key.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from . import assessment_rules
from .enums import NameCasePolicy
from .exceptions import AggregateConstraintError, DuplicateEntityError, ResourceNotFoundError


MESSAGE_MODULE_EXISTS = "A module with the same code already exists."
MESSAGE_MODULE_NOT_FOUND = "Module not found."
MESSAGE_MODULE_HAS_CLASSES = "Module still has {count} class(es). Delete them first."
MESSAGE_CLASS_EXISTS = "A class with the same ID already exists."
MESSAGE_CLASS_NOT_FOUND = "Class not found."
MESSAGE_STUDENT_EXISTS = "A student with the same ID already exists."
MESSAGE_STUDENT_NOT_FOUND = "Student not found."
MESSAGE_ASSESSMENT_NOT_FOUND = "Assessment not found."


class AssessmentList:
    """Assessments of one teaching class."""

    def __init__(self, name_policy: NameCasePolicy = NameCasePolicy.CASE_INSENSITIVE):
        self._name_policy = name_policy
        self._assessments: List['Assessment'] = []

    @property
    def name_policy(self) -> NameCasePolicy:
        return self._name_policy

    @property
    def size(self) -> int:
        return len(self._assessments)

    def __len__(self) -> int:
        return len(self._assessments)

    def __iter__(self) -> Iterator['Assessment']:
        return iter(list(self._assessments))

    def get_assessment(self, name: str) -> Optional['Assessment']:
        """Find an assessment by name, following the configured case policy."""
        for assessment in self._assessments:
            if self._name_policy.matches(assessment.name, name):
                return assessment
        return None

    def total_weightage(self, excluded_name: Optional[str] = None) -> float:
        """Sum of weightages, leaving out ``excluded_name`` when given."""
        return assessment_rules.total_weightage_excluding(self._assessments, excluded_name, self._name_policy)

    def add_assessment(self, assessment: 'Assessment') -> None:
        """Add an assessment, keeping names unique and the total weightage in range."""
        assessment_rules.check_new_name(self._assessments, assessment.name, self._name_policy)
        assessment_rules.check_total_weightage(self._assessments, assessment.weightage, name_policy=self._name_policy)
        self._assessments.append(assessment)

    def delete_assessment(self, name: str) -> 'Assessment':
        """Remove an assessment by name and return it."""
        assessment = self.get_assessment(name)
        if assessment is None:
            raise ResourceNotFoundError(MESSAGE_ASSESSMENT_NOT_FOUND, details={"name": name})
        self._assessments.remove(assessment)
        return assessment


class StudentList:
    """Students enrolled in one teaching class."""

    def __init__(self):
        self._students: List['Student'] = []

    @property
    def size(self) -> int:
        return len(self._students)

    def __len__(self) -> int:
        return len(self._students)

    def __iter__(self) -> Iterator['Student']:
        return iter(list(self._students))

    def get_student(self, student_id: str) -> Optional['Student']:
        for student in self._students:
            if student.id == student_id:
                return student
        return None

    def has_student(self, student_id: str) -> bool:
        return self.get_student(student_id) is not None

    def add_student(self, student: 'Student') -> None:
        if self.has_student(student.id):
            raise DuplicateEntityError(MESSAGE_STUDENT_EXISTS, details={"student_id": student.id})
        self._students.append(student)

    def delete_student(self, student_id: str) -> 'Student':
        student = self.get_student(student_id)
        if student is None:
            raise ResourceNotFoundError(MESSAGE_STUDENT_NOT_FOUND, details={"student_id": student_id})
        self._students.remove(student)
        return student

    def find(self, keyword: str) -> List['Student']:
        """Students whose ID or name contains ``keyword``, ignoring case."""
        needle = keyword.casefold()
        return [
            student for student in self._students
            if needle in student.id.casefold() or needle in student.name.casefold()
        ]


class ModuleList:
    """All modules known to the assistant."""

    def __init__(self):
        self._modules: List['Module'] = []

    @property
    def size(self) -> int:
        return len(self._modules)

    def __len__(self) -> int:
        return len(self._modules)

    def __iter__(self) -> Iterator['Module']:
        return iter(list(self._modules))

    def get_module(self, code: str) -> Optional['Module']:
        for module in self._modules:
            if module.code == code:
                return module
        return None

    def has_module(self, code: str) -> bool:
        return self.get_module(code) is not None

    def add_module(self, module: 'Module') -> None:
        if self.has_module(module.code):
            raise DuplicateEntityError(MESSAGE_MODULE_EXISTS, details={"code": module.code})
        self._modules.append(module)

    def delete_module(self, code: str) -> 'Module':
        module = self.get_module(code)
        if module is None:
            raise ResourceNotFoundError(MESSAGE_MODULE_NOT_FOUND, details={"code": code})
        self._modules.remove(module)
        return module


class ClassList:
    """All teaching classes known to the assistant."""

    def __init__(self):
        self._classes: List['TeachingClass'] = []

    @property
    def size(self) -> int:
        return len(self._classes)

    def __len__(self) -> int:
        return len(self._classes)

    def __iter__(self) -> Iterator['TeachingClass']:
        return iter(list(self._classes))

    def get_class(self, class_id: str) -> Optional['TeachingClass']:
        for teaching_class in self._classes:
            if teaching_class.id == class_id:
                return teaching_class
        return None

    def has_class(self, class_id: str) -> bool:
        return self.get_class(class_id) is not None

    def classes_for_module(self, module_code: str) -> List['TeachingClass']:
        return [teaching_class for teaching_class in self._classes if teaching_class.module_code == module_code]

    def add_class(self, teaching_class: 'TeachingClass') -> None:
        if self.has_class(teaching_class.id):
            raise DuplicateEntityError(MESSAGE_CLASS_EXISTS, details={"class_id": teaching_class.id})
        self._classes.append(teaching_class)

    def delete_class(self, class_id: str) -> 'TeachingClass':
        teaching_class = self.get_class(class_id)
        if teaching_class is None:
            raise ResourceNotFoundError(MESSAGE_CLASS_NOT_FOUND, details={"class_id": class_id})
        self._classes.remove(teaching_class)
        return teaching_class


@dataclass
class DomainModel:
    """The single in-memory model every command reads and mutates."""
    modules: ModuleList = field(default_factory=ModuleList)
    classes: ClassList = field(default_factory=ClassList)
    name_policy: NameCasePolicy = NameCasePolicy.CASE_INSENSITIVE

    def require_module(self, code: str) -> 'Module':
        module = self.modules.get_module(code)
        if module is None:
            raise ResourceNotFoundError(MESSAGE_MODULE_NOT_FOUND, details={"code": code})
        return module

    def require_class(self, class_id: str) -> 'TeachingClass':
        teaching_class = self.classes.get_class(class_id)
        if teaching_class is None:
            raise ResourceNotFoundError(MESSAGE_CLASS_NOT_FOUND, details={"class_id": class_id})
        return teaching_class

    def delete_module(self, code: str) -> 'Module':
        """Delete a module that no class refers to."""
        self.require_module(code)
        classes = self.classes.classes_for_module(code)
        if classes:
            raise AggregateConstraintError(
                MESSAGE_MODULE_HAS_CLASSES.format(count=len(classes)),
                details={"class_ids": [teaching_class.id for teaching_class in classes]},
            )
        return self.modules.delete_module(code)


def require_assessment(teaching_class: 'TeachingClass', name: str) -> 'Assessment':
    assessment = teaching_class.assessments.get_assessment(name)
    if assessment is None:
        raise ResourceNotFoundError(MESSAGE_ASSESSMENT_NOT_FOUND, details={"name": name})
    return assessment


def require_student(teaching_class: 'TeachingClass', student_id: str) -> 'Student':
    student = teaching_class.students.get_student(student_id)
    if student is None:
        raise ResourceNotFoundError(MESSAGE_STUDENT_NOT_FOUND, details={"student_id": student_id})
    return student
