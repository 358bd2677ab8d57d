"""
Rules governing valid assessment state.

The predicates here never mutate anything. The ``check_*`` helpers raise the
matching domain error so that commands can run every check before applying
the first change.
"""

from decimal import Decimal
from typing import Iterable, List, Optional

from .enums import NameCasePolicy
from .exceptions import AggregateConstraintError, DuplicateEntityError, InvalidValueError


MINIMUM_MARKS = 0
WEIGHTAGE_RANGE = (0.0, 100.0)

MESSAGE_FORMAT_TOTAL_WEIGHTAGE_EXCEEDED = "Invalid weightage. Total weightage exceeds {maximum:g}%."
MESSAGE_FORMAT_DUPLICATE_ASSESSMENT_NAME = "An assessment with the same name already exists."
MESSAGE_FORMAT_MARKS_ABOVE_MAXIMUM = (
    "Invalid maximum marks. {count} student(s) already have marks above {maximum} for {name}."
)
MESSAGE_FORMAT_INVALID_MARKS = "Invalid marks. Marks must be between {minimum:,.2f} and {maximum:,.2f} (inclusive)"


def is_weightage_within_range(weightage: float) -> bool:
    """Check whether a weightage (or a weightage total) lies in the valid range."""
    return WEIGHTAGE_RANGE[0] <= weightage <= WEIGHTAGE_RANGE[1]


def is_marks_valid(maximum_marks: int) -> bool:
    """Check whether a maximum marks value is acceptable."""
    return maximum_marks >= MINIMUM_MARKS


def is_mark_within_range(marks: float, maximum_marks: int) -> bool:
    """Check whether a student's marks fit an assessment's maximum."""
    return 0 <= marks <= maximum_marks


def sum_weightages(weightages: Iterable[float]) -> float:
    """Add weightages as the decimal numbers they were entered as.

    Each value is summed through its shortest decimal form, so cent-valued
    weightages that add up to exactly 100 give exactly 100.0 in any order.
    """
    return float(sum((Decimal(repr(float(weightage))) for weightage in weightages), Decimal(0)))


def _kept_weightages(assessments: Iterable['Assessment'], excluded_name: Optional[str],
                     name_policy: NameCasePolicy) -> List[float]:
    return [
        assessment.weightage
        for assessment in assessments
        if excluded_name is None or not name_policy.matches(assessment.name, excluded_name)
    ]


def total_weightage_excluding(assessments: Iterable['Assessment'], excluded_name: Optional[str] = None,
                              name_policy: NameCasePolicy = NameCasePolicy.CASE_INSENSITIVE) -> float:
    """Sum the weightage of every assessment whose name is not ``excluded_name``.

    Excluding the edited assessment keeps its current weightage out of the
    total, so that its proposed weightage can be added in its place.
    """
    return sum_weightages(_kept_weightages(assessments, excluded_name, name_policy))


def check_total_weightage(assessments: Iterable['Assessment'], proposed_weightage: float,
                          excluded_name: Optional[str] = None,
                          name_policy: NameCasePolicy = NameCasePolicy.CASE_INSENSITIVE,
                          message: Optional[str] = None) -> float:
    """Raise if ``proposed_weightage`` pushes the class total out of range.

    Returns the would-be total when the check passes.
    """
    total = sum_weightages(
        _kept_weightages(assessments, excluded_name, name_policy) + [proposed_weightage]
    )
    if not is_weightage_within_range(total):
        raise AggregateConstraintError(
            message or MESSAGE_FORMAT_TOTAL_WEIGHTAGE_EXCEEDED.format(maximum=WEIGHTAGE_RANGE[1]),
            details={"total_weightage": total},
        )
    return total


def check_new_name(assessments: Iterable['Assessment'], new_name: str,
                   name_policy: NameCasePolicy = NameCasePolicy.CASE_INSENSITIVE,
                   message: Optional[str] = None) -> None:
    """Raise if any assessment in the class already uses ``new_name``.

    The assessment being renamed is not skipped: renaming it to its own
    current name is rejected as well.
    """
    for assessment in assessments:
        if name_policy.matches(assessment.name, new_name):
            raise DuplicateEntityError(message or MESSAGE_FORMAT_DUPLICATE_ASSESSMENT_NAME)


def check_new_maximum_marks(students: Iterable['Student'], assessment_name: str, new_maximum_marks: int) -> None:
    """Raise if recorded marks for the assessment would exceed the new maximum."""
    over = [
        student for student in students
        if student.get_mark(assessment_name) is not None and student.get_mark(assessment_name) > new_maximum_marks
    ]
    if over:
        raise AggregateConstraintError(
            MESSAGE_FORMAT_MARKS_ABOVE_MAXIMUM.format(
                count=len(over), maximum=new_maximum_marks, name=assessment_name
            ),
            details={"student_ids": [student.id for student in over]},
        )


def check_mark(assessment: 'Assessment', marks: float) -> None:
    """Raise if ``marks`` does not fit within the assessment's maximum marks."""
    if not is_mark_within_range(marks, assessment.maximum_marks):
        raise InvalidValueError(
            MESSAGE_FORMAT_INVALID_MARKS.format(minimum=0, maximum=assessment.maximum_marks)
        )
