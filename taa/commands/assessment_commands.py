"""
Commands for managing the assessments of a teaching class.
"""

from dataclasses import dataclass
from typing import Optional

from ..core import assessment_rules
from ..core.assessment_rules import MINIMUM_MARKS, WEIGHTAGE_RANGE
from ..core.entities import Assessment
from ..core.exceptions import InvalidValueError
from ..core.model import require_assessment
from .base import Command


KEY_CLASS_ID = "c"
KEY_ASSESSMENT_NAME = "n"
KEY_NEW_ASSESSMENT_NAME = "nn"
KEY_MAXIMUM_MARKS = "m"
KEY_WEIGHTAGE = "w"

MESSAGE_INVALID_CLASS_ID = "Invalid class ID."
MESSAGE_INVALID_WEIGHTAGE = (
    f"Invalid weightage. Weightage must be between {WEIGHTAGE_RANGE[0]:,.2f} "
    f"and {WEIGHTAGE_RANGE[1]:,.2f} (inclusive)"
)
MESSAGE_INVALID_MAXIMUM_MARKS = (
    f"Invalid maximum marks. Maximum marks must be larger than {MINIMUM_MARKS} (inclusive)"
)
MESSAGE_INVALID_NEW_WEIGHTAGE = (
    f"Invalid new weightage. Weightage must be between {WEIGHTAGE_RANGE[0]:,.2f} "
    f"and {WEIGHTAGE_RANGE[1]:,.2f} (inclusive)"
)
MESSAGE_INVALID_NEW_TOTAL_WEIGHTAGE = f"Invalid new weightage. Total new weightage exceeds {WEIGHTAGE_RANGE[1]:g}%."
MESSAGE_INVALID_NEW_MAXIMUM_MARKS = (
    f"Invalid new maximum marks. Maximum marks must be larger than {MINIMUM_MARKS} (inclusive)"
)
MESSAGE_INVALID_NEW_NAME = "Invalid new name. An assessment with the same name already exists."

MESSAGE_FORMAT_ASSESSMENT_ADDED = (
    "Assessment added to {class_id}:\n  {assessment}\nThere are {count} assessments in the class."
)
MESSAGE_FORMAT_ASSESSMENT_EDITED = "Assessment in {class_id} updated:\n  {assessment}"
MESSAGE_FORMAT_ASSESSMENT_DELETED = (
    "Assessment removed from {class_id}:\n  {assessment}\nThere are {count} assessments in the class."
)
MESSAGE_FORMAT_NO_ASSESSMENTS = "There are no assessments in {class_id}."
MESSAGE_FORMAT_LIST_ASSESSMENTS = "Assessments in {class_id}:\n{lines}\nTotal weightage: {total:,.2f}%"


def parse_weightage(command: Command, message: str) -> Optional[float]:
    weightage = command.get_number(KEY_WEIGHTAGE, message)
    if weightage is not None and not assessment_rules.is_weightage_within_range(weightage):
        raise InvalidValueError(message, details={"weightage": weightage})
    return weightage


def parse_maximum_marks(command: Command, message: str) -> Optional[int]:
    maximum_marks = command.get_integer(KEY_MAXIMUM_MARKS, message)
    if maximum_marks is not None and not assessment_rules.is_marks_valid(maximum_marks):
        raise InvalidValueError(message, details={"maximum_marks": maximum_marks})
    return maximum_marks


@dataclass(frozen=True)
class AddAssessmentArguments:
    class_id: str
    name: str
    maximum_marks: int
    weightage: float


@dataclass(frozen=True)
class EditAssessmentArguments:
    class_id: str
    name: str
    new_name: Optional[str] = None
    new_maximum_marks: Optional[int] = None
    new_weightage: Optional[float] = None


@dataclass(frozen=True)
class AssessmentNameArguments:
    class_id: str
    name: str


@dataclass(frozen=True)
class ClassAssessmentsArguments:
    class_id: str


class AddAssessmentCommand(Command):
    COMMAND_WORD = "add_assessment"
    KEYS = (KEY_CLASS_ID, KEY_ASSESSMENT_NAME, KEY_MAXIMUM_MARKS, KEY_WEIGHTAGE)
    REQUIRED_KEYS = (KEY_CLASS_ID, KEY_ASSESSMENT_NAME, KEY_MAXIMUM_MARKS, KEY_WEIGHTAGE)
    USAGE = (
        f"{KEY_CLASS_ID}/<CLASS_ID> {KEY_ASSESSMENT_NAME}/<ASSESSMENT_NAME> "
        f"{KEY_MAXIMUM_MARKS}/<MAXIMUM_MARKS> {KEY_WEIGHTAGE}/<WEIGHTAGE>"
    )

    def parse_arguments(self) -> AddAssessmentArguments:
        return AddAssessmentArguments(
            class_id=self.get_identifier(KEY_CLASS_ID, MESSAGE_INVALID_CLASS_ID),
            name=self.get_value(KEY_ASSESSMENT_NAME),
            maximum_marks=parse_maximum_marks(self, MESSAGE_INVALID_MAXIMUM_MARKS),
            weightage=parse_weightage(self, MESSAGE_INVALID_WEIGHTAGE),
        )

    def apply(self, model, ui, storage, arguments: AddAssessmentArguments) -> None:
        teaching_class = model.require_class(arguments.class_id)
        assessment = Assessment(arguments.name, arguments.maximum_marks, arguments.weightage)
        teaching_class.assessments.add_assessment(assessment)

        storage.save(model)

        ui.print_message(MESSAGE_FORMAT_ASSESSMENT_ADDED.format(
            class_id=teaching_class.id, assessment=assessment, count=teaching_class.assessments.size
        ))


class EditAssessmentCommand(Command):
    """Edit the name, maximum marks and/or weightage of an assessment.

    Values that are not given keep their current value. Every check runs
    before the first change, so a rejected edit leaves the assessment as it
    was.
    """

    COMMAND_WORD = "edit_assessment"
    KEYS = (KEY_CLASS_ID, KEY_ASSESSMENT_NAME, KEY_NEW_ASSESSMENT_NAME, KEY_MAXIMUM_MARKS, KEY_WEIGHTAGE)
    REQUIRED_KEYS = (KEY_CLASS_ID, KEY_ASSESSMENT_NAME)
    ONE_OF_KEYS = (KEY_NEW_ASSESSMENT_NAME, KEY_MAXIMUM_MARKS, KEY_WEIGHTAGE)
    USAGE = (
        f"{KEY_CLASS_ID}/<CLASS_ID> {KEY_ASSESSMENT_NAME}/<ASSESSMENT_NAME> "
        f"[{KEY_NEW_ASSESSMENT_NAME}/<NEW_ASSESSMENT_NAME>] [{KEY_MAXIMUM_MARKS}/<NEW_MAXIMUM_MARKS>] "
        f"[{KEY_WEIGHTAGE}/<NEW_WEIGHTAGE>]"
    )

    def parse_arguments(self) -> EditAssessmentArguments:
        return EditAssessmentArguments(
            class_id=self.get_identifier(KEY_CLASS_ID, MESSAGE_INVALID_CLASS_ID),
            name=self.get_value(KEY_ASSESSMENT_NAME),
            new_name=self.get_value(KEY_NEW_ASSESSMENT_NAME),
            new_maximum_marks=parse_maximum_marks(self, MESSAGE_INVALID_NEW_MAXIMUM_MARKS),
            new_weightage=parse_weightage(self, MESSAGE_INVALID_NEW_WEIGHTAGE),
        )

    def apply(self, model, ui, storage, arguments: EditAssessmentArguments) -> None:
        teaching_class = model.require_class(arguments.class_id)
        assessments = teaching_class.assessments
        assessment = require_assessment(teaching_class, arguments.name)

        if arguments.new_weightage is not None:
            assessment_rules.check_total_weightage(
                assessments,
                arguments.new_weightage,
                excluded_name=assessment.name,
                name_policy=assessments.name_policy,
                message=MESSAGE_INVALID_NEW_TOTAL_WEIGHTAGE,
            )
        if arguments.new_maximum_marks is not None:
            assessment_rules.check_new_maximum_marks(
                teaching_class.students, assessment.name, arguments.new_maximum_marks
            )
        if arguments.new_name is not None:
            assessment_rules.check_new_name(
                assessments, arguments.new_name, assessments.name_policy, message=MESSAGE_INVALID_NEW_NAME
            )

        if arguments.new_weightage is not None:
            assessment.set_weightage(arguments.new_weightage)
        if arguments.new_maximum_marks is not None:
            assessment.set_maximum_marks(arguments.new_maximum_marks)
        if arguments.new_name is not None:
            old_name = assessment.name
            assessment.set_name(arguments.new_name)
            for student in teaching_class.students:
                student.rename_mark(old_name, arguments.new_name)

        storage.save(model)

        ui.print_message(MESSAGE_FORMAT_ASSESSMENT_EDITED.format(class_id=teaching_class.id, assessment=assessment))


class DeleteAssessmentCommand(Command):
    COMMAND_WORD = "delete_assessment"
    KEYS = (KEY_CLASS_ID, KEY_ASSESSMENT_NAME)
    REQUIRED_KEYS = (KEY_CLASS_ID, KEY_ASSESSMENT_NAME)
    USAGE = f"{KEY_CLASS_ID}/<CLASS_ID> {KEY_ASSESSMENT_NAME}/<ASSESSMENT_NAME>"

    def parse_arguments(self) -> AssessmentNameArguments:
        return AssessmentNameArguments(
            class_id=self.get_identifier(KEY_CLASS_ID, MESSAGE_INVALID_CLASS_ID),
            name=self.get_value(KEY_ASSESSMENT_NAME),
        )

    def apply(self, model, ui, storage, arguments: AssessmentNameArguments) -> None:
        teaching_class = model.require_class(arguments.class_id)
        assessment = teaching_class.assessments.delete_assessment(arguments.name)
        for student in teaching_class.students:
            student.delete_mark(assessment.name)

        storage.save(model)

        ui.print_message(MESSAGE_FORMAT_ASSESSMENT_DELETED.format(
            class_id=teaching_class.id, assessment=assessment, count=teaching_class.assessments.size
        ))


class ListAssessmentsCommand(Command):
    COMMAND_WORD = "list_assessments"
    KEYS = (KEY_CLASS_ID,)
    REQUIRED_KEYS = (KEY_CLASS_ID,)
    USAGE = f"{KEY_CLASS_ID}/<CLASS_ID>"

    def parse_arguments(self) -> ClassAssessmentsArguments:
        return ClassAssessmentsArguments(class_id=self.get_identifier(KEY_CLASS_ID, MESSAGE_INVALID_CLASS_ID))

    def apply(self, model, ui, storage, arguments: ClassAssessmentsArguments) -> None:
        teaching_class = model.require_class(arguments.class_id)
        assessments = teaching_class.assessments
        if not assessments.size:
            ui.print_message(MESSAGE_FORMAT_NO_ASSESSMENTS.format(class_id=teaching_class.id))
            return

        lines = "\n".join(f"  {index}. {assessment}" for index, assessment in enumerate(assessments, 1))
        ui.print_message(MESSAGE_FORMAT_LIST_ASSESSMENTS.format(
            class_id=teaching_class.id, lines=lines, total=assessments.total_weightage()
        ))
