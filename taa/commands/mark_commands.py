"""
Commands for recording and summarising the marks students obtain in assessments.
"""

import math
from dataclasses import dataclass

from ..core import assessment_rules
from ..core.exceptions import ResourceNotFoundError
from ..core.model import require_assessment, require_student
from .base import Command


KEY_CLASS_ID = "c"
KEY_STUDENT_ID = "i"
KEY_ASSESSMENT_NAME = "a"
KEY_MARKS = "m"

MESSAGE_INVALID_CLASS_ID = "Invalid class ID."
MESSAGE_INVALID_STUDENT_ID = "Invalid student ID."
MESSAGE_INVALID_MARKS_FORMAT = "Invalid marks. Marks must be a number."
MESSAGE_FORMAT_NO_MARK = "There are no marks recorded for {student} in {assessment}."
MESSAGE_FORMAT_MARK_SET = "Marks for {student} in {assessment} set to {marks:,.2f} / {maximum}."
MESSAGE_FORMAT_MARK_DELETED = "Marks for {student} in {assessment} removed."
MESSAGE_FORMAT_NO_STUDENTS = "There are no students in {class_id}."
MESSAGE_FORMAT_LIST_MARKS = "Marks for {assessment} in {class_id}:\n{lines}"
MESSAGE_FORMAT_NO_MARKS = "There are no marks recorded for {assessment} in {class_id}."
MESSAGE_FORMAT_AVERAGE_MARKS = (
    "Average marks for {assessment} in {class_id}: {average:,.2f} / {maximum} ({count} of {total} students)"
)

NO_MARK_PLACEHOLDER = "-"


@dataclass(frozen=True)
class SetMarkArguments:
    class_id: str
    student_id: str
    assessment_name: str
    marks: float


@dataclass(frozen=True)
class StudentMarkArguments:
    class_id: str
    student_id: str
    assessment_name: str


@dataclass(frozen=True)
class AssessmentMarksArguments:
    class_id: str
    assessment_name: str


class SetMarkCommand(Command):
    COMMAND_WORD = "set_mark"
    KEYS = (KEY_CLASS_ID, KEY_STUDENT_ID, KEY_ASSESSMENT_NAME, KEY_MARKS)
    REQUIRED_KEYS = (KEY_CLASS_ID, KEY_STUDENT_ID, KEY_ASSESSMENT_NAME, KEY_MARKS)
    USAGE = (
        f"{KEY_CLASS_ID}/<CLASS_ID> {KEY_STUDENT_ID}/<STUDENT_ID> "
        f"{KEY_ASSESSMENT_NAME}/<ASSESSMENT_NAME> {KEY_MARKS}/<MARKS>"
    )

    def parse_arguments(self) -> SetMarkArguments:
        return SetMarkArguments(
            class_id=self.get_identifier(KEY_CLASS_ID, MESSAGE_INVALID_CLASS_ID),
            student_id=self.get_identifier(KEY_STUDENT_ID, MESSAGE_INVALID_STUDENT_ID),
            assessment_name=self.get_value(KEY_ASSESSMENT_NAME),
            marks=self.get_number(KEY_MARKS, MESSAGE_INVALID_MARKS_FORMAT),
        )

    def apply(self, model, ui, storage, arguments: SetMarkArguments) -> None:
        teaching_class = model.require_class(arguments.class_id)
        student = require_student(teaching_class, arguments.student_id)
        assessment = require_assessment(teaching_class, arguments.assessment_name)
        assessment_rules.check_mark(assessment, arguments.marks)

        student.set_mark(assessment.name, arguments.marks)

        storage.save(model)

        ui.print_message(MESSAGE_FORMAT_MARK_SET.format(
            student=student, assessment=assessment.name, marks=arguments.marks, maximum=assessment.maximum_marks
        ))


class DeleteMarkCommand(Command):
    COMMAND_WORD = "delete_mark"
    KEYS = (KEY_CLASS_ID, KEY_STUDENT_ID, KEY_ASSESSMENT_NAME)
    REQUIRED_KEYS = (KEY_CLASS_ID, KEY_STUDENT_ID, KEY_ASSESSMENT_NAME)
    USAGE = f"{KEY_CLASS_ID}/<CLASS_ID> {KEY_STUDENT_ID}/<STUDENT_ID> {KEY_ASSESSMENT_NAME}/<ASSESSMENT_NAME>"

    def parse_arguments(self) -> StudentMarkArguments:
        return StudentMarkArguments(
            class_id=self.get_identifier(KEY_CLASS_ID, MESSAGE_INVALID_CLASS_ID),
            student_id=self.get_identifier(KEY_STUDENT_ID, MESSAGE_INVALID_STUDENT_ID),
            assessment_name=self.get_value(KEY_ASSESSMENT_NAME),
        )

    def apply(self, model, ui, storage, arguments: StudentMarkArguments) -> None:
        teaching_class = model.require_class(arguments.class_id)
        student = require_student(teaching_class, arguments.student_id)
        assessment = require_assessment(teaching_class, arguments.assessment_name)
        if not student.delete_mark(assessment.name):
            raise ResourceNotFoundError(MESSAGE_FORMAT_NO_MARK.format(student=student, assessment=assessment.name))

        storage.save(model)

        ui.print_message(MESSAGE_FORMAT_MARK_DELETED.format(student=student, assessment=assessment.name))


class ListMarksCommand(Command):
    COMMAND_WORD = "list_marks"
    KEYS = (KEY_CLASS_ID, KEY_ASSESSMENT_NAME)
    REQUIRED_KEYS = (KEY_CLASS_ID, KEY_ASSESSMENT_NAME)
    USAGE = f"{KEY_CLASS_ID}/<CLASS_ID> {KEY_ASSESSMENT_NAME}/<ASSESSMENT_NAME>"

    def parse_arguments(self) -> AssessmentMarksArguments:
        return AssessmentMarksArguments(
            class_id=self.get_identifier(KEY_CLASS_ID, MESSAGE_INVALID_CLASS_ID),
            assessment_name=self.get_value(KEY_ASSESSMENT_NAME),
        )

    def apply(self, model, ui, storage, arguments: AssessmentMarksArguments) -> None:
        teaching_class = model.require_class(arguments.class_id)
        assessment = require_assessment(teaching_class, arguments.assessment_name)
        if not teaching_class.students.size:
            ui.print_message(MESSAGE_FORMAT_NO_STUDENTS.format(class_id=teaching_class.id))
            return

        lines = []
        for index, student in enumerate(teaching_class.students, 1):
            marks = student.get_mark(assessment.name)
            shown = NO_MARK_PLACEHOLDER if marks is None else f"{marks:,.2f}"
            lines.append(f"  {index}. {student}: {shown}")
        ui.print_message(MESSAGE_FORMAT_LIST_MARKS.format(
            assessment=assessment.name, class_id=teaching_class.id, lines="\n".join(lines)
        ))


class AverageMarksCommand(Command):
    COMMAND_WORD = "average_marks"
    KEYS = (KEY_CLASS_ID, KEY_ASSESSMENT_NAME)
    REQUIRED_KEYS = (KEY_CLASS_ID, KEY_ASSESSMENT_NAME)
    USAGE = f"{KEY_CLASS_ID}/<CLASS_ID> {KEY_ASSESSMENT_NAME}/<ASSESSMENT_NAME>"

    def parse_arguments(self) -> AssessmentMarksArguments:
        return AssessmentMarksArguments(
            class_id=self.get_identifier(KEY_CLASS_ID, MESSAGE_INVALID_CLASS_ID),
            assessment_name=self.get_value(KEY_ASSESSMENT_NAME),
        )

    def apply(self, model, ui, storage, arguments: AssessmentMarksArguments) -> None:
        teaching_class = model.require_class(arguments.class_id)
        assessment = require_assessment(teaching_class, arguments.assessment_name)
        recorded = [
            student.get_mark(assessment.name)
            for student in teaching_class.students
            if student.get_mark(assessment.name) is not None
        ]
        if not recorded:
            ui.print_message(MESSAGE_FORMAT_NO_MARKS.format(assessment=assessment.name, class_id=teaching_class.id))
            return

        ui.print_message(MESSAGE_FORMAT_AVERAGE_MARKS.format(
            assessment=assessment.name,
            class_id=teaching_class.id,
            average=math.fsum(recorded) / len(recorded),
            maximum=assessment.maximum_marks,
            count=len(recorded),
            total=teaching_class.students.size,
        ))
