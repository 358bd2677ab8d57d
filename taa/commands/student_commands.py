"""
Commands for managing the students of a teaching class.
"""

from dataclasses import dataclass
from typing import Optional

from ..core.entities import Student
from ..core.exceptions import DuplicateEntityError
from ..core.model import MESSAGE_STUDENT_EXISTS, require_student
from .base import Command


KEY_CLASS_ID = "c"
KEY_STUDENT_ID = "i"
KEY_STUDENT_NAME = "n"
KEY_NEW_STUDENT_ID = "ni"
KEY_KEYWORD = "k"

MESSAGE_INVALID_CLASS_ID = "Invalid class ID."
MESSAGE_INVALID_STUDENT_ID = "Invalid student ID."
MESSAGE_INVALID_NEW_STUDENT_ID = "Invalid new student ID."
MESSAGE_FORMAT_STUDENT_ADDED = "Student added to {class_id}:\n  {student}\nThere are {count} students in the class."
MESSAGE_FORMAT_STUDENT_EDITED = "Student in {class_id} updated:\n  {student}"
MESSAGE_FORMAT_STUDENT_DELETED = "Student removed from {class_id}:\n  {student}\nThere are {count} students in the class."
MESSAGE_FORMAT_NO_STUDENTS = "There are no students in {class_id}."
MESSAGE_FORMAT_LIST_STUDENTS = "Students in {class_id}:\n{lines}"
MESSAGE_FORMAT_NO_MATCHING_STUDENTS = "There are no students in {class_id} matching '{keyword}'."
MESSAGE_FORMAT_FOUND_STUDENTS = "Students in {class_id} matching '{keyword}':\n{lines}"


def format_student_lines(students) -> str:
    return "\n".join(f"  {index}. {student}" for index, student in enumerate(students, 1))


@dataclass(frozen=True)
class AddStudentArguments:
    class_id: str
    student_id: str
    name: str


@dataclass(frozen=True)
class EditStudentArguments:
    class_id: str
    student_id: str
    new_student_id: Optional[str] = None
    new_name: Optional[str] = None


@dataclass(frozen=True)
class StudentIdArguments:
    class_id: str
    student_id: str


@dataclass(frozen=True)
class ClassStudentsArguments:
    class_id: str


@dataclass(frozen=True)
class FindStudentArguments:
    class_id: str
    keyword: str


class AddStudentCommand(Command):
    COMMAND_WORD = "add_student"
    KEYS = (KEY_CLASS_ID, KEY_STUDENT_ID, KEY_STUDENT_NAME)
    REQUIRED_KEYS = (KEY_CLASS_ID, KEY_STUDENT_ID, KEY_STUDENT_NAME)
    USAGE = f"{KEY_CLASS_ID}/<CLASS_ID> {KEY_STUDENT_ID}/<STUDENT_ID> {KEY_STUDENT_NAME}/<STUDENT_NAME>"

    def parse_arguments(self) -> AddStudentArguments:
        return AddStudentArguments(
            class_id=self.get_identifier(KEY_CLASS_ID, MESSAGE_INVALID_CLASS_ID),
            student_id=self.get_identifier(KEY_STUDENT_ID, MESSAGE_INVALID_STUDENT_ID),
            name=self.get_value(KEY_STUDENT_NAME),
        )

    def apply(self, model, ui, storage, arguments: AddStudentArguments) -> None:
        teaching_class = model.require_class(arguments.class_id)
        student = Student(arguments.student_id, arguments.name)
        teaching_class.students.add_student(student)

        storage.save(model)

        ui.print_message(MESSAGE_FORMAT_STUDENT_ADDED.format(
            class_id=teaching_class.id, student=student, count=teaching_class.students.size
        ))


class EditStudentCommand(Command):
    COMMAND_WORD = "edit_student"
    KEYS = (KEY_CLASS_ID, KEY_STUDENT_ID, KEY_NEW_STUDENT_ID, KEY_STUDENT_NAME)
    REQUIRED_KEYS = (KEY_CLASS_ID, KEY_STUDENT_ID)
    ONE_OF_KEYS = (KEY_NEW_STUDENT_ID, KEY_STUDENT_NAME)
    USAGE = (
        f"{KEY_CLASS_ID}/<CLASS_ID> {KEY_STUDENT_ID}/<STUDENT_ID> "
        f"[{KEY_NEW_STUDENT_ID}/<NEW_STUDENT_ID>] [{KEY_STUDENT_NAME}/<NEW_STUDENT_NAME>]"
    )

    def parse_arguments(self) -> EditStudentArguments:
        return EditStudentArguments(
            class_id=self.get_identifier(KEY_CLASS_ID, MESSAGE_INVALID_CLASS_ID),
            student_id=self.get_identifier(KEY_STUDENT_ID, MESSAGE_INVALID_STUDENT_ID),
            new_student_id=self.get_identifier(KEY_NEW_STUDENT_ID, MESSAGE_INVALID_NEW_STUDENT_ID),
            new_name=self.get_value(KEY_STUDENT_NAME),
        )

    def apply(self, model, ui, storage, arguments: EditStudentArguments) -> None:
        teaching_class = model.require_class(arguments.class_id)
        student = require_student(teaching_class, arguments.student_id)
        if arguments.new_student_id is not None and teaching_class.students.has_student(arguments.new_student_id):
            raise DuplicateEntityError(MESSAGE_STUDENT_EXISTS, details={"student_id": arguments.new_student_id})

        if arguments.new_student_id is not None:
            student.set_id(arguments.new_student_id)
        if arguments.new_name is not None:
            student.set_name(arguments.new_name)

        storage.save(model)

        ui.print_message(MESSAGE_FORMAT_STUDENT_EDITED.format(class_id=teaching_class.id, student=student))


class DeleteStudentCommand(Command):
    COMMAND_WORD = "delete_student"
    KEYS = (KEY_CLASS_ID, KEY_STUDENT_ID)
    REQUIRED_KEYS = (KEY_CLASS_ID, KEY_STUDENT_ID)
    USAGE = f"{KEY_CLASS_ID}/<CLASS_ID> {KEY_STUDENT_ID}/<STUDENT_ID>"

    def parse_arguments(self) -> StudentIdArguments:
        return StudentIdArguments(
            class_id=self.get_identifier(KEY_CLASS_ID, MESSAGE_INVALID_CLASS_ID),
            student_id=self.get_identifier(KEY_STUDENT_ID, MESSAGE_INVALID_STUDENT_ID),
        )

    def apply(self, model, ui, storage, arguments: StudentIdArguments) -> None:
        teaching_class = model.require_class(arguments.class_id)
        student = teaching_class.students.delete_student(arguments.student_id)

        storage.save(model)

        ui.print_message(MESSAGE_FORMAT_STUDENT_DELETED.format(
            class_id=teaching_class.id, student=student, count=teaching_class.students.size
        ))


class ListStudentsCommand(Command):
    COMMAND_WORD = "list_students"
    KEYS = (KEY_CLASS_ID,)
    REQUIRED_KEYS = (KEY_CLASS_ID,)
    USAGE = f"{KEY_CLASS_ID}/<CLASS_ID>"

    def parse_arguments(self) -> ClassStudentsArguments:
        return ClassStudentsArguments(class_id=self.get_identifier(KEY_CLASS_ID, MESSAGE_INVALID_CLASS_ID))

    def apply(self, model, ui, storage, arguments: ClassStudentsArguments) -> None:
        teaching_class = model.require_class(arguments.class_id)
        if not teaching_class.students.size:
            ui.print_message(MESSAGE_FORMAT_NO_STUDENTS.format(class_id=teaching_class.id))
            return

        ui.print_message(MESSAGE_FORMAT_LIST_STUDENTS.format(
            class_id=teaching_class.id, lines=format_student_lines(teaching_class.students)
        ))


class FindStudentCommand(Command):
    COMMAND_WORD = "find_student"
    KEYS = (KEY_CLASS_ID, KEY_KEYWORD)
    REQUIRED_KEYS = (KEY_CLASS_ID, KEY_KEYWORD)
    USAGE = f"{KEY_CLASS_ID}/<CLASS_ID> {KEY_KEYWORD}/<KEYWORD>"

    def parse_arguments(self) -> FindStudentArguments:
        return FindStudentArguments(
            class_id=self.get_identifier(KEY_CLASS_ID, MESSAGE_INVALID_CLASS_ID),
            keyword=self.get_value(KEY_KEYWORD),
        )

    def apply(self, model, ui, storage, arguments: FindStudentArguments) -> None:
        teaching_class = model.require_class(arguments.class_id)
        students = teaching_class.students.find(arguments.keyword)
        if not students:
            ui.print_message(MESSAGE_FORMAT_NO_MATCHING_STUDENTS.format(
                class_id=teaching_class.id, keyword=arguments.keyword
            ))
            return

        ui.print_message(MESSAGE_FORMAT_FOUND_STUDENTS.format(
            class_id=teaching_class.id, keyword=arguments.keyword, lines=format_student_lines(students)
        ))
