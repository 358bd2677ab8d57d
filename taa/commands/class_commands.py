"""
Commands for managing teaching classes.
"""

from dataclasses import dataclass

from ..core.entities import TeachingClass
from ..core.exceptions import DuplicateEntityError
from ..core.model import MESSAGE_CLASS_EXISTS
from .base import Command


KEY_CLASS_ID = "c"
KEY_MODULE_CODE = "m"
KEY_NEW_CLASS_ID = "nc"

MESSAGE_INVALID_CLASS_ID = "Invalid class ID."
MESSAGE_INVALID_MODULE_CODE = "Invalid module code."
MESSAGE_INVALID_NEW_CLASS_ID = "Invalid new class ID."
MESSAGE_FORMAT_CLASS_ADDED = "Class added:\n  {teaching_class}\nThere are {count} classes in the list."
MESSAGE_FORMAT_CLASS_EDITED = "Class updated:\n  {teaching_class}"
MESSAGE_FORMAT_CLASS_DELETED = "Class removed:\n  {teaching_class}\nThere are {count} classes in the list."
MESSAGE_NO_CLASSES = "There are no classes in the list."
MESSAGE_FORMAT_LIST_CLASSES = "List of classes:\n{lines}"


@dataclass(frozen=True)
class AddClassArguments:
    class_id: str
    module_code: str


@dataclass(frozen=True)
class EditClassArguments:
    class_id: str
    new_class_id: str


@dataclass(frozen=True)
class ClassIdArguments:
    class_id: str


class AddClassCommand(Command):
    COMMAND_WORD = "add_class"
    KEYS = (KEY_CLASS_ID, KEY_MODULE_CODE)
    REQUIRED_KEYS = (KEY_CLASS_ID, KEY_MODULE_CODE)
    USAGE = f"{KEY_CLASS_ID}/<CLASS_ID> {KEY_MODULE_CODE}/<MODULE_CODE>"

    def parse_arguments(self) -> AddClassArguments:
        return AddClassArguments(
            class_id=self.get_identifier(KEY_CLASS_ID, MESSAGE_INVALID_CLASS_ID),
            module_code=self.get_identifier(KEY_MODULE_CODE, MESSAGE_INVALID_MODULE_CODE),
        )

    def apply(self, model, ui, storage, arguments: AddClassArguments) -> None:
        model.require_module(arguments.module_code)
        teaching_class = TeachingClass(arguments.class_id, arguments.module_code, model.name_policy)
        model.classes.add_class(teaching_class)

        storage.save(model)

        ui.print_message(MESSAGE_FORMAT_CLASS_ADDED.format(teaching_class=teaching_class, count=model.classes.size))


class EditClassCommand(Command):
    COMMAND_WORD = "edit_class"
    KEYS = (KEY_CLASS_ID, KEY_NEW_CLASS_ID)
    REQUIRED_KEYS = (KEY_CLASS_ID, KEY_NEW_CLASS_ID)
    USAGE = f"{KEY_CLASS_ID}/<CLASS_ID> {KEY_NEW_CLASS_ID}/<NEW_CLASS_ID>"

    def parse_arguments(self) -> EditClassArguments:
        return EditClassArguments(
            class_id=self.get_identifier(KEY_CLASS_ID, MESSAGE_INVALID_CLASS_ID),
            new_class_id=self.get_identifier(KEY_NEW_CLASS_ID, MESSAGE_INVALID_NEW_CLASS_ID),
        )

    def apply(self, model, ui, storage, arguments: EditClassArguments) -> None:
        teaching_class = model.require_class(arguments.class_id)
        if model.classes.has_class(arguments.new_class_id):
            raise DuplicateEntityError(MESSAGE_CLASS_EXISTS, details={"class_id": arguments.new_class_id})
        teaching_class.set_id(arguments.new_class_id)

        storage.save(model)

        ui.print_message(MESSAGE_FORMAT_CLASS_EDITED.format(teaching_class=teaching_class))


class DeleteClassCommand(Command):
    COMMAND_WORD = "delete_class"
    KEYS = (KEY_CLASS_ID,)
    REQUIRED_KEYS = (KEY_CLASS_ID,)
    USAGE = f"{KEY_CLASS_ID}/<CLASS_ID>"

    def parse_arguments(self) -> ClassIdArguments:
        return ClassIdArguments(class_id=self.get_identifier(KEY_CLASS_ID, MESSAGE_INVALID_CLASS_ID))

    def apply(self, model, ui, storage, arguments: ClassIdArguments) -> None:
        teaching_class = model.classes.delete_class(arguments.class_id)

        storage.save(model)

        ui.print_message(MESSAGE_FORMAT_CLASS_DELETED.format(teaching_class=teaching_class, count=model.classes.size))


class ListClassesCommand(Command):
    COMMAND_WORD = "list_classes"
    REQUIRES_ARGUMENT = False

    def apply(self, model, ui, storage, arguments) -> None:
        if not model.classes.size:
            ui.print_message(MESSAGE_NO_CLASSES)
            return

        lines = "\n".join(f"  {index}. {teaching_class}" for index, teaching_class in enumerate(model.classes, 1))
        ui.print_message(MESSAGE_FORMAT_LIST_CLASSES.format(lines=lines))
