"""
Commands for managing modules.
"""

from dataclasses import dataclass

from ..core.entities import Module
from .base import Command


KEY_MODULE_CODE = "c"
KEY_MODULE_NAME = "n"

MESSAGE_INVALID_MODULE_CODE = "Invalid module code."
MESSAGE_FORMAT_MODULE_ADDED = "Module added:\n  {module}\nThere are {count} modules in the list."
MESSAGE_FORMAT_MODULE_EDITED = "Module updated:\n  {module}"
MESSAGE_FORMAT_MODULE_DELETED = "Module removed:\n  {module}\nThere are {count} modules in the list."
MESSAGE_NO_MODULES = "There are no modules in the list."
MESSAGE_FORMAT_LIST_MODULES = "List of modules:\n{lines}"


@dataclass(frozen=True)
class ModuleArguments:
    code: str
    name: str


@dataclass(frozen=True)
class ModuleCodeArguments:
    code: str


class AddModuleCommand(Command):
    COMMAND_WORD = "add_module"
    KEYS = (KEY_MODULE_CODE, KEY_MODULE_NAME)
    REQUIRED_KEYS = (KEY_MODULE_CODE, KEY_MODULE_NAME)
    USAGE = f"{KEY_MODULE_CODE}/<MODULE_CODE> {KEY_MODULE_NAME}/<MODULE_NAME>"

    def parse_arguments(self) -> ModuleArguments:
        return ModuleArguments(
            code=self.get_identifier(KEY_MODULE_CODE, MESSAGE_INVALID_MODULE_CODE),
            name=self.get_value(KEY_MODULE_NAME),
        )

    def apply(self, model, ui, storage, arguments: ModuleArguments) -> None:
        module = Module(arguments.code, arguments.name)
        model.modules.add_module(module)

        storage.save(model)

        ui.print_message(MESSAGE_FORMAT_MODULE_ADDED.format(module=module, count=model.modules.size))


class EditModuleCommand(Command):
    COMMAND_WORD = "edit_module"
    KEYS = (KEY_MODULE_CODE, KEY_MODULE_NAME)
    REQUIRED_KEYS = (KEY_MODULE_CODE, KEY_MODULE_NAME)
    USAGE = f"{KEY_MODULE_CODE}/<MODULE_CODE> {KEY_MODULE_NAME}/<NEW_MODULE_NAME>"

    def parse_arguments(self) -> ModuleArguments:
        return ModuleArguments(
            code=self.get_identifier(KEY_MODULE_CODE, MESSAGE_INVALID_MODULE_CODE),
            name=self.get_value(KEY_MODULE_NAME),
        )

    def apply(self, model, ui, storage, arguments: ModuleArguments) -> None:
        module = model.require_module(arguments.code)
        module.set_name(arguments.name)

        storage.save(model)

        ui.print_message(MESSAGE_FORMAT_MODULE_EDITED.format(module=module))


class DeleteModuleCommand(Command):
    COMMAND_WORD = "delete_module"
    KEYS = (KEY_MODULE_CODE,)
    REQUIRED_KEYS = (KEY_MODULE_CODE,)
    USAGE = f"{KEY_MODULE_CODE}/<MODULE_CODE>"

    def parse_arguments(self) -> ModuleCodeArguments:
        return ModuleCodeArguments(code=self.get_identifier(KEY_MODULE_CODE, MESSAGE_INVALID_MODULE_CODE))

    def apply(self, model, ui, storage, arguments: ModuleCodeArguments) -> None:
        module = model.delete_module(arguments.code)

        storage.save(model)

        ui.print_message(MESSAGE_FORMAT_MODULE_DELETED.format(module=module, count=model.modules.size))


class ListModulesCommand(Command):
    COMMAND_WORD = "list_modules"
    REQUIRES_ARGUMENT = False

    def apply(self, model, ui, storage, arguments) -> None:
        if not model.modules.size:
            ui.print_message(MESSAGE_NO_MODULES)
            return

        lines = "\n".join(f"  {index}. {module}" for index, module in enumerate(model.modules, 1))
        ui.print_message(MESSAGE_FORMAT_LIST_MODULES.format(lines=lines))
