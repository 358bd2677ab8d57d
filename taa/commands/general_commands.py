"""
Commands that do not touch the domain model.
"""

from .base import Command


MESSAGE_GOODBYE = "Goodbye! Your data has been saved."
MESSAGE_FORMAT_HELP = "Available commands:\n{lines}"


class HelpCommand(Command):
    COMMAND_WORD = "help"
    REQUIRES_ARGUMENT = False

    def apply(self, model, ui, storage, arguments) -> None:
        from .registry import COMMANDS

        lines = "\n".join(f"  {command_class.get_usage()}" for command_class in COMMANDS.values())
        ui.print_message(MESSAGE_FORMAT_HELP.format(lines=lines))


class ExitCommand(Command):
    COMMAND_WORD = "exit"
    REQUIRES_ARGUMENT = False
    IS_EXIT = True

    def apply(self, model, ui, storage, arguments) -> None:
        ui.print_message(MESSAGE_GOODBYE)
