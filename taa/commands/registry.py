"""
The closed set of line commands, keyed by command word.
"""

from typing import Dict, Type

from ..core.exceptions import UnknownCommandError
from .assessment_commands import (
    AddAssessmentCommand, DeleteAssessmentCommand, EditAssessmentCommand, ListAssessmentsCommand
)
from .base import Command
from .class_commands import AddClassCommand, DeleteClassCommand, EditClassCommand, ListClassesCommand
from .general_commands import ExitCommand, HelpCommand
from .mark_commands import AverageMarksCommand, DeleteMarkCommand, ListMarksCommand, SetMarkCommand
from .module_commands import AddModuleCommand, DeleteModuleCommand, EditModuleCommand, ListModulesCommand
from .student_commands import (
    AddStudentCommand, DeleteStudentCommand, EditStudentCommand, FindStudentCommand, ListStudentsCommand
)


MESSAGE_FORMAT_UNKNOWN_COMMAND = "Invalid command: '{command_word}'. Type 'help' to see all commands."

COMMANDS: Dict[str, Type[Command]] = {
    command_class.COMMAND_WORD: command_class
    for command_class in (
        AddModuleCommand,
        EditModuleCommand,
        DeleteModuleCommand,
        ListModulesCommand,
        AddClassCommand,
        EditClassCommand,
        DeleteClassCommand,
        ListClassesCommand,
        AddStudentCommand,
        EditStudentCommand,
        DeleteStudentCommand,
        ListStudentsCommand,
        FindStudentCommand,
        AddAssessmentCommand,
        EditAssessmentCommand,
        DeleteAssessmentCommand,
        ListAssessmentsCommand,
        SetMarkCommand,
        DeleteMarkCommand,
        ListMarksCommand,
        AverageMarksCommand,
        HelpCommand,
        ExitCommand,
    )
}


def split_command_line(line: str):
    """Split a user line into its command word and raw argument string."""
    parts = line.strip().split(maxsplit=1)
    if not parts:
        return "", ""
    command_word = parts[0]
    argument = parts[1] if len(parts) > 1 else ""
    return command_word, argument


def create_command(command_word: str, argument: str = "") -> Command:
    """Build the command registered under ``command_word``."""
    command_class = COMMANDS.get(command_word)
    if command_class is None:
        raise UnknownCommandError(MESSAGE_FORMAT_UNKNOWN_COMMAND.format(command_word=command_word))
    return command_class(argument)


def parse_command(line: str) -> Command:
    command_word, argument = split_command_line(line)
    return create_command(command_word, argument)
