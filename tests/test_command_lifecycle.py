"""Tests for the shared command contract and the command registry."""

from __future__ import annotations

import pytest

from taa.commands import COMMANDS, create_command, parse_command, split_command_line
from taa.commands.assessment_commands import EditAssessmentArguments, EditAssessmentCommand
from taa.commands.module_commands import AddModuleCommand
from taa.core.enums import CommandState
from taa.core.exceptions import (
    CommandStateError, MissingArgumentError, TaaException, UnknownCommandError, UsageError
)


class TestLifecycle:
    def test_starts_created(self):
        command = AddModuleCommand("c/CS2113 n/SE")
        assert command.state is CommandState.CREATED
        assert command.arguments is None

    def test_validate_then_execute(self, model, ui, storage):
        command = AddModuleCommand("c/CS2113 n/SE")
        command.validate()
        assert command.state is CommandState.VALIDATED
        command.execute(model, ui, storage)
        assert command.state is CommandState.EXECUTED

    def test_execute_before_validate_fails(self, model, ui, storage):
        command = AddModuleCommand("c/CS2113 n/SE")
        with pytest.raises(CommandStateError):
            command.execute(model, ui, storage)
        assert model.modules.size == 0

    def test_validate_twice_fails(self):
        command = AddModuleCommand("c/CS2113 n/SE")
        command.validate()
        with pytest.raises(CommandStateError):
            command.validate()

    def test_execute_twice_fails(self, model, ui, storage):
        command = AddModuleCommand("c/CS2113 n/SE")
        command.validate()
        command.execute(model, ui, storage)
        with pytest.raises(CommandStateError):
            command.execute(model, ui, storage)
        assert model.modules.size == 1

    def test_failed_validation_stays_created(self):
        command = AddModuleCommand("")
        with pytest.raises(UsageError):
            command.validate()
        assert command.state is CommandState.CREATED


class TestValidation:
    def test_empty_argument_is_usage_error(self):
        with pytest.raises(UsageError) as exc_info:
            EditAssessmentCommand("   ").validate()
        assert exc_info.value.message.startswith("Usage: edit_assessment c/<CLASS_ID>")
        assert exc_info.value.error_code == "usage"

    def test_missing_required_key(self):
        with pytest.raises(MissingArgumentError):
            EditAssessmentCommand("c/C1 w/60").validate()

    def test_missing_every_optional_key(self):
        with pytest.raises(MissingArgumentError) as exc_info:
            EditAssessmentCommand("c/C1 n/Midterm").validate()
        assert "Missing argument" in exc_info.value.message

    def test_blank_value_counts_as_missing(self):
        with pytest.raises(MissingArgumentError):
            EditAssessmentCommand("c/C1 n/Midterm w/").validate()

    def test_validate_returns_typed_record(self):
        arguments = EditAssessmentCommand("c/C1 n/Midterm m/80 w/25.5").validate()
        assert arguments == EditAssessmentArguments(
            class_id="C1", name="Midterm", new_name=None, new_maximum_marks=80, new_weightage=25.5
        )

    def test_typed_record_is_frozen(self):
        arguments = EditAssessmentCommand("c/C1 n/Midterm w/25").validate()
        with pytest.raises(Exception):
            arguments.new_weightage = 99.0

    def test_all_errors_share_base_type(self):
        with pytest.raises(TaaException):
            AddModuleCommand("n/NoCode").validate()


class TestRegistry:
    def test_split_command_line(self):
        assert split_command_line("  add_module c/CS2113 n/SE ") == ("add_module", "c/CS2113 n/SE")
        assert split_command_line("list_modules") == ("list_modules", "")
        assert split_command_line("") == ("", "")

    def test_create_known_command(self):
        command = create_command("add_module", "c/CS2113 n/SE")
        assert isinstance(command, AddModuleCommand)
        assert command.argument_map == {"c": "CS2113", "n": "SE"}

    def test_unknown_command(self):
        with pytest.raises(UnknownCommandError) as exc_info:
            parse_command("fly_away now")
        assert "fly_away" in exc_info.value.message

    def test_every_command_word_is_registered_under_its_own_name(self):
        for command_word, command_class in COMMANDS.items():
            assert command_class.COMMAND_WORD == command_word
            assert command_class.get_usage().startswith(command_word)
