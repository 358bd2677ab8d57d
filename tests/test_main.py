"""Tests for configuration loading and the command read loop."""

from __future__ import annotations

import json

import pytest

from conftest import FailingStorage, InMemoryStorage, RecordingUi
from taa.config import TaaConfig, load_config
from taa.core.enums import NameCasePolicy
from taa.core.exceptions import ConfigurationError
from taa.main import TaaApplication, main


class TestConfig:
    def test_defaults(self):
        config = load_config()
        assert config.case_sensitive_names is False
        assert config.name_policy is NameCasePolicy.CASE_INSENSITIVE
        assert config.log_level == "WARNING"

    def test_file_and_overrides(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"data_file": "a.json", "case_sensitive_names": True}), encoding="utf-8")
        config = load_config(str(path), {"data_file": "b.json", "log_level": None})
        assert config.data_file == "b.json"
        assert config.name_policy is NameCasePolicy.CASE_SENSITIVE
        assert config.log_level == "WARNING"

    def test_invalid_log_level(self):
        with pytest.raises(ConfigurationError):
            load_config(overrides={"log_level": "LOUD"})

    def test_unreadable_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_config(str(tmp_path / "missing.json"))


class TestTaaApplication:
    def test_duplicate_module_is_rejected(self):
        ui = RecordingUi()
        storage = InMemoryStorage()
        application = TaaApplication(TaaConfig(), ui, storage)
        for line in (
            "add_module c/CS2113 n/SoftwareEngineering",
            "add_module c/CS2113 n/Other",
        ):
            application.run_command(line)
        assert application.model.modules.size == 1
        assert ui.errors == ["A module with the same code already exists."]

    def test_errors_are_reported_and_loop_continues(self):
        ui = RecordingUi(["bogus", "add_module", "add_module c/CS2113 n/SE", "exit", "list_modules"])
        storage = InMemoryStorage()
        application = TaaApplication(TaaConfig(), ui, storage)
        application.run()
        assert len(ui.errors) == 2
        assert ui.errors[1] == "Usage: add_module c/<MODULE_CODE> n/<MODULE_NAME>"
        assert application.model.modules.size == 1
        assert ui.last_message.startswith("Goodbye!")

    def test_blank_lines_are_skipped(self):
        ui = RecordingUi(["", "   "])
        application = TaaApplication(TaaConfig(), ui, InMemoryStorage())
        application.run()
        assert ui.errors == []

    def test_save_failure_is_reported_without_rollback(self):
        ui = RecordingUi()
        application = TaaApplication(TaaConfig(), ui, FailingStorage())
        assert application.run_command("add_module c/CS2113 n/SE") is False
        assert ui.errors == ["Failed to save data to test.json: disk full"]
        assert application.model.modules.has_module("CS2113")

    def test_help_lists_every_command(self):
        ui = RecordingUi()
        application = TaaApplication(TaaConfig(), ui, InMemoryStorage())
        application.run_command("help")
        assert "edit_assessment c/<CLASS_ID> n/<ASSESSMENT_NAME>" in ui.last_message
        assert "set_mark" in ui.last_message

    def test_loads_model_from_storage(self, populated_model):
        application = TaaApplication(TaaConfig(), RecordingUi(), InMemoryStorage(populated_model))
        assert application.model is populated_model


class TestMain:
    def test_runs_with_data_file(self, tmp_path, monkeypatch, capsys):
        import io

        data_file = tmp_path / "taa.json"
        monkeypatch.setattr("sys.stdin", io.StringIO("add_module c/CS2113 n/SE\nexit\n"))
        assert main(["--data-file", str(data_file)]) == 0
        stored = json.loads(data_file.read_text(encoding="utf-8"))
        assert stored["modules"] == [{"code": "CS2113", "name": "SE"}]
        assert "Module added" in capsys.readouterr().out

    def test_bad_config_exits_with_error(self, tmp_path, capsys):
        assert main(["--config", str(tmp_path / "missing.json")]) == 2
