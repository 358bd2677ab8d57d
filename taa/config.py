"""
Configuration for the TAA command-line assistant.
"""

import json
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, ValidationError

from .core.enums import NameCasePolicy
from .core.exceptions import ConfigurationError
from .persistence import DEFAULT_DATA_FILE


class TaaConfig(BaseModel):
    """Settings read from an optional JSON file and the command line."""

    data_file: str = Field(DEFAULT_DATA_FILE, min_length=1)
    case_sensitive_names: bool = False
    log_level: str = Field("WARNING", pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$')

    @property
    def name_policy(self) -> NameCasePolicy:
        if self.case_sensitive_names:
            return NameCasePolicy.CASE_SENSITIVE
        return NameCasePolicy.CASE_INSENSITIVE


def load_config(path: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None) -> TaaConfig:
    """Load configuration from a JSON file, then apply non-empty overrides."""
    config: Dict[str, Any] = {}
    if path:
        try:
            with open(path, 'r', encoding="utf-8") as f:
                config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Failed to read configuration file {path}: {e}")
        if not isinstance(config, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a JSON object")

    for key, value in (overrides or {}).items():
        if value is not None:
            config[key] = value

    try:
        return TaaConfig(**config)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration: {e.error_count()} invalid field(s)",
            details={"errors": e.errors(include_url=False)},
        )
