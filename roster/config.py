"""
Configuration for the Roster application.

Values come from, in increasing precedence: defaults, an optional JSON file,
ROSTER_* environment variables and explicit overrides (command-line flags).
"""

import json
import os
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from .core.enums import DEFAULT_ROLL_SEED
from .core.exceptions import ConfigurationError
from .logging import DEFAULT_LOG_LEVEL

ENV_PREFIX = "ROSTER_"
ENV_KEYS = ("log_level", "log_file")


class RosterConfig(BaseModel):
    """Validated application settings."""
    model_config = ConfigDict(extra="forbid")

    roll_seed: int = Field(DEFAULT_ROLL_SEED, ge=0)
    log_level: str = Field(DEFAULT_LOG_LEVEL, pattern=r'^(DEBUG|INFO|WARNING|ERROR)$')
    log_file: Optional[str] = Field(None, min_length=1)

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value


def _read_config_file(path: str) -> Dict[str, Any]:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file {path}: {e.strerror or e}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Config file {path} is not valid JSON: {e.msg}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a JSON object")
    return data


def load_config(
    path: Optional[str] = None,
    overrides: Optional[Mapping[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> RosterConfig:
    """
    Build the configuration.

    ``overrides`` entries set to None are ignored so argparse defaults can be
    passed through unchanged. Raises ConfigurationError on unreadable files
    or invalid values.
    """
    data: Dict[str, Any] = {}
    if path:
        data.update(_read_config_file(path))

    env = os.environ if environ is None else environ
    for key in ENV_KEYS:
        value = env.get(ENV_PREFIX + key.upper())
        if value:
            data[key] = value

    for key, value in (overrides or {}).items():
        if value is not None:
            data[key] = value

    try:
        return RosterConfig.model_validate(data)
    except PydanticValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigurationError(f"Invalid configuration: {problems}", details={"errors": e.errors()}) from e
