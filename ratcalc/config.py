"""
Settings for the calculator driver.

Values come from keyword overrides first, then environment variables (after
loading an optional .env file), then the defaults below.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from ratcalc.conversion import DEFAULT_PRECISION

ENV_VARS: Dict[str, str] = {
    'precision': 'RATCALC_PRECISION',
    'log_level': 'RATCALC_LOG_LEVEL',
    'history_file': 'RATCALC_HISTORY_FILE',
}

DEFAULT_HISTORY_FILE = "~/.ratcalc_history"


class Settings(BaseModel):
    """Validated calculator settings."""
    precision: int = Field(DEFAULT_PRECISION, ge=1, le=10000,
                           description="Decimal digits used by sqrt and for printing non-integers")
    log_level: str = Field("WARNING", description="Name of a logging level")
    history_file: str = Field(DEFAULT_HISTORY_FILE, validate_default=True,
                              description="Interactive history file")

    @field_validator('log_level')
    @classmethod
    def log_level_must_be_known(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator('history_file')
    @classmethod
    def history_file_must_not_be_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError('History file cannot be empty')
        return os.path.expanduser(v.strip())


def load_settings(env_file: Optional[str] = None, **overrides: Any) -> Settings:
    """Load settings from the environment, applying any non-None overrides."""
    load_dotenv(env_file)
    values: Dict[str, Any] = {}
    for field, var in ENV_VARS.items():
        env_value = os.getenv(var)
        if env_value is not None:
            values[field] = env_value
    values.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**values)
