import os

import pytest
from pydantic import ValidationError

from ratcalc.config import DEFAULT_HISTORY_FILE, Settings, load_settings
from ratcalc.conversion import DEFAULT_PRECISION


def test_defaults(tmp_path):
    settings = load_settings(str(tmp_path / "missing.env"))
    assert settings.precision == DEFAULT_PRECISION
    assert settings.log_level == "WARNING"
    assert settings.history_file == os.path.expanduser(DEFAULT_HISTORY_FILE)


def test_environment_variables(monkeypatch, tmp_path):
    monkeypatch.setenv("RATCALC_PRECISION", "25")
    monkeypatch.setenv("RATCALC_LOG_LEVEL", "debug")
    settings = load_settings(str(tmp_path / "missing.env"))
    assert settings.precision == 25
    assert settings.log_level == "DEBUG"


def test_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("RATCALC_PRECISION=12\nRATCALC_HISTORY_FILE=/tmp/ratcalc-hist\n")
    settings = load_settings(str(env_file))
    assert settings.precision == 12
    assert settings.history_file == "/tmp/ratcalc-hist"


def test_overrides_win_and_none_is_ignored(monkeypatch, tmp_path):
    monkeypatch.setenv("RATCALC_PRECISION", "25")
    settings = load_settings(str(tmp_path / "missing.env"), precision=7, log_level=None)
    assert settings.precision == 7
    assert settings.log_level == "WARNING"


def test_invalid_values_rejected():
    with pytest.raises(ValidationError):
        Settings(precision=0)
    with pytest.raises(ValidationError):
        Settings(log_level="chatty")
    with pytest.raises(ValidationError):
        Settings(history_file="  ")
