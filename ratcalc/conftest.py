import os

import pytest

from ratcalc.calculator import Calculator
from ratcalc.config import ENV_VARS, Settings


@pytest.fixture
def calculator():
    return Calculator()


@pytest.fixture
def settings(tmp_path):
    return Settings(history_file=str(tmp_path / "history"))


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ENV_VARS.values():
        monkeypatch.delenv(var, raising=False)
    yield
    # load_dotenv writes straight into os.environ
    for var in ENV_VARS.values():
        os.environ.pop(var, None)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()
    if report.when == "call":
        print(f"TEST: {item.name} - {'PASSED' if report.passed else 'FAILED'}")
