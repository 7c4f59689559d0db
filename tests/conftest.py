"""Pytest configuration and shared fixtures."""

import pytest
from click.testing import CliRunner

from llmkit.cli import cli
from llmkit.config import DISABLE_ENV


@pytest.fixture(autouse=True)
def clean_capability_env(monkeypatch):
    """Run every test with all optional formats enabled."""
    monkeypatch.delenv(DISABLE_ENV, raising=False)


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args and optional stdin.

    Usage:
        result = invoke(["--targets", "json"], input_data='{"x": 1}')
    """

    def _invoke(args, input_data=None):
        return cli_runner.invoke(cli, args, input=input_data)

    return _invoke


@pytest.fixture
def people_csv():
    """CSV that YAML and TOML both reject, so it detects as CSV."""
    return "@user,count\n@alice,3\n@bob,5\n"
