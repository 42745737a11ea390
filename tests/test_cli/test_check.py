"""Tests for CLI check command."""

import pytest
from click.testing import CliRunner

from executor_resources.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


class TestCheck:
    def test_builtin_and_custom_allowed(self, runner):
        result = runner.invoke(cli, ["check", "cores", "memoryOverhead", "resource.gpu"])
        assert result.exit_code == 0
        assert "allowed" in result.output
        assert "denied" not in result.output
        assert "resource.gpu" in result.output

    def test_invalid_name_denied(self, runner):
        result = runner.invoke(cli, ["check", "cores", "invalidName"])
        assert result.exit_code == 1
        assert "denied" in result.output
        assert "invalidName" in result.output
        assert "resource." in result.output

    def test_case_sensitive(self, runner):
        result = runner.invoke(cli, ["check", "Cores"])
        assert result.exit_code == 1

    def test_requires_a_name(self, runner):
        result = runner.invoke(cli, ["check"])
        assert result.exit_code != 0

    def test_help_output(self, runner):
        result = runner.invoke(cli, ["check", "--help"])
        assert result.exit_code == 0
        assert "NAMES" in result.output
