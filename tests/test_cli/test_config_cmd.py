"""Tests for CLI config command."""

import tomllib

import pytest
from click.testing import CliRunner

from executor_resources.cli.main import cli
from executor_resources.core.config import load_config


@pytest.fixture
def runner():
    return CliRunner()


class TestConfigCommand:
    def test_init_creates_file(self, runner, in_temp_dir):
        result = runner.invoke(cli, ["config", "init"])
        assert result.exit_code == 0

        config_file = in_temp_dir / "executor-resources.toml"
        assert config_file.exists()
        reqs = load_config(config_file).get_requests()
        assert reqs.get("cores").amount == 1
        assert reqs.get("memory").amount == 4096

    def test_init_default_is_valid_toml(self, runner, in_temp_dir):
        runner.invoke(cli, ["config", "init"])
        with open(in_temp_dir / "executor-resources.toml", "rb") as f:
            assert "executor" in tomllib.load(f)

    def test_init_global(self, runner, in_temp_dir):
        result = runner.invoke(cli, ["config", "init", "--global"])
        assert result.exit_code == 0
        assert (in_temp_dir / "home" / ".config" / "executor-resources" / "config.toml").exists()

    def test_init_keeps_existing_when_declined(self, runner, in_temp_dir):
        config_file = in_temp_dir / "executor-resources.toml"
        config_file.write_text("[executor]\ncores = 9\n")
        result = runner.invoke(cli, ["config", "init"], input="n\n")
        assert result.exit_code == 0
        assert "Cancelled" in result.output
        assert config_file.read_text() == "[executor]\ncores = 9\n"

    def test_show_without_config(self, runner, in_temp_dir):
        result = runner.invoke(cli, ["config", "show"])
        assert result.exit_code == 0
        assert "No configuration file found" in result.output

    def test_show_with_config(self, runner, sample_config):
        result = runner.invoke(cli, ["--config", str(sample_config), "config", "show"])
        assert result.exit_code == 0
        assert "Config file:" in result.output
        assert "Executor tables" in result.output
        assert "(base)" in result.output
        assert "fpga" in result.output
        assert "ok" in result.output

    def test_show_reports_broken_profile(self, runner, temp_dir):
        config_file = temp_dir / "executor-resources.toml"
        config_file.write_text(
            "[executor]\ncores = 2\n\n[profiles.gpu.resource.gpu]\nvendor = \"nvidia.com\"\n"
        )
        result = runner.invoke(cli, ["--config", str(config_file), "config", "show"])
        assert result.exit_code == 0
        assert "gpu" in result.output
        assert "amount" in result.output

    def test_show_raw(self, runner, sample_config):
        result = runner.invoke(cli, ["--config", str(sample_config), "config", "show", "--raw"])
        assert result.exit_code == 0
        assert "discoveryScript" in result.output

    def test_show_malformed_config(self, runner, temp_dir):
        config_file = temp_dir / "executor-resources.toml"
        config_file.write_text("[profiles]\nbig = 3\n")
        result = runner.invoke(cli, ["--config", str(config_file), "config", "show"])
        assert result.exit_code == 1
        assert "must be a table" in result.output

    def test_path_without_config(self, runner, in_temp_dir):
        result = runner.invoke(cli, ["config", "path"])
        assert result.exit_code == 0
        assert "No configuration file found" in result.output

    def test_path_with_config(self, runner, sample_config):
        result = runner.invoke(cli, ["--config", str(sample_config), "config", "path"])
        assert result.exit_code == 0
        assert result.output.strip() == str(sample_config)
