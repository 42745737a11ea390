"""Pytest configuration and fixtures."""

import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def in_temp_dir(temp_dir, monkeypatch):
    """Run the test from inside an empty temporary directory."""
    monkeypatch.chdir(temp_dir)
    monkeypatch.setenv("HOME", str(temp_dir / "home"))
    return temp_dir


@pytest.fixture
def sample_config(temp_dir):
    """Create a sample configuration file."""
    config_content = '''
[executor]
cores = 4
memory = "8g"
memoryOverhead = "1g"

[executor.pyspark]
memory = "2g"

[executor.resource.gpu]
amount = 2
discoveryScript = "/opt/getGpus.sh"
vendor = "nvidia.com"

[profiles.fpga]
cores = 8

[profiles.fpga.resource.fpga]
amount = 1
discoveryScript = "/opt/getFpgas.sh"
'''
    config_file = temp_dir / "executor-resources.toml"
    config_file.write_text(config_content)
    return config_file

