"""Shared test fixtures."""

from pathlib import Path

import pytest


@pytest.fixture
def sample_config_yaml(tmp_path: Path) -> Path:
    """Create a minimal valid config YAML file."""
    config = tmp_path / "listfile.yaml"
    config.write_text(
        f"""\
global:
  log_level: "debug"

store:
  path: "{(tmp_path / 'configured.txt').as_posix()}"
  auto_flush: false

typed:
  item_type: "int"
"""
    )
    return config


@pytest.fixture
def empty_config_yaml(tmp_path: Path) -> Path:
    """Create an empty config YAML file."""
    config = tmp_path / "listfile.yaml"
    config.write_text("{}\n")
    return config


@pytest.fixture
def list_path(tmp_path: Path) -> Path:
    """Path for a list file that does not exist yet."""
    return tmp_path / "items.txt"
