"""Configuration loader for listfile."""

from __future__ import annotations

from pathlib import Path

import yaml

from listfile.config.schema import ListFileConfig


def load_config(path: Path | str | None = None) -> ListFileConfig:
    """Load configuration from a YAML file.

    If path is None or the file doesn't exist, returns defaults.
    Raises ValueError for malformed YAML.
    """
    if path is None:
        return ListFileConfig()

    path = Path(path).expanduser().resolve()
    if not path.is_file():
        return ListFileConfig()

    text = path.read_text()
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValueError(f"Malformed YAML in {path}: {e}") from e

    if data is None or not isinstance(data, dict):
        return ListFileConfig()

    config = ListFileConfig(**data)
    _resolve_store_path(config, path.parent)
    return config


def _resolve_store_path(config: ListFileConfig, base_dir: Path) -> None:
    """Make a relative ``store.path`` relative to the config file's directory."""
    if not config.store.path:
        return
    store_path = Path(config.store.path).expanduser()
    if not store_path.is_absolute():
        config.store.path = str(base_dir / store_path)
