"""Configuration system for listfile."""

from listfile.config.loader import load_config
from listfile.config.schema import ListFileConfig

__all__ = ["load_config", "ListFileConfig"]
