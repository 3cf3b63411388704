"""Utility functions and helpers."""

from rss20.utils.config_loader import load_app_config, load_feed_yaml, load_yaml_config
from rss20.utils.logging import get_logger, setup_logging

__all__ = [
    "setup_logging",
    "get_logger",
    "load_yaml_config",
    "load_app_config",
    "load_feed_yaml",
]
