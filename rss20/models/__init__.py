"""Pydantic data models for RSS 2.0 feeds and tool configuration."""

from rss20.models.config import AppConfig, LoggingConfig, OutputConfig
from rss20.models.feed import (
    Category,
    Cloud,
    Days,
    Enclosure,
    Feed,
    Guid,
    Hours,
    Image,
    Item,
    Source,
    TextInput,
)

__all__ = [
    # Feed
    "Feed",
    "Item",
    "Category",
    "Cloud",
    "Image",
    "TextInput",
    "Hours",
    "Days",
    "Enclosure",
    "Guid",
    "Source",
    # Config
    "AppConfig",
    "LoggingConfig",
    "OutputConfig",
]
