"""Validate, read and write RSS 2.0 feeds."""

from rss20.constants import DEFAULT_HEIGHT, DEFAULT_WIDTH, DOCS_URL, VERSION
from rss20.core import (
    DateFormatError,
    FeedDecodeError,
    FeedValidationError,
    Rss20Error,
    ensure_valid,
    format_rss_date,
    parse_feed,
    parse_rss_date,
    read_feed,
    serialize_feed,
    validate_feed,
    write_feed,
)
from rss20.models import (
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

__version__ = "1.0.0"

__all__ = [
    "VERSION",
    "DOCS_URL",
    "DEFAULT_WIDTH",
    "DEFAULT_HEIGHT",
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
    "validate_feed",
    "ensure_valid",
    "parse_rss_date",
    "format_rss_date",
    "serialize_feed",
    "write_feed",
    "parse_feed",
    "read_feed",
    "Rss20Error",
    "FeedValidationError",
    "DateFormatError",
    "FeedDecodeError",
]
