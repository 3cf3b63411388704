"""Validation, date handling and XML encoding for RSS 2.0 feeds."""

from rss20.core.dates import format_rss_date, parse_rss_date
from rss20.core.errors import DateFormatError, FeedDecodeError, FeedValidationError, Rss20Error
from rss20.core.urls import is_valid_url, url_error
from rss20.core.validator import ensure_valid, validate_feed
from rss20.core.xml_codec import parse_feed, read_feed, serialize_feed, write_feed

__all__ = [
    # Dates
    "parse_rss_date",
    "format_rss_date",
    # Validation
    "validate_feed",
    "ensure_valid",
    "is_valid_url",
    "url_error",
    # XML
    "serialize_feed",
    "write_feed",
    "parse_feed",
    "read_feed",
    # Errors
    "Rss20Error",
    "FeedValidationError",
    "DateFormatError",
    "FeedDecodeError",
]
