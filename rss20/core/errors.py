"""Exceptions raised and returned by rss20."""


class Rss20Error(Exception):
    """Base exception for rss20 errors."""


class FeedValidationError(Rss20Error):
    """A feed violates one RSS 2.0 constraint.

    ``validate_feed`` returns instances of this class; ``ensure_valid`` raises them.
    """

    def __init__(self, message: str, field: str):
        self.field = field
        super().__init__(message)


class DateFormatError(Rss20Error, ValueError):
    """A string is not an RSS 2.0 (RFC 822) date."""

    def __init__(self, message: str, value: str):
        self.value = value
        super().__init__(message)


class FeedDecodeError(Rss20Error):
    """An XML document cannot be decoded into a Feed."""
