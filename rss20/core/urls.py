"""URL reference well-formedness checks.

A value passes when it is syntactically a URL reference. Absolute URLs,
reachable hosts and particular schemes are not required.
"""

import re
from urllib.parse import urlsplit

# RFC 3986 reference alphabet plus non-ASCII (IRI) characters
_ILLEGAL_CHAR = re.compile(r"[^A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=%\u0080-\U0010ffff]")
_BAD_PERCENT = re.compile(r"%(?![0-9A-Fa-f]{2})")
_SCHEME = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")


def url_error(value: str) -> str | None:
    """
    Explain why a string is not a well-formed URL reference.

    Args:
        value: Candidate URL reference

    Returns:
        Reason the value is malformed, or None if it is well-formed

    Examples:
        >>> url_error("http://example.com/feed.xml") is None
        True
        >>> url_error("#section")
        'missing URL before fragment'
    """
    if not value:
        return "empty URL"

    if any(char.isspace() for char in value):
        return "URL contains whitespace"

    if value.startswith("#"):
        return "missing URL before fragment"

    if value.count("#") > 1:
        return "URL contains more than one fragment marker"

    match = _ILLEGAL_CHAR.search(value)
    if match:
        return f"invalid character {match.group()!r} in URL"

    if _BAD_PERCENT.search(value):
        return "invalid percent escape in URL"

    # A colon before the first '/', '?' or '#' introduces a scheme
    head = re.split(r"[/?#]", value, maxsplit=1)[0]
    if ":" in head:
        scheme = head.split(":", 1)[0]
        if not scheme:
            return "missing protocol scheme"
        if not _SCHEME.fullmatch(scheme):
            return f"invalid scheme {scheme!r}"

    try:
        parts = urlsplit(value)
        _ = parts.port
    except ValueError as e:
        return str(e)

    return None


def is_valid_url(value: str) -> bool:
    """Return True if value is a well-formed URL reference."""
    return url_error(value) is None
