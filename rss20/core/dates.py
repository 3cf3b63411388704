"""RSS 2.0 date strings.

RSS dates are RFC 822 dates that may use a 2 or 4 digit year, may start with a
weekday abbreviation, may include seconds, and end with either a 3 letter zone
name or a numeric offset::

    Wed, 23 Jul 1974 09:10:30 +0700
    23 Jul 74 09:10 UTC

Parsing looks at four cues in the input (comma, 4 digit year after the month,
number of colons, sign character) and picks the one pattern from the table
below that must then match the whole string.
"""

import re
from datetime import datetime, timedelta, timezone, tzinfo
from itertools import product
from typing import NamedTuple

from rss20.core.errors import DateFormatError

MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

# RFC 822 zone names with fixed offsets (hours east of UTC)
ZONE_OFFSETS = {
    "UTC": 0,
    "GMT": 0,
    "EST": -5,
    "EDT": -4,
    "CST": -6,
    "CDT": -5,
    "MST": -7,
    "MDT": -6,
    "PST": -8,
    "PDT": -7,
}

_FOUR_DIGIT_YEAR = re.compile(r"[A-Z][a-z]{2} [0-9]{4}")


class DateShape(NamedTuple):
    """Shape cues detected in an RSS date string."""

    has_weekday: bool
    four_digit_year: bool
    has_seconds: bool
    numeric_offset: bool


def _pattern_for(shape: DateShape) -> re.Pattern[str]:
    weekday = r"(?P<weekday>[A-Z][a-z]{2}), " if shape.has_weekday else ""
    year = r"(?P<year>[0-9]{4}) " if shape.four_digit_year else r"(?P<year>[0-9]{2}) "
    if shape.has_seconds:
        clock = r"(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2}) "
    else:
        clock = r"(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2}) "
    zone = r"(?P<offset>[+-][0-9]{4})" if shape.numeric_offset else r"(?P<zone>[A-Z]{3})"
    day_month = r"(?P<day>[0-9]{2}) (?P<month>[A-Z][a-z]{2}) "
    return re.compile(weekday + day_month + year + clock + zone)


# One strict pattern per combination of cues, built once at import
PATTERNS: dict[DateShape, re.Pattern[str]] = {
    shape: _pattern_for(shape) for shape in map(DateShape._make, product((False, True), repeat=4))
}


def detect_shape(value: str) -> DateShape:
    """Detect which of the sixteen RSS date shapes a string claims to have."""
    return DateShape(
        has_weekday="," in value,
        four_digit_year=_FOUR_DIGIT_YEAR.search(value) is not None,
        has_seconds=value.count(":") == 2,
        numeric_offset="+" in value or "-" in value,
    )


def _zone_from_name(name: str) -> tzinfo:
    if name == "UTC":
        return timezone.utc
    # Unknown names carry a zero offset
    return timezone(timedelta(hours=ZONE_OFFSETS.get(name, 0)), name)


def _zone_from_offset(offset: str, value: str) -> tzinfo:
    hours, minutes = int(offset[1:3]), int(offset[3:5])
    if hours > 23 or minutes > 59:
        raise DateFormatError(f"Invalid zone offset {offset!r} in {value!r}", value)
    delta = timedelta(hours=hours, minutes=minutes)
    return timezone(-delta if offset[0] == "-" else delta)


def _expand_year(year: str) -> int:
    if len(year) == 4:
        return int(year)
    # Two digit years: 69-99 are 1969-1999, 00-68 are 2000-2068
    short = int(year)
    return short + (1900 if short >= 69 else 2000)


def parse_rss_date(value: str) -> datetime:
    """
    Parse an RSS 2.0 date string.

    Args:
        value: Date string, e.g. "Wed, 23 Jul 1974 09:10:30 +0700"

    Returns:
        Timezone-aware datetime

    Raises:
        DateFormatError: If the string is not an RSS date

    Examples:
        >>> parse_rss_date("23 Jul 74 09:10 UTC")
        datetime.datetime(1974, 7, 23, 9, 10, tzinfo=datetime.timezone.utc)
    """
    shape = detect_shape(value)
    match = PATTERNS[shape].fullmatch(value)
    if match is None:
        raise DateFormatError(f"Cannot parse {value!r} as an RSS date", value)

    fields = match.groupdict()

    weekday = fields.get("weekday")
    if weekday is not None and weekday not in WEEKDAYS:
        raise DateFormatError(f"Unknown weekday {weekday!r} in {value!r}", value)

    if fields["month"] not in MONTHS:
        raise DateFormatError(f"Unknown month {fields['month']!r} in {value!r}", value)

    if fields.get("offset") is not None:
        zone = _zone_from_offset(fields["offset"], value)
    else:
        zone = _zone_from_name(fields["zone"])

    try:
        return datetime(
            _expand_year(fields["year"]),
            MONTHS.index(fields["month"]) + 1,
            int(fields["day"]),
            int(fields["hour"]),
            int(fields["minute"]),
            int(fields.get("second") or 0),
            tzinfo=zone,
        )
    except ValueError as e:
        raise DateFormatError(f"Invalid RSS date {value!r}: {e}", value) from e


def _zone_label(moment: datetime) -> str:
    offset = moment.utcoffset()
    if offset is None:
        return "UTC"

    name = moment.tzname()
    if name in ZONE_OFFSETS and timedelta(hours=ZONE_OFFSETS[name]) == offset:
        return name

    # Sub-minute offsets are truncated toward zero
    sign = "-" if offset < timedelta(0) else "+"
    hours, minutes = divmod(int(abs(offset).total_seconds()) // 60, 60)
    return f"{sign}{hours:02d}{minutes:02d}"


def format_rss_date(moment: datetime) -> str:
    """
    Format a datetime as an RSS 2.0 date string.

    The output always has a 4 digit year, no weekday and no seconds. Zones
    without a known RFC 822 name are written as a numeric offset. Naive
    datetimes are taken to be UTC.

    Args:
        moment: Datetime to format

    Returns:
        RSS date string, e.g. "23 Jul 1974 09:10 UTC"
    """
    return (
        f"{moment.day:02d} {MONTHS[moment.month - 1]} {moment.year:04d} "
        f"{moment.hour:02d}:{moment.minute:02d} {_zone_label(moment)}"
    )
