"""Unit tests for RSS date parsing and formatting."""

from datetime import datetime, timedelta, timezone

import pytest

from rss20.core.dates import (
    PATTERNS,
    DateShape,
    detect_shape,
    format_rss_date,
    parse_rss_date,
)
from rss20.core.errors import DateFormatError

EXPECTED = datetime(1974, 7, 23, 9, 10, 0, tzinfo=timezone.utc)


class TestParseRssDate:
    """Test parse_rss_date function."""

    @pytest.mark.parametrize(
        "value",
        [
            "23 Jul 74 09:10 UTC",
            "23 Jul 1974 09:10 UTC",
            "Wed, 23 Jul 74 09:10 UTC",
            "Wed, 23 Jul 1974 09:10 UTC",
        ],
    )
    def test_parse_year_and_weekday_shapes(self, value: str) -> None:
        """Test all year/weekday combinations parse to the same instant."""
        result = parse_rss_date(value)
        assert result == EXPECTED
        assert (result.year, result.month, result.day) == (1974, 7, 23)
        assert (result.hour, result.minute, result.second) == (9, 10, 0)

    def test_parse_seconds(self) -> None:
        """Test seconds are read when present."""
        result = parse_rss_date("Wed, 23 Jul 1974 09:10:30 UTC")
        assert result == datetime(1974, 7, 23, 9, 10, 30, tzinfo=timezone.utc)

    def test_parse_positive_offset(self) -> None:
        """Test a numeric offset keeps wall-clock fields in that zone."""
        result = parse_rss_date("Wed, 23 Jul 1974 09:10:30 +0700")
        assert (result.hour, result.minute, result.second) == (9, 10, 30)
        assert result.utcoffset() == timedelta(hours=7)
        assert result == datetime(1974, 7, 23, 9, 10, 30, tzinfo=timezone(timedelta(hours=7)))

    def test_parse_negative_offset(self) -> None:
        """Test negative offsets with minutes."""
        result = parse_rss_date("23 Jul 1974 09:10 -0330")
        assert result.utcoffset() == -timedelta(hours=3, minutes=30)
        assert result.hour == 9

    def test_parse_named_zones(self) -> None:
        """Test RFC 822 zone names map to their offsets."""
        assert parse_rss_date("23 Jul 1974 09:10 GMT").utcoffset() == timedelta(0)
        assert parse_rss_date("23 Jul 1974 09:10 EST").utcoffset() == timedelta(hours=-5)
        assert parse_rss_date("23 Jul 1974 09:10 PDT").utcoffset() == timedelta(hours=-7)
        assert parse_rss_date("23 Jul 1974 09:10 GMT").tzname() == "GMT"

    def test_parse_unknown_zone_is_zero_offset(self) -> None:
        """Test unknown 3 letter zones keep their name with a zero offset."""
        result = parse_rss_date("23 Jul 1974 09:10 XYZ")
        assert result.utcoffset() == timedelta(0)
        assert result.tzname() == "XYZ"

    def test_parse_two_digit_year_window(self) -> None:
        """Test 2 digit years split at 69."""
        assert parse_rss_date("01 Jan 68 00:00 UTC").year == 2068
        assert parse_rss_date("01 Jan 69 00:00 UTC").year == 1969
        assert parse_rss_date("01 Jan 00 00:00 UTC").year == 2000

    def test_result_is_timezone_aware(self) -> None:
        """Test parsed dates always carry a zone."""
        assert parse_rss_date("23 Jul 1974 09:10 UTC").tzinfo is not None

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "Some time tomorrow",
            "23 Jul 1974 09:10",  # no zone
            "23 Jul 1974 09:10 UTC extra",  # trailing garbage
            " 23 Jul 1974 09:10 UTC",  # leading garbage
            "Wed 23 Jul 1974 09:10 UTC",  # weekday without comma
            "Xyz, 23 Jul 1974 09:10 UTC",  # unknown weekday
            "23 Foo 1974 09:10 UTC",  # unknown month
            "3 Jul 1974 09:10 UTC",  # single digit day
            "23 Jul 1974 9:10 UTC",  # single digit hour
            "23 Jul 974 09:10 UTC",  # three digit year
            "31 Feb 1974 09:10 UTC",  # no such day
            "23 Jul 1974 25:10 UTC",  # no such hour
            "23 Jul 1974 09:10 +2500",  # no such offset
            "23 Jul 1974 09:10 +07:00",  # colon in offset
            "23 Jul 1974 09:10 utc",  # lowercase zone
            "2024-01-15T10:30:00Z",  # ISO 8601
            "23 Jul 1974 ٠٩:10 UTC",  # Arabic-Indic hour
            "٢٣ Jul 1974 09:10 UTC",  # Arabic-Indic day
            "23 Jul 1974 09:10 +٠٧00",  # Arabic-Indic offset
        ],
    )
    def test_parse_invalid(self, value: str) -> None:
        """Test strings that are not RSS dates are rejected."""
        with pytest.raises(DateFormatError):
            parse_rss_date(value)

    def test_error_carries_value(self) -> None:
        """Test the error records the rejected string and is a ValueError."""
        with pytest.raises(ValueError) as exc_info:
            parse_rss_date("Some time tomorrow")
        assert isinstance(exc_info.value, DateFormatError)
        assert exc_info.value.value == "Some time tomorrow"


class TestDetectShape:
    """Test detect_shape function."""

    def test_detect_full_shape(self) -> None:
        """Test every cue is detected."""
        assert detect_shape("Wed, 23 Jul 1974 09:10:30 +0700") == DateShape(
            has_weekday=True, four_digit_year=True, has_seconds=True, numeric_offset=True
        )

    def test_detect_bare_shape(self) -> None:
        """Test no cue is detected in the shortest form."""
        assert detect_shape("23 Jul 74 09:10 UTC") == DateShape(
            has_weekday=False, four_digit_year=False, has_seconds=False, numeric_offset=False
        )

    def test_pattern_table_covers_every_shape(self) -> None:
        """Test there is one pattern per combination of cues."""
        assert len(PATTERNS) == 16
        assert len(set(p.pattern for p in PATTERNS.values())) == 16


class TestFormatRssDate:
    """Test format_rss_date function."""

    def test_format_utc(self) -> None:
        """Test seconds and sub-seconds are dropped."""
        moment = datetime(1974, 7, 23, 9, 10, 11, 12, tzinfo=timezone.utc)
        assert format_rss_date(moment) == "23 Jul 1974 09:10 UTC"

    def test_format_naive_is_utc(self) -> None:
        """Test naive datetimes are written as UTC."""
        assert format_rss_date(datetime(2024, 1, 5, 7, 3)) == "05 Jan 2024 07:03 UTC"

    def test_format_named_zone(self) -> None:
        """Test known zone names are kept."""
        est = timezone(timedelta(hours=-5), "EST")
        assert format_rss_date(datetime(2024, 1, 5, 7, 3, tzinfo=est)) == "05 Jan 2024 07:03 EST"

    def test_format_numeric_offsets(self) -> None:
        """Test zones without a known name become numeric offsets."""
        plus_seven = timezone(timedelta(hours=7))
        minus_half = timezone(-timedelta(hours=5, minutes=30))
        cet = timezone(timedelta(hours=1), "CET")
        assert format_rss_date(datetime(2024, 1, 5, 7, 3, tzinfo=plus_seven)).endswith("+0700")
        assert format_rss_date(datetime(2024, 1, 5, 7, 3, tzinfo=minus_half)).endswith("-0530")
        assert format_rss_date(datetime(2024, 1, 5, 7, 3, tzinfo=cet)).endswith("+0100")

    def test_format_sub_minute_offsets_truncate(self) -> None:
        """Test offsets with seconds are truncated toward zero."""
        lmt_west = timezone(-timedelta(hours=4, minutes=56, seconds=2))
        lmt_east = timezone(timedelta(hours=4, minutes=56, seconds=2))
        assert format_rss_date(datetime(1880, 1, 1, 12, 0, tzinfo=lmt_west)).endswith("-0456")
        assert format_rss_date(datetime(1880, 1, 1, 12, 0, tzinfo=lmt_east)).endswith("+0456")

    def test_format_mislabelled_zone_uses_offset(self) -> None:
        """Test a known name with the wrong offset is not trusted."""
        fake_est = timezone(timedelta(hours=2), "EST")
        assert format_rss_date(datetime(2024, 1, 5, 7, 3, tzinfo=fake_est)).endswith("+0200")

    @pytest.mark.parametrize(
        "moment",
        [
            datetime(1974, 7, 23, 9, 10, tzinfo=timezone.utc),
            datetime(2068, 12, 31, 23, 59, tzinfo=timezone(timedelta(hours=7))),
            datetime(1999, 2, 28, 0, 0, tzinfo=timezone(timedelta(hours=-5), "EST")),
            datetime(2024, 6, 1, 12, 30, tzinfo=timezone(-timedelta(hours=9, minutes=30))),
        ],
    )
    def test_format_output_parses_back(self, moment: datetime) -> None:
        """Test parse(format(x)) == x for minute-precision instants."""
        result = parse_rss_date(format_rss_date(moment))
        assert result == moment
        assert result.utcoffset() == moment.utcoffset()

    def test_format_now_is_parseable(self) -> None:
        """Test the current time formats to a parseable string."""
        parse_rss_date(format_rss_date(datetime.now(timezone.utc)))
