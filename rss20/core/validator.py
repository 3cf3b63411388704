"""RSS 2.0 feed validation.

``validate_feed`` walks a Feed in a fixed order and reports the first
violated constraint. Nothing is checked after the first failure.
"""

from loguru import logger

from rss20.constants import (
    ALLOWED_CLOUD_PROTOCOLS,
    ALLOWED_LANGUAGES,
    ALLOWED_SKIP_DAYS,
    DOCS_URL,
    MAX_CLOUD_PORT,
    MAX_IMAGE_HEIGHT,
    MAX_IMAGE_WIDTH,
    MAX_SKIP_HOUR,
    MIN_CLOUD_PORT,
    MIN_SKIP_HOUR,
    VERSION,
)
from rss20.core.dates import parse_rss_date
from rss20.core.errors import DateFormatError, FeedValidationError
from rss20.core.urls import url_error
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


def _url(value: str, field: str, label: str) -> FeedValidationError | None:
    reason = url_error(value)
    if reason is not None:
        return FeedValidationError(f"Bad {label}. Expecting a valid URL ({reason})", field)
    return None


def _optional_url(value: str, field: str, label: str) -> FeedValidationError | None:
    return _url(value, field, label) if value else None


def _required(value: str, field: str, message: str) -> FeedValidationError | None:
    return None if value else FeedValidationError(message, field)


def _date(value: str, field: str, label: str) -> FeedValidationError | None:
    if not value:
        return None
    try:
        parse_rss_date(value)
    except DateFormatError as e:
        return FeedValidationError(f"Unable to parse the {label} ({e})", field)
    return None


def _version(feed: Feed) -> FeedValidationError | None:
    if feed.version != VERSION:
        return FeedValidationError(f"Bad version. Expecting {VERSION}", "version")
    return None


def _language(feed: Feed) -> FeedValidationError | None:
    if feed.language and feed.language not in ALLOWED_LANGUAGES:
        return FeedValidationError(
            "Invalid language. Allowable language values are found at "
            "http://cyber.law.harvard.edu/rss/languages.html",
            "language",
        )
    return None


def _categories(categories: list[Category], prefix: str) -> FeedValidationError | None:
    # Domains may be URLs or free-form taxonomy names, so only the label is checked
    for index, category in enumerate(categories):
        if not category.value:
            return FeedValidationError(
                "Category should not be empty.", f"{prefix}categories[{index}].value"
            )
    return None


def _docs(feed: Feed) -> FeedValidationError | None:
    if feed.docs and feed.docs != DOCS_URL:
        return FeedValidationError(f"Docs should be empty or {DOCS_URL}", "docs")
    return None


def _cloud(cloud: Cloud | None) -> FeedValidationError | None:
    if cloud is None:
        return None
    if not cloud.domain:
        return FeedValidationError("Cloud domain must not be empty", "cloud.domain")
    if not MIN_CLOUD_PORT <= cloud.port <= MAX_CLOUD_PORT:
        return FeedValidationError(
            f"Cloud port must be from {MIN_CLOUD_PORT} to {MAX_CLOUD_PORT}.", "cloud.port"
        )
    if not cloud.path.startswith("/"):
        return FeedValidationError("Invalid cloud path. It must start with '/'", "cloud.path")
    if not cloud.register_procedure:
        return FeedValidationError(
            "Invalid cloud register procedure.", "cloud.register_procedure"
        )
    if cloud.protocol not in ALLOWED_CLOUD_PROTOCOLS:
        return FeedValidationError(
            "Invalid cloud protocol. It must be xml-rpc, soap, or http-post", "cloud.protocol"
        )
    return None


def _ttl(feed: Feed) -> FeedValidationError | None:
    if feed.ttl < 0:
        return FeedValidationError("Ttl field must be a non-negative integer.", "ttl")
    return None


def _image(image: Image | None) -> FeedValidationError | None:
    if image is None:
        return None
    error = (
        _url(image.url, "image.url", "image url")
        or _required(image.title, "image.title", "Empty image title. The image title must be set")
        or _url(image.link, "image.link", "image link")
    )
    if error:
        return error
    if not 0 <= image.width <= MAX_IMAGE_WIDTH:
        return FeedValidationError(
            f"Image width must be from 0 to {MAX_IMAGE_WIDTH}.", "image.width"
        )
    if not 0 <= image.height <= MAX_IMAGE_HEIGHT:
        return FeedValidationError(
            f"Image height must be from 0 to {MAX_IMAGE_HEIGHT}.", "image.height"
        )
    return None


def _text_input(text_input: TextInput | None) -> FeedValidationError | None:
    if text_input is None:
        return None
    return (
        _required(text_input.title, "text_input.title", "Text input's title must be set.")
        or _required(
            text_input.description,
            "text_input.description",
            "Text input's description must be set.",
        )
        or _required(text_input.name, "text_input.name", "Text input's name must be set.")
        or _url(text_input.link, "text_input.link", "text input's link")
    )


def _skip_hours(skip_hours: Hours | None) -> FeedValidationError | None:
    if skip_hours is None:
        return None
    for index, hour in enumerate(skip_hours.hours):
        if not MIN_SKIP_HOUR <= hour <= MAX_SKIP_HOUR:
            return FeedValidationError(
                f"The skipHour's hour must be from {MIN_SKIP_HOUR} to {MAX_SKIP_HOUR}",
                f"skip_hours.hours[{index}]",
            )
    return None


def _skip_days(skip_days: Days | None) -> FeedValidationError | None:
    if skip_days is None:
        return None
    for index, day in enumerate(skip_days.days):
        if day not in ALLOWED_SKIP_DAYS:
            return FeedValidationError(
                f"Invalid skip day {day!r}. Allowable skip days are "
                "Monday through Sunday, capitalized",
                f"skip_days.days[{index}]",
            )
    return None


def _enclosure(enclosure: Enclosure | None, prefix: str) -> FeedValidationError | None:
    if enclosure is None:
        return None
    error = _url(enclosure.url, f"{prefix}enclosure.url", "item enclosure url")
    if error:
        return error
    if enclosure.length <= 0:
        return FeedValidationError(
            "The item enclosure length must be greater than zero.", f"{prefix}enclosure.length"
        )
    return _required(
        enclosure.type, f"{prefix}enclosure.type", "The item enclosure type must be set."
    )


def _guid(guid: Guid | None, prefix: str) -> FeedValidationError | None:
    # Only permalinks have to be URLs; other identifiers are opaque
    if guid is None or not guid.is_perma_link:
        return None
    return _url(guid.value, f"{prefix}guid.value", "item guid body")


def _source(source: Source | None, prefix: str) -> FeedValidationError | None:
    if source is None:
        return None
    return _required(
        source.value, f"{prefix}source.value", "The item source must be set."
    ) or _url(source.url, f"{prefix}source.url", "item source url")


def _item(item: Item, prefix: str) -> FeedValidationError | None:
    if not item.title and not item.description:
        return FeedValidationError("The item title or description must be set.", f"{prefix}title")
    return (
        _optional_url(item.link, f"{prefix}link", "item link")
        or _optional_url(item.comments, f"{prefix}comments", "item comments")
        or _enclosure(item.enclosure, prefix)
        or _guid(item.guid, prefix)
        or _date(item.pub_date, f"{prefix}pub_date", "item PubDate")
        or _source(item.source, prefix)
        or _categories(item.categories, prefix)
    )


def _channel(feed: Feed) -> FeedValidationError | None:
    return (
        _version(feed)
        or _required(feed.title, "title", "Empty title. The title must be set")
        or _url(feed.link, "link", "channel link")
        or _required(
            feed.description, "description", "Empty description. The description must be set"
        )
        or _language(feed)
        or _date(feed.pub_date, "pub_date", "RSS PubDate")
        or _date(feed.last_build_date, "last_build_date", "RSS LastBuildDate")
        or _categories(feed.categories, "")
        or _docs(feed)
        or _cloud(feed.cloud)
        or _ttl(feed)
        or _image(feed.image)
        or _text_input(feed.text_input)
        or _skip_hours(feed.skip_hours)
        or _skip_days(feed.skip_days)
    )


def validate_feed(feed: Feed) -> FeedValidationError | None:
    """
    Check that a feed conforms to RSS 2.0.

    Constraints are checked in document order: the rss version, the channel
    elements from title to skipDays, then each item in sequence. The first
    violated constraint is returned and nothing after it is checked.

    Args:
        feed: Feed to check; it is not modified

    Returns:
        The first violated constraint, or None if the feed is valid

    Examples:
        >>> validate_feed(Feed(title="t", link="http://example.com/", description="d")) is None
        True
    """
    error = _channel(feed)
    for index, item in enumerate(feed.items):
        if error is not None:
            break
        error = _item(item, f"items[{index}].")

    if error is not None:
        logger.debug(f"Feed failed validation at {error.field}: {error}")
    return error


def ensure_valid(feed: Feed) -> Feed:
    """
    Raise the first violated constraint of a feed.

    Args:
        feed: Feed to check

    Returns:
        The same feed, if valid

    Raises:
        FeedValidationError: If the feed violates a constraint
    """
    error = validate_feed(feed)
    if error is not None:
        raise error
    return feed
