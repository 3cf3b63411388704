"""RSS 2.0 XML encoding and decoding.

Maps a Feed to the rss/channel element layout and back. Empty optional
fields are left out of the output rather than written as empty elements.
"""

import re
from pathlib import Path
from xml.dom import minidom
from xml.etree.ElementTree import Element, ParseError, SubElement, fromstring, tostring

from loguru import logger

from rss20.core.errors import FeedDecodeError
from rss20.core.validator import ensure_valid
from rss20.models.config import OutputConfig
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

# Encoding

# Characters outside the XML 1.0 Char production
_INVALID_XML_CHAR = re.compile(r"[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


def _add_text(parent: Element, tag: str, value: str | int) -> None:
    """Append <tag>value</tag> unless value is empty or zero."""
    if value:
        SubElement(parent, tag).text = str(value)


def _add_categories(parent: Element, categories: list[Category]) -> None:
    for category in categories:
        element = SubElement(parent, "category")
        if category.domain:
            element.set("domain", category.domain)
        element.text = category.value


def _add_cloud(channel: Element, cloud: Cloud) -> None:
    element = SubElement(channel, "cloud", domain=cloud.domain)
    if cloud.port:
        element.set("port", str(cloud.port))
    element.set("path", cloud.path)
    element.set("registerProcedure", cloud.register_procedure)
    element.set("protocol", cloud.protocol)


def _add_image(channel: Element, image: Image) -> None:
    element = SubElement(channel, "image")
    SubElement(element, "url").text = image.url
    SubElement(element, "title").text = image.title
    SubElement(element, "link").text = image.link
    _add_text(element, "width", image.width)
    _add_text(element, "height", image.height)


def _add_text_input(channel: Element, text_input: TextInput) -> None:
    element = SubElement(channel, "textInput")
    _add_text(element, "title", text_input.title)
    _add_text(element, "description", text_input.description)
    _add_text(element, "name", text_input.name)
    _add_text(element, "link", text_input.link)


def _add_item(channel: Element, item: Item) -> None:
    element = SubElement(channel, "item")
    _add_text(element, "title", item.title)
    _add_text(element, "link", item.link)
    _add_text(element, "description", item.description)
    _add_text(element, "author", item.author)
    _add_categories(element, item.categories)
    _add_text(element, "comments", item.comments)

    if item.enclosure is not None:
        enclosure = SubElement(element, "enclosure", url=item.enclosure.url)
        if item.enclosure.length:
            enclosure.set("length", str(item.enclosure.length))
        enclosure.set("type", item.enclosure.type)

    if item.guid is not None:
        guid = SubElement(element, "guid")
        guid.set("isPermaLink", "true" if item.guid.is_perma_link else "false")
        guid.text = item.guid.value

    _add_text(element, "pubDate", item.pub_date)

    if item.source is not None:
        source = SubElement(element, "source", url=item.source.url)
        source.text = item.source.value


def _replace_invalid_chars(root: Element) -> None:
    """Replace characters XML cannot carry with U+FFFD, in place."""
    for element in root.iter():
        if element.text:
            element.text = _INVALID_XML_CHAR.sub("\ufffd", element.text)
        for name, value in element.attrib.items():
            element.set(name, _INVALID_XML_CHAR.sub("\ufffd", value))


def feed_to_element(feed: Feed) -> Element:
    """
    Build the rss element tree for a feed.

    Args:
        feed: Feed to encode

    Returns:
        Root <rss> element
    """
    rss = Element("rss", version=feed.version)
    channel = SubElement(rss, "channel")

    # Required channel elements
    SubElement(channel, "title").text = feed.title
    SubElement(channel, "link").text = feed.link
    SubElement(channel, "description").text = feed.description

    _add_text(channel, "language", feed.language)
    _add_text(channel, "copyright", feed.copyright)
    _add_text(channel, "managingEditor", feed.managing_editor)
    _add_text(channel, "webMaster", feed.web_master)
    _add_text(channel, "pubDate", feed.pub_date)
    _add_text(channel, "lastBuildDate", feed.last_build_date)
    _add_categories(channel, feed.categories)
    _add_text(channel, "generator", feed.generator)
    _add_text(channel, "docs", feed.docs)
    if feed.cloud is not None:
        _add_cloud(channel, feed.cloud)
    _add_text(channel, "ttl", feed.ttl)
    if feed.image is not None:
        _add_image(channel, feed.image)
    _add_text(channel, "rating", feed.rating)
    if feed.text_input is not None:
        _add_text_input(channel, feed.text_input)

    if feed.skip_hours is not None:
        skip_hours = SubElement(channel, "skipHours")
        for hour in feed.skip_hours.hours:
            SubElement(skip_hours, "hour").text = str(hour)

    if feed.skip_days is not None:
        skip_days = SubElement(channel, "skipDays")
        for day in feed.skip_days.days:
            SubElement(skip_days, "day").text = day

    for item in feed.items:
        _add_item(channel, item)

    _replace_invalid_chars(rss)
    return rss


def serialize_feed(feed: Feed, config: OutputConfig | None = None) -> str:
    """
    Serialize a feed to an RSS 2.0 XML document.

    The feed is not validated; see ``write_feed`` or ``ensure_valid``.

    Args:
        feed: Feed to serialize
        config: Output options (defaults to OutputConfig())

    Returns:
        Pretty printed XML document
    """
    config = config or OutputConfig()

    xml_str = tostring(feed_to_element(feed), encoding="unicode")
    pretty_xml = minidom.parseString(xml_str).toprettyxml(indent=config.indent)

    # minidom always writes a bare declaration as the first line
    _, body = pretty_xml.split("\n", 1)
    if config.xml_declaration:
        body = f'<?xml version="1.0" encoding="{config.encoding}"?>\n{body}'
    return body


def write_feed(feed: Feed, output_path: Path | str, config: OutputConfig | None = None) -> Path:
    """
    Write a feed to an XML file.

    Args:
        feed: Feed to write
        output_path: Destination file
        config: Output options (defaults to OutputConfig())

    Returns:
        Path of the written file

    Raises:
        FeedValidationError: If validation is enabled and the feed is invalid
        OSError: If the file cannot be written
    """
    config = config or OutputConfig()
    path = Path(output_path)

    if config.validate_before_write:
        ensure_valid(feed)

    # Serialize first so a failure leaves an existing file untouched
    xml = serialize_feed(feed, config)

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding=config.encoding) as f:
        f.write(xml)

    logger.info(f"Wrote feed: {path} ({len(feed.items)} items)")
    return path


# Decoding

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _text(parent: Element, tag: str) -> str:
    element = parent.find(tag)
    if element is None or element.text is None:
        return ""
    return element.text


def _int(value: str | None, where: str) -> int:
    if value is None or not value.strip():
        return 0
    if not _INTEGER.fullmatch(value.strip()):
        raise FeedDecodeError(f"Expected an integer for {where}, got {value!r}")
    return int(value)


def _categories_from(parent: Element) -> list[Category]:
    return [
        Category(value=element.text or "", domain=element.get("domain", ""))
        for element in parent.findall("category")
    ]


def _cloud_from(element: Element) -> Cloud:
    return Cloud(
        domain=element.get("domain", ""),
        port=_int(element.get("port"), "cloud/@port"),
        path=element.get("path", ""),
        register_procedure=element.get("registerProcedure", ""),
        protocol=element.get("protocol", ""),
    )


def _image_from(element: Element) -> Image:
    return Image(
        url=_text(element, "url"),
        title=_text(element, "title"),
        link=_text(element, "link"),
        width=_int(_text(element, "width"), "image/width"),
        height=_int(_text(element, "height"), "image/height"),
    )


def _text_input_from(element: Element) -> TextInput:
    return TextInput(
        title=_text(element, "title"),
        description=_text(element, "description"),
        name=_text(element, "name"),
        link=_text(element, "link"),
    )


def _item_from(element: Element) -> Item:
    item = Item(
        title=_text(element, "title"),
        link=_text(element, "link"),
        description=_text(element, "description"),
        author=_text(element, "author"),
        categories=_categories_from(element),
        comments=_text(element, "comments"),
        pub_date=_text(element, "pubDate"),
    )

    enclosure = element.find("enclosure")
    if enclosure is not None:
        item.enclosure = Enclosure(
            url=enclosure.get("url", ""),
            length=_int(enclosure.get("length"), "enclosure/@length"),
            type=enclosure.get("type", ""),
        )

    guid = element.find("guid")
    if guid is not None:
        item.guid = Guid(
            value=guid.text or "",
            is_perma_link=guid.get("isPermaLink", "false").strip().lower() in ("true", "1"),
        )

    source = element.find("source")
    if source is not None:
        item.source = Source(value=source.text or "", url=source.get("url", ""))

    return item


def element_to_feed(rss: Element) -> Feed:
    """
    Build a feed from an rss element tree.

    Args:
        rss: Root <rss> element

    Returns:
        Decoded feed (not validated)

    Raises:
        FeedDecodeError: If the tree is not an rss/channel document
    """
    if rss.tag != "rss":
        raise FeedDecodeError(f"Expected an <rss> root element, got <{rss.tag}>")

    channel = rss.find("channel")
    if channel is None:
        raise FeedDecodeError("Missing <channel> element")

    feed = Feed(
        version=rss.get("version", ""),
        title=_text(channel, "title"),
        link=_text(channel, "link"),
        description=_text(channel, "description"),
        language=_text(channel, "language"),
        copyright=_text(channel, "copyright"),
        managing_editor=_text(channel, "managingEditor"),
        web_master=_text(channel, "webMaster"),
        pub_date=_text(channel, "pubDate"),
        last_build_date=_text(channel, "lastBuildDate"),
        categories=_categories_from(channel),
        generator=_text(channel, "generator"),
        docs=_text(channel, "docs"),
        ttl=_int(_text(channel, "ttl"), "ttl"),
        rating=_text(channel, "rating"),
        items=[_item_from(element) for element in channel.findall("item")],
    )

    cloud = channel.find("cloud")
    if cloud is not None:
        feed.cloud = _cloud_from(cloud)

    image = channel.find("image")
    if image is not None:
        feed.image = _image_from(image)

    text_input = channel.find("textInput")
    if text_input is not None:
        feed.text_input = _text_input_from(text_input)

    skip_hours = channel.find("skipHours")
    if skip_hours is not None:
        feed.skip_hours = Hours(
            hours=[_int(hour.text, "skipHours/hour") for hour in skip_hours.findall("hour")]
        )

    skip_days = channel.find("skipDays")
    if skip_days is not None:
        feed.skip_days = Days(days=[day.text or "" for day in skip_days.findall("day")])

    return feed


def parse_feed(data: str | bytes) -> Feed:
    """
    Decode an RSS 2.0 XML document.

    Args:
        data: XML document

    Returns:
        Decoded feed (not validated)

    Raises:
        FeedDecodeError: If the document is malformed or not an RSS document
    """
    try:
        rss = fromstring(data)
    except ParseError as e:
        raise FeedDecodeError(f"Malformed XML: {e}") from e
    return element_to_feed(rss)


def read_feed(input_path: Path | str) -> Feed:
    """
    Read and decode an RSS 2.0 XML file.

    Args:
        input_path: Path to the XML file

    Returns:
        Decoded feed (not validated)

    Raises:
        FileNotFoundError: If the file doesn't exist
        FeedDecodeError: If the document is malformed or not an RSS document
    """
    path = Path(input_path)

    if not path.exists():
        logger.error(f"Feed file not found: {path}")
        raise FileNotFoundError(f"Feed file not found: {path}")

    try:
        feed = parse_feed(path.read_bytes())
    except FeedDecodeError as e:
        logger.error(f"Failed to decode feed {path}: {e}")
        raise

    logger.info(f"Read feed: {path} ({len(feed.items)} items)")
    return feed
