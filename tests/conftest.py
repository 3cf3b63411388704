"""Shared pytest fixtures and configuration."""

from pathlib import Path

import pytest

from rss20.constants import DOCS_URL, VERSION
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


@pytest.fixture
def minimal_feed() -> Feed:
    """Create a feed with only the required channel elements."""
    return Feed(
        version=VERSION,
        title="title",
        link="http://github.com/efarrer/rssgo/",
        description="A podcast",
    )


@pytest.fixture
def valid_items() -> list[Item]:
    """Create two valid items."""
    return [
        Item(
            title="title",
            link="http://link.com",
            description="the item",
            author="author@authors.com",
            categories=[Category(value="categories")],
            comments="http://comments.com",
            pub_date="23 Jul 74 09:10 UTC",
        ),
        Item(
            title="title2",
            link="http://link2.com",
            description="the 2 item",
            author="author2@authors.com",
            comments="http://comments2.com",
            pub_date="23 Jul 74 08:10 UTC",
        ),
    ]


@pytest.fixture
def full_feed() -> Feed:
    """Create a valid feed with every element populated."""
    return Feed(
        version=VERSION,
        title="Title",
        link="http://www.link.com",
        description="Description & more",
        language="en-us",
        copyright="Copyright 2012",
        managing_editor="editor@link.com",
        web_master="webmaster@link.com",
        pub_date="23 Jul 1974 09:10 UTC",
        last_build_date="Wed, 23 Jul 1974 09:10:30 +0700",
        categories=[
            Category(value="podcasts", domain="http://www.link.com/categories"),
            Category(value="audio"),
        ],
        generator="rss20",
        docs=DOCS_URL,
        cloud=Cloud(
            domain="rpc.sys.com",
            port=80,
            path="/RPC2",
            register_procedure="pingMe",
            protocol="soap",
        ),
        ttl=60,
        image=Image(
            url="http://www.link.com/image.png",
            title="Title",
            link="http://www.link.com",
            width=100,
            height=30,
        ),
        rating="(PICS-1.1 \"http://www.rsac.org/ratingsv01.html\" l r (n 0 s 0 v 0 l 0))",
        text_input=TextInput(
            title="Search",
            description="Search the archive",
            name="q",
            link="http://www.link.com/search",
        ),
        skip_hours=Hours(hours=[0, 1, 23]),
        skip_days=Days(days=["Saturday", "Sunday"]),
        items=[
            Item(
                title="Episode 1",
                link="http://www.link.com/1",
                description="First episode",
                author="author@link.com",
                categories=[Category(value="audio", domain="shows")],
                comments="http://www.link.com/1/comments",
                enclosure=Enclosure(
                    url="http://www.link.com/1.mp3", length=10000, type="audio/mpeg"
                ),
                guid=Guid(value="http://www.link.com/1", is_perma_link=True),
                pub_date="Wed, 23 Jul 1974 09:10 UTC",
                source=Source(value="Upstream", url="http://upstream.com/rss"),
            ),
            Item(
                description="Second episode only has a description",
                guid=Guid(value="episode-2"),
            ),
        ],
    )


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    """Create a temporary directory for tests."""
    return tmp_path
