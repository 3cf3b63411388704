"""RSS 2.0 feed data models.

The models describe structure and types only. Whether a feed is RSS 2.0
compliant is decided by ``rss20.core.validator.validate_feed``.
"""

from pydantic import BaseModel, Field

from rss20.constants import DEFAULT_HEIGHT, DEFAULT_WIDTH, VERSION


class Category(BaseModel):
    """Hierarchical categorization of a channel or item."""

    value: str = Field(default="", description="Category label (element body)")
    domain: str = Field(default="", description="Taxonomy identifier, URL or free-form")


class Cloud(BaseModel):
    """rssCloud interface parameters."""

    domain: str = Field(default="", description="Cloud host")
    port: int = Field(default=0, description="Cloud port (1-65535)")
    path: str = Field(default="", description="Cloud path, starts with '/'")
    register_procedure: str = Field(default="", description="Register procedure name")
    protocol: str = Field(default="", description="xml-rpc, soap or http-post")


class Image(BaseModel):
    """Image representing the channel."""

    url: str = Field(default="", description="URL of a GIF, JPEG or PNG image")
    title: str = Field(default="", description="Image title")
    link: str = Field(default="", description="Link target of the image")
    width: int = Field(default=0, description="Width in pixels, 0 means absent")
    height: int = Field(default=0, description="Height in pixels, 0 means absent")

    @property
    def effective_width(self) -> int:
        return self.width or DEFAULT_WIDTH

    @property
    def effective_height(self) -> int:
        return self.height or DEFAULT_HEIGHT


class TextInput(BaseModel):
    """Text input box displayed with the channel."""

    title: str = Field(default="", description="Submit button label")
    description: str = Field(default="", description="Text input description")
    name: str = Field(default="", description="Text object name")
    link: str = Field(default="", description="URL processing the request")


class Hours(BaseModel):
    """Hours (0-23, GMT) when aggregators may skip the channel."""

    hours: list[int] = Field(default_factory=list)


class Days(BaseModel):
    """Days when aggregators may skip the channel."""

    days: list[str] = Field(default_factory=list)


class Enclosure(BaseModel):
    """Media object attached to an item."""

    url: str = Field(default="", description="Enclosure URL")
    length: int = Field(default=0, description="Size in bytes")
    type: str = Field(default="", description="MIME type")


class Guid(BaseModel):
    """Unique identifier of an item."""

    value: str = Field(default="", description="Identifier (element body)")
    is_perma_link: bool = Field(default=False, description="Identifier is a URL")


class Source(BaseModel):
    """Channel an item was republished from."""

    value: str = Field(default="", description="Source channel title (element body)")
    url: str = Field(default="", description="Source channel URL")


class Item(BaseModel):
    """Single RSS item."""

    title: str = Field(default="", description="Item title")
    link: str = Field(default="", description="Item URL")
    description: str = Field(default="", description="Item synopsis")
    author: str = Field(default="", description="Author email address")
    categories: list[Category] = Field(default_factory=list)
    comments: str = Field(default="", description="URL of the comments page")
    enclosure: Enclosure | None = Field(default=None)
    guid: Guid | None = Field(default=None)
    pub_date: str = Field(default="", description="RSS date string")
    source: Source | None = Field(default=None)


class Feed(BaseModel):
    """Complete RSS document: the rss element and its channel."""

    version: str = Field(default=VERSION, description="rss/@version")
    title: str = Field(default="", description="Channel title")
    link: str = Field(default="", description="Channel website URL")
    description: str = Field(default="", description="Channel description")
    language: str = Field(default="", description="Channel language code")
    copyright: str = Field(default="")
    managing_editor: str = Field(default="", description="Editor email address")
    web_master: str = Field(default="", description="Webmaster email address")
    pub_date: str = Field(default="", description="RSS date string")
    last_build_date: str = Field(default="", description="RSS date string")
    categories: list[Category] = Field(default_factory=list)
    generator: str = Field(default="")
    docs: str = Field(default="", description="Empty or the RSS 2.0 docs URL")
    cloud: Cloud | None = Field(default=None)
    ttl: int = Field(default=0, description="Minutes the channel may be cached")
    image: Image | None = Field(default=None)
    rating: str = Field(default="", description="PICS rating")
    text_input: TextInput | None = Field(default=None)
    skip_hours: Hours | None = Field(default=None)
    skip_days: Days | None = Field(default=None)
    items: list[Item] = Field(default_factory=list)
