"""Configuration models for the rss20 tools."""

from typing import Literal

from pydantic import BaseModel, Field


class LoggingConfig(BaseModel):
    """Logging configuration for loguru."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")
    serialize: bool = Field(default=False, description="Serialize file logs to JSON")
    colorize: bool = Field(default=True, description="Colorize console output")
    file_path: str | None = Field(default=None, description="Log file, None disables it")
    rotation: str = Field(default="10 MB", description="Log rotation size/time")
    retention: str = Field(default="30 days", description="Log retention period")
    compression: str = Field(default="zip", description="Compression format for rotated logs")


class OutputConfig(BaseModel):
    """XML output configuration."""

    indent: str = Field(default="  ", description="Indentation for pretty printing")
    encoding: str = Field(default="utf-8")
    xml_declaration: bool = Field(default=True, description="Emit <?xml ...?> header")
    validate_before_write: bool = Field(
        default=True, description="Refuse to write feeds that fail validation"
    )


class AppConfig(BaseModel):
    """Complete rss20 configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
