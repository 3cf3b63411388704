#!/usr/bin/env python3
"""Command line entry point for rss20.

Commands:
- validate: check an RSS 2.0 XML file
- build: turn a YAML-authored feed into RSS 2.0 XML
- parse-date: convert an RSS date to ISO 8601
- format-date: convert an ISO 8601 instant to an RSS date

Usage:
    rss20 validate feed.xml
    rss20 build feed.yaml -o feed.xml
    rss20 --verbose parse-date "Wed, 23 Jul 1974 09:10:30 +0700"
"""

import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Annotated

import typer
import yaml
from dotenv import load_dotenv
from loguru import logger
from pydantic import ValidationError

from rss20.core.dates import format_rss_date, parse_rss_date
from rss20.core.errors import DateFormatError, FeedDecodeError
from rss20.core.validator import validate_feed
from rss20.core.xml_codec import read_feed, serialize_feed, write_feed
from rss20.models.config import AppConfig, LoggingConfig
from rss20.utils.config_loader import load_app_config, load_feed_yaml
from rss20.utils.logging import setup_logging

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(help="Validate, read and write RSS 2.0 feeds.")

EXIT_INVALID = 1
EXIT_UNREADABLE = 2


def _load_config(config_file: Path, verbose: bool) -> AppConfig:
    if config_file.exists():
        config = load_app_config(config_file)
    else:
        config = AppConfig()

    level = "DEBUG" if verbose else os.getenv("RSS20_LOG_LEVEL")
    if level:
        config.logging = LoggingConfig.model_validate(
            {**config.logging.model_dump(), "level": level.upper()}
        )
    return config


@app.callback()
def main(
    ctx: typer.Context,
    config_file: Annotated[
        Path,
        typer.Option(
            "--config",
            "-c",
            help="Path to rss20 configuration file",
        ),
    ] = Path(os.getenv("RSS20_CONFIG", "rss20.yaml")),
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging"),
    ] = False,
) -> None:
    """Validate, read and write RSS 2.0 feeds."""
    try:
        config = _load_config(config_file, verbose)
    except (yaml.YAMLError, ValidationError) as e:
        print(f"❌ Invalid configuration file {config_file}: {e}")
        sys.exit(EXIT_UNREADABLE)

    setup_logging(config.logging)
    ctx.obj = config


@app.command()
def validate(
    feed_file: Annotated[Path, typer.Argument(help="RSS 2.0 XML file")],
) -> None:
    """Check that an XML file is a valid RSS 2.0 feed."""
    try:
        feed = read_feed(feed_file)
    except (FileNotFoundError, FeedDecodeError) as e:
        print(f"❌ Cannot read feed: {e}")
        sys.exit(EXIT_UNREADABLE)

    error = validate_feed(feed)
    if error is not None:
        logger.warning(f"Feed {feed_file} is invalid: {error}")
        print(f"❌ Invalid feed ({error.field}): {error}")
        sys.exit(EXIT_INVALID)

    print(f"✅ {feed_file} is valid RSS 2.0 ({len(feed.items)} items)")


@app.command()
def build(
    ctx: typer.Context,
    feed_yaml: Annotated[Path, typer.Argument(help="Feed described in YAML")],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write XML here instead of stdout"),
    ] = None,
) -> None:
    """Build an RSS 2.0 XML document from a YAML feed description."""
    config: AppConfig = ctx.obj

    try:
        feed = load_feed_yaml(feed_yaml)
    except (FileNotFoundError, yaml.YAMLError, ValidationError) as e:
        print(f"❌ Cannot load feed description: {e}")
        sys.exit(EXIT_UNREADABLE)

    error = validate_feed(feed)
    if error is not None:
        print(f"❌ Invalid feed ({error.field}): {error}")
        sys.exit(EXIT_INVALID)

    if output is None:
        print(serialize_feed(feed, config.output), end="")
    else:
        try:
            write_feed(feed, output, config.output)
        except OSError as e:
            logger.error(f"Failed to write feed {output}: {e}")
            print(f"❌ Cannot write feed: {e}")
            sys.exit(EXIT_UNREADABLE)
        print(f"✅ Wrote {output} ({len(feed.items)} items)")


@app.command("parse-date")
def parse_date(
    value: Annotated[str, typer.Argument(help="RSS date, e.g. 'Wed, 23 Jul 1974 09:10 UTC'")],
) -> None:
    """Print an RSS date as ISO 8601."""
    try:
        moment = parse_rss_date(value)
    except DateFormatError as e:
        print(f"❌ {e}")
        sys.exit(EXIT_INVALID)

    print(moment.isoformat())


@app.command("format-date")
def format_date(
    value: Annotated[
        str | None,
        typer.Argument(help="ISO 8601 instant (defaults to now, UTC)"),
    ] = None,
) -> None:
    """Print an ISO 8601 instant as an RSS date."""
    if value is None:
        moment = datetime.now(timezone.utc)
    else:
        try:
            moment = datetime.fromisoformat(value)
        except ValueError as e:
            print(f"❌ Invalid ISO 8601 instant {value!r}: {e}")
            sys.exit(EXIT_INVALID)

    print(format_rss_date(moment))


if __name__ == "__main__":
    app()
