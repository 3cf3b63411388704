"""Configuration and feed document loading utilities."""

from pathlib import Path
from typing import TYPE_CHECKING, TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from rss20.utils.logging import get_logger

if TYPE_CHECKING:
    from rss20.models.config import AppConfig
    from rss20.models.feed import Feed

logger = get_logger(__name__)

T = TypeVar("T", bound=BaseModel)


def load_yaml_config[T: BaseModel](file_path: Path | str, model_class: type[T]) -> T:
    """
    Load and validate a YAML file against a pydantic model.

    Args:
        file_path: Path to YAML file
        model_class: Pydantic model class to validate against

    Returns:
        Validated model instance

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValidationError: If the content doesn't match the model
        yaml.YAMLError: If YAML is malformed

    Examples:
        >>> from rss20.models.config import AppConfig
        >>> config = load_yaml_config("rss20.yaml", AppConfig)
    """
    path = Path(file_path)

    if not path.exists():
        logger.error("Configuration file not found", path=str(path))
        raise FileNotFoundError(f"Configuration file not found: {path}")

    try:
        with path.open("r", encoding="utf-8") as f:
            raw_config = yaml.safe_load(f)

        # An empty file means "all defaults"
        config = model_class.model_validate(raw_config or {})
        logger.info("Configuration loaded", path=str(path), model=model_class.__name__)
        return config

    except yaml.YAMLError as e:
        logger.error("Invalid YAML syntax", path=str(path), error=str(e))
        raise

    except ValidationError as e:
        logger.error("Configuration validation failed", path=str(path), error=str(e))
        raise


def load_app_config(file_path: Path | str = "rss20.yaml") -> "AppConfig":
    """
    Load rss20 tool configuration.

    Args:
        file_path: Path to the configuration file

    Returns:
        AppConfig instance
    """
    from rss20.models.config import AppConfig

    return load_yaml_config(file_path, AppConfig)


def load_feed_yaml(file_path: Path | str) -> "Feed":
    """
    Load a feed authored as YAML.

    Keys are the Feed model's field names (title, link, pub_date, items, ...).
    The feed is not validated against RSS 2.0.

    Args:
        file_path: Path to the feed YAML file

    Returns:
        Feed instance
    """
    from rss20.models.feed import Feed

    return load_yaml_config(file_path, Feed)
