"""
Settings Core - Dashboard settings access.

Provides read access to the folder and link template configuration,
separated from the web layer.
"""

import logging
from typing import Any

from config import get_config
from utils.settings import load_folder_columns, load_link_templates

logger = logging.getLogger(__name__)


def get_setting(key: str, default: Any = None) -> Any:
    """
    Gets a single setting value.

    Args:
        key: Setting key
        default: Default value if key not found

    Returns:
        Setting value or default
    """
    config = get_config()
    return config.get(key, default)


def get_folder_columns() -> list[Any]:
    """
    Returns the raw column objects from folders.json.

    Returns:
        List of column dictionaries (empty when not configured)
    """
    return load_folder_columns(get_setting("CONFIG_DIR"))


def get_link_templates() -> list[Any]:
    """
    Returns the raw link template objects from link_templates.json.

    Returns:
        List of template dictionaries (empty when not configured)
    """
    return load_link_templates(get_setting("CONFIG_DIR"))


def get_htdocs_path() -> str:
    """Returns the root directory folder columns are resolved under."""
    return get_setting("HTDOCS_PATH", "")


def is_apache_path_valid() -> bool:
    """True when an Apache install path is configured."""
    return bool(get_setting("APACHE_PATH"))
