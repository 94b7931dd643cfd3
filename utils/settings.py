import json
from pathlib import Path
from typing import Any

import yaml

from logging_config import get_logger

logger = get_logger(__name__)

FOLDERS_FILE = "folders.json"
LINK_TEMPLATES_FILE = "link_templates.json"


def get_config_dir(config_dir: str = None) -> Path:
    """Returns the directory holding folders.json and link_templates.json."""
    if config_dir is None:
        from config import get_config

        config_dir = get_config()["CONFIG_DIR"]
    return Path(config_dir)


def load_json_list(path: Path) -> list[Any]:
    """
    Loads a JSON array from disk.

    Hand-written YAML lists are accepted as well. Missing, empty or
    malformed files yield [].
    """
    if not path.exists():
        logger.debug("Config file not found: %s", path)
        return []
    try:
        raw = path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        logger.warning("Failed to read %s: %s", path, exc)
        return []
    if not raw:
        return []
    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        try:
            data = yaml.safe_load(raw)
        except yaml.YAMLError as exc:
            logger.warning("Invalid config file %s: %s", path, exc)
            return []
    return data if isinstance(data, list) else []


def load_folder_columns(config_dir: str = None) -> list[Any]:
    """Loads the raw column objects from folders.json."""
    return load_json_list(get_config_dir(config_dir) / FOLDERS_FILE)


def load_link_templates(config_dir: str = None) -> list[Any]:
    """Loads the raw template objects from link_templates.json."""
    return load_json_list(get_config_dir(config_dir) / LINK_TEMPLATES_FILE)
