# config.py
import os

from dotenv import load_dotenv

from utils.hosts_file import default_hosts_paths

# Load environment variables from .env file.
load_dotenv()

_CONFIG = None


def _split_paths(raw: str) -> list[str]:
    return [part.strip() for part in raw.split(",") if part.strip()]


def load_config():
    """
    Loads configuration from environment variables and returns a dictionary.
    """
    apache_path = os.getenv("APACHE_PATH", "").strip().rstrip("/\\")

    # vhosts + certificates live below the Apache install unless overridden;
    # without an Apache install there is nothing to parse
    if apache_path:
        vhosts_path = os.getenv(
            "VHOSTS_CONF_PATH", f"{apache_path}/conf/extra/httpd-vhosts.conf"
        )
        crt_path = os.getenv("CRT_PATH", f"{apache_path}/crt")
    else:
        vhosts_path = ""
        crt_path = ""

    hosts_raw = os.getenv("HOSTS_FILES", "")
    hosts_files = _split_paths(hosts_raw) or default_hosts_paths()

    config = {
        # General Settings
        "DEBUG_MODE": os.getenv("DEBUG_MODE", "False").lower() == "true",

        # Apache Settings
        "APACHE_PATH": apache_path,
        "VHOSTS_CONF_PATH": vhosts_path,
        "CRT_PATH": crt_path,
        "HOSTS_FILES": hosts_files,

        # Folder Settings
        "HTDOCS_PATH": os.getenv("HTDOCS_PATH", os.getcwd()),
        "CONFIG_DIR": os.getenv("CONFIG_DIR", "config"),
    }
    return config


def get_config():
    """Returns the process-wide configuration, loading it on first use."""
    global _CONFIG
    if _CONFIG is None:
        _CONFIG = load_config()
    return _CONFIG


if __name__ == "__main__":
    # For testing purposes, print the configuration
    config = load_config()
    from pprint import pprint

    pprint(config)
