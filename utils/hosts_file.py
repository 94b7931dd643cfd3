"""
Reader for the system hosts file(s).

Only the aliases matter here: every hostname mapped to any address is
collected, lower-cased, into one flat set.
"""

import logging
import os
import platform
from pathlib import Path

logger = logging.getLogger(__name__)


def default_hosts_paths(system: str | None = None) -> list[str]:
    """
    Returns the hosts file locations for the given OS family.

    Args:
        system: ``platform.system()`` style name; detected when None.
    """
    system = system or platform.system()
    if system == "Windows":
        windir = os.getenv("WINDIR", "")
        return [f"{windir}/System32/drivers/etc/hosts"] if windir else []
    return ["/etc/hosts"]


def parse_hosts_text(text: str) -> set[str]:
    """Parses hosts file content into a set of lower-cased hostnames."""
    hosts = set()
    for line in (text or "").splitlines():
        line = line.split("#", 1)[0].strip()
        if not line:
            continue

        parts = line.split()
        if len(parts) < 2:
            continue

        # parts[0] is the address
        for alias in parts[1:]:
            hosts.add(alias.lower())
    return hosts


def read_hosts(paths: list[str]) -> set[str]:
    """
    Reads and merges several hosts files.

    Missing or unreadable files are skipped.
    """
    hosts = set()
    for path in paths:
        if not path:
            continue
        target = Path(path)
        if not target.is_file():
            continue
        try:
            text = target.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            logger.debug("Skipping unreadable hosts file %s: %s", path, exc)
            continue
        hosts |= parse_hosts_text(text)
    return hosts
