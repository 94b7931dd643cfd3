"""
Parser for Apache ``httpd-vhosts.conf`` text.

Turns ``<VirtualHost>`` blocks into :class:`HostRecord` objects keyed by
``ServerName``. Certificates are expected at ``<crt_dir>/<name>/server.crt``
and ``server.key``; any SSLCertificateFile paths in the text are kept only
until the block is finalised.
"""

import os
import re
from dataclasses import dataclass
from pathlib import Path

from logging_config import get_logger

logger = get_logger(__name__)

_BLOCK_OPEN = re.compile(r"^<VirtualHost\s+.*:(\d+)>", re.IGNORECASE)
_BLOCK_CLOSE = re.compile(r"^</VirtualHost>", re.IGNORECASE)
_DIRECTIVES = {
    "name": re.compile(r"^ServerName\s+(.+)", re.IGNORECASE),
    "document_root": re.compile(r"^DocumentRoot\s+(.+)", re.IGNORECASE),
    "cert_path": re.compile(r"^SSLCertificateFile\s+(.+)", re.IGNORECASE),
    "key_path": re.compile(r"^SSLCertificateKeyFile\s+(.+)", re.IGNORECASE),
}


@dataclass
class HostRecord:
    """
    One virtual host entry.

    Attributes:
        name: ServerName of the block.
        uses_tls: True when the block listens on port 443.
        cert_path: Resolved certificate path (TLS only).
        key_path: Resolved private key path (TLS only).
        cert_valid: Both certificate files exist. Always True without TLS.
        document_root: DocumentRoot directive, may be empty.
        is_valid_host: Name is present in the hosts file (set by the resolver).
        is_duplicate: Another block used the same ServerName.
    """

    name: str = ""
    uses_tls: bool = False
    cert_path: str = ""
    key_path: str = ""
    cert_valid: bool = True
    document_root: str = ""
    is_valid_host: bool = False
    is_duplicate: bool = False


class _VhostScanner:
    """Two-state line scanner: either no block is open or one record is."""

    def __init__(self, crt_dir: str):
        self.crt_dir = crt_dir
        self.records: dict[str, HostRecord] = {}
        self.current: HostRecord | None = None

    def feed(self, line: str) -> None:
        line = line.strip()

        opened = _BLOCK_OPEN.match(line)
        if opened:
            # An unclosed previous block is abandoned
            self.current = HostRecord(uses_tls=opened.group(1) == "443")
            return

        if _BLOCK_CLOSE.match(line):
            self.finalise()
            return

        if self.current is None:
            return

        for field_name, pattern in _DIRECTIVES.items():
            match = pattern.match(line)
            if match:
                setattr(self.current, field_name, _unquote(match.group(1).strip()))
                break

    def finalise(self) -> None:
        record, self.current = self.current, None
        if record is None or not record.name:
            return

        if record.uses_tls:
            record.cert_path = _resolve_cert_file(self.crt_dir, record.name, "server.crt")
            record.key_path = _resolve_cert_file(self.crt_dir, record.name, "server.key")
            record.cert_valid = os.path.exists(record.cert_path) and os.path.exists(
                record.key_path
            )

        previous = self.records.get(record.name)
        if previous is not None:
            previous.is_duplicate = True
            record.is_duplicate = True
            logger.debug("Duplicate vhost block for %s", record.name)
        self.records[record.name] = record


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


def _resolve_cert_file(crt_dir: str, name: str, filename: str) -> str:
    """Returns ``<crt_dir>/<name>/<filename>``, resolved when it exists."""
    path = Path(crt_dir) / name / filename
    if path.exists():
        return str(path.resolve())
    return str(path)


def parse_vhosts_text(text: str, crt_dir: str) -> dict[str, HostRecord]:
    """
    Parses vhost configuration text into records keyed by ServerName.

    Blocks without a ServerName are dropped. A trailing block that is never
    closed is still kept. Duplicate names keep the last block, and both the
    old and the new record are flagged as duplicates.

    Args:
        text: Raw contents of httpd-vhosts.conf.
        crt_dir: Base directory holding ``<name>/server.crt|key``.

    Returns:
        Dictionary of ServerName -> HostRecord (empty for empty text).
    """
    scanner = _VhostScanner(crt_dir)
    for line in (text or "").splitlines():
        scanner.feed(line)
    scanner.finalise()
    return scanner.records


def read_vhosts_conf(path: str, crt_dir: str) -> dict[str, HostRecord]:
    """
    Reads and parses a vhosts file.

    Returns an empty dictionary when the path is unset, missing or unreadable.
    """
    if not path:
        return {}

    target = Path(path)
    if not target.exists():
        logger.debug("vhosts config not found at %s", path)
        return {}

    try:
        text = target.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        logger.warning("Failed to read vhosts config at %s: %s", path, exc)
        return {}

    return parse_vhosts_text(text, crt_dir)
