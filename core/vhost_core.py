"""
VHost Core - Virtual host validity resolution.

Merges the parsed vhosts config with the system hosts file and answers
"is this hostname a configured, locally resolvable vhost?".

A VhostResolver caches its merged result, so one instance must be created
per processing run (e.g. per request) and never shared between runs.
"""

import logging
from collections.abc import Callable
from typing import Any

from core.models import HostRecord
from utils.hosts_file import read_hosts
from utils.vhosts_conf import read_vhosts_conf

logger = logging.getLogger(__name__)

FILTER_MODES = ("all", "missing-cert", "missing-host", "ssl-only", "non-ssl")


class VhostResolver:
    """
    Lazily parses vhosts + hosts once and memoises the merged records.

    Args:
        vhosts_loader: Callable returning ``{name: HostRecord}``.
        hosts_loader: Callable returning a set of lower-cased hostnames.
    """

    def __init__(
        self,
        vhosts_loader: Callable[[], dict[str, HostRecord]],
        hosts_loader: Callable[[], set[str]],
    ):
        self._vhosts_loader = vhosts_loader
        self._hosts_loader = hosts_loader
        self._records: dict[str, HostRecord] | None = None
        self._valid_names: set[str] | None = None

    @classmethod
    def from_paths(
        cls, vhosts_path: str, crt_dir: str, hosts_paths: list[str]
    ) -> "VhostResolver":
        """Builds a resolver reading the given files on first use."""
        return cls(
            lambda: read_vhosts_conf(vhosts_path, crt_dir),
            lambda: read_hosts(hosts_paths),
        )

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "VhostResolver":
        """Builds a resolver from the application config dictionary."""
        return cls.from_paths(
            config.get("VHOSTS_CONF_PATH", ""),
            config.get("CRT_PATH", ""),
            config.get("HOSTS_FILES", []),
        )

    def resolve(self) -> dict[str, HostRecord]:
        """
        Returns vhost records with ``is_valid_host`` applied.

        The first call parses both sources; later calls return the cache.
        """
        if self._records is not None:
            return self._records

        records = self._vhosts_loader()
        hosts = self._hosts_loader()
        if not records or not hosts:
            logger.debug(
                "Vhost validation skipped (vhosts=%d, hosts=%d)", len(records), len(hosts)
            )
        else:
            for name, record in records.items():
                if name.lower() in hosts:
                    record.is_valid_host = True

        self._records = records
        return records

    def valid_hostnames(self) -> dict[str, bool]:
        """Returns lower-cased names of valid vhosts mapped to True."""
        return {
            name.lower(): True
            for name, record in self.resolve().items()
            if record.is_valid_host
        }

    def is_valid_vhost_host(self, hostname: str) -> bool:
        """Case-insensitive check of a bare hostname (no scheme)."""
        hostname = (hostname or "").strip().lower()
        if not hostname:
            return False
        if self._valid_names is None:
            self._valid_names = set(self.valid_hostnames())
        return hostname in self._valid_names

    def host_status(self) -> dict[str, bool]:
        """Every configured vhost name mapped to its validity."""
        return {name: record.is_valid_host for name, record in self.resolve().items()}


def filter_host_records(
    records: dict[str, HostRecord], mode: str = "all"
) -> dict[str, HostRecord]:
    """
    Filters vhost records the way the vhosts table filter does.

    Args:
        records: Output of VhostResolver.resolve().
        mode: One of FILTER_MODES. Unknown modes behave like "all".

    Returns:
        New dictionary with the matching records, in input order.
    """
    predicates = {
        "missing-cert": lambda r: r.uses_tls and not r.cert_valid,
        "missing-host": lambda r: not r.is_valid_host,
        "ssl-only": lambda r: r.uses_tls,
        "non-ssl": lambda r: not r.uses_tls,
    }
    predicate = predicates.get(mode)
    if predicate is None:
        return dict(records)
    return {name: record for name, record in records.items() if predicate(record)}
