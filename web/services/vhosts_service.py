"""
Vhosts Service - Web Layer Service for virtual host status.

Thin wrapper over core.vhost_core for badges and the vhosts table.
"""

from core import settings_core
from core.models import HostRecord
from core.vhost_core import FILTER_MODES, VhostResolver, filter_host_records


def get_host_status(resolver: VhostResolver) -> dict[str, bool]:
    """Get hostname -> validity for display badges."""
    return resolver.host_status()


def get_vhost_records(resolver: VhostResolver, mode: str = "all") -> dict[str, HostRecord]:
    """
    Get vhost records for the vhosts table.

    Args:
        resolver: Request-scoped resolver
        mode: Table filter, one of FILTER_MODES

    Returns:
        Filtered records keyed by ServerName
    """
    if mode not in FILTER_MODES:
        mode = "all"
    return filter_host_records(resolver.resolve(), mode)


def is_apache_path_valid() -> bool:
    """
    Whether an Apache install path is configured.

    Delegates to core.settings_core.
    """
    return settings_core.is_apache_path_valid()
