"""
Folders Service - Web Layer Service for the Document Folders view.

Thin wrapper over core.folders_core. Each call builds its own
VhostResolver so vhost data is parsed at most once per request and never
shared between requests.
"""

from core import folders_core, settings_core
from core.models import FolderView
from core.vhost_core import VhostResolver
from config import get_config


def new_request_resolver() -> VhostResolver:
    """Creates the vhost resolver for one request."""
    return VhostResolver.from_config(get_config())


def get_folder_view(resolver: VhostResolver | None = None) -> FolderView:
    """
    Render all configured folder columns.

    Args:
        resolver: Request-scoped resolver; a fresh one is created when None.

    Returns:
        FolderView with rendered columns and warnings
    """
    if resolver is None:
        resolver = new_request_resolver()
    return folders_core.render_folder_view(
        settings_core.get_folder_columns(),
        settings_core.get_link_templates(),
        settings_core.get_htdocs_path(),
        resolver,
    )
