"""
Services Package.

This package contains the service layer the HTTP layer calls into,
separating request handling from core business logic.

ARCHITECTURE RULE:
- Services may ONLY import from core/* modules (and config)
- Services MUST NOT import directly from utils/
"""

from web.services import folders_service, vhosts_service

__all__ = [
    "folders_service",
    "vhosts_service",
]
