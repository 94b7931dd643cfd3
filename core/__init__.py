"""
Core Package.

This package contains the folder view business logic, separated from the
web layer: vhost validity resolution, URL name transformation, template
rendering and column orchestration.

ARCHITECTURE RULES:
- core/ modules may only import from:
  - Python standard library and third-party libraries
  - utils/ (parsers and filesystem adapters)
  - config (for global configuration)

- core/ modules MUST NOT import from:
  - web/ (no Flask dependencies)
  - flask, werkzeug, or any web-specific packages
"""

__all__ = [
    "folders_core",
    "models",
    "settings_core",
    "template_core",
    "url_name_core",
    "vhost_core",
]
