"""
Folders Core - Column orchestration for the document folders view.

For every configured column: list the directory, drop excluded entries,
transform names, render them through the column's link template and,
when required, keep only items that link to a valid vhost.

Nothing here raises for bad configuration; problems are collected as
warning strings for display.
"""

import logging
import os
from collections.abc import Callable, Iterable
from typing import Any

from markupsafe import escape

from core.models import ColumnRule, ColumnView, FolderView, LinkTemplate, Skipped
from core.template_core import (
    extract_template_hosts,
    index_templates,
    render_item_html,
    render_template,
    resolve_template_html,
)
from core.url_name_core import transform_url_name
from core.vhost_core import VhostResolver
from utils.folder_listing import list_subdirs, resolve_column_dir

logger = logging.getLogger(__name__)

NOTICE_NOTHING = "No folders or link templates configured yet."
NOTICE_NO_FOLDERS = "No folders configured yet."
NOTICE_NO_TEMPLATES = "No link templates configured yet."


def _empty_resolver() -> VhostResolver:
    return VhostResolver(dict, set)


def render_column(
    rule: ColumnRule,
    entry_names: Iterable[str],
    templates_by_name: dict[str, LinkTemplate],
    resolver: VhostResolver | None = None,
    errors: list[str] | None = None,
) -> tuple[list[str], list[str]]:
    """
    Renders the items of one column.

    Args:
        rule: Column configuration.
        entry_names: Folder names in display order.
        templates_by_name: Output of index_templates().
        resolver: Per-run vhost resolver, consulted only for vhost columns.
        errors: Shared warning collector; a new list is used when None.

    Returns:
        Tuple of (rendered item HTML in input order, warning collector).
    """
    if errors is None:
        errors = []
    if rule.require_valid_vhost and resolver is None:
        resolver = _empty_resolver()

    template_html = resolve_template_html(rule.link_template_name, templates_by_name)
    excluded = set(rule.exclude_list)
    items = []

    for entry_name in entry_names:
        if entry_name in excluded:
            continue

        result = transform_url_name(entry_name, rule)
        if isinstance(result, Skipped):
            continue
        errors.extend(result.errors)

        if rule.require_valid_vhost:
            # Hosts come from the substituted markup, before any link stripping
            hosts = extract_template_hosts(render_template(template_html, result.name))
            if not any(resolver.is_valid_vhost_host(host) for host in hosts):
                logger.debug("Column %s: no valid vhost for %s", rule.title, entry_name)
                continue

        items.append(render_item_html(template_html, result.name, rule.disable_links))

    return items, errors


def coerce_column_rules(
    raw_columns: Iterable[Any], errors: list[str]
) -> list[ColumnRule]:
    """Converts folders.json objects to ColumnRule; non-objects are reported."""
    rules = []
    for raw in raw_columns or []:
        if isinstance(raw, ColumnRule):
            rules.append(raw)
        elif isinstance(raw, dict):
            rules.append(ColumnRule.from_dict(raw))
        else:
            errors.append("Column configuration must be an object.")
    return rules


def _dedupe(messages: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(messages))


def render_folder_view(
    raw_columns: Iterable[Any],
    raw_templates: Iterable[Any],
    htdocs_path: str,
    resolver: VhostResolver | None = None,
    lister: Callable[[str], list[str]] = list_subdirs,
) -> FolderView:
    """
    Renders every configured column.

    Args:
        raw_columns: folders.json objects (or ColumnRule instances).
        raw_templates: link_templates.json objects (or LinkTemplate instances).
        htdocs_path: Root that column directories are resolved under.
        resolver: Per-run vhost resolver shared by all columns.
        lister: Directory listing callable returning ordered names.

    Returns:
        FolderView with columns in configured order and unique warnings.
    """
    raw_columns = list(raw_columns or [])
    templates_by_name = index_templates(raw_templates)

    if not raw_columns or not templates_by_name:
        if not raw_columns and not templates_by_name:
            notice = NOTICE_NOTHING
        elif not raw_columns:
            notice = NOTICE_NO_FOLDERS
        else:
            notice = NOTICE_NO_TEMPLATES
        return FolderView(notice=notice)

    warnings: list[str] = []
    rules = coerce_column_rules(raw_columns, warnings)
    view = FolderView(has_vhost_columns=any(r.require_valid_vhost for r in rules))
    if view.has_vhost_columns and resolver is None:
        resolver = _empty_resolver()

    for rule in rules:
        directory, dir_error = resolve_column_dir(htdocs_path, rule.directory)
        if dir_error:
            warnings.append(f"{dir_error} (Column: {escape(rule.title)})")

        column = ColumnView(rule=rule, directory=directory)
        view.columns.append(column)

        if not directory or not os.path.isdir(directory):
            column.status = "missing_dir"
            continue

        try:
            entries = lister(directory)
        except OSError as exc:
            logger.warning("Listing failed for column %r: %s", rule.title, exc)
            column.status = "missing_dir"
            continue
        if not entries:
            column.status = "empty_dir"
            continue

        column.items, column.errors = render_column(
            rule, entries, templates_by_name, resolver
        )
        warnings.extend(column.errors)

    view.warnings = _dedupe(warnings)
    return view
