"""
Models - Typed structures shared by the folder rendering pipeline.

Loose JSON objects from folders.json / link_templates.json are converted
here, once, so the rest of core/ never inspects raw dictionaries.
"""

from dataclasses import dataclass, field
from typing import Any

from utils.vhosts_conf import HostRecord

__all__ = [
    "HostRecord",
    "ColumnRule",
    "LinkTemplate",
    "Rendered",
    "Skipped",
    "TransformResult",
    "ColumnView",
    "FolderView",
]


def _as_str(value: Any, default: str = "") -> str:
    if value is None:
        return default
    return str(value)


def _as_str_list(value: Any) -> list[str]:
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value if item is not None]
    return []


@dataclass
class ColumnRule:
    """
    One configured folder column.

    Attributes:
        title: Column heading.
        directory: Directory relative to the htdocs root.
        href: Optional link for the heading.
        exclude_list: Entry names dropped before any transformation.
        url_match: Regex an entry must match (empty = no rule).
        url_replace: Replacement for ``url_match``; None when not configured.
        special_cases: Post-transform name overrides.
        link_template_name: Template used to render each entry.
        disable_links: Strip anchors from rendered items.
        require_valid_vhost: Keep only items linking to a valid vhost.
    """

    title: str = "Untitled"
    directory: str = ""
    href: str = ""
    exclude_list: list[str] = field(default_factory=list)
    url_match: str = ""
    url_replace: str | None = None
    special_cases: dict[str, str] = field(default_factory=dict)
    link_template_name: str = "basic"
    disable_links: bool = False
    require_valid_vhost: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ColumnRule":
        """
        Builds a rule from a folders.json object, applying defaults.

        Accepts ``urlRules: {match, replace}`` as well as flat
        ``urlMatch``/``urlReplace`` keys. ``specialCases`` may be a map or a
        list of ``{match, replace}`` rows.
        """
        from core.url_name_core import special_cases_from_rows

        url_rules = data.get("urlRules")
        if isinstance(url_rules, dict):
            url_match = url_rules.get("match")
            url_replace = url_rules.get("replace")
        else:
            url_match = data.get("urlMatch")
            url_replace = data.get("urlReplace")

        raw_cases = data.get("specialCases")
        if isinstance(raw_cases, dict):
            special_cases = {str(k): _as_str(v) for k, v in raw_cases.items()}
        elif isinstance(raw_cases, list):
            special_cases = special_cases_from_rows(
                row for row in raw_cases if isinstance(row, dict)
            )
        else:
            special_cases = {}

        return cls(
            title=_as_str(data.get("title"), "Untitled"),
            directory=_as_str(data.get("dir", data.get("directory"))),
            href=_as_str(data.get("href")),
            exclude_list=_as_str_list(data.get("excludeList")),
            url_match=_as_str(url_match),
            url_replace=None if url_replace is None else str(url_replace),
            special_cases=special_cases,
            link_template_name=_as_str(data.get("linkTemplate"), "basic"),
            disable_links=bool(data.get("disableLinks")),
            require_valid_vhost=bool(
                data.get("requireVhost", data.get("requireValidVhost"))
            ),
        )


@dataclass
class LinkTemplate:
    """Named markup snippet with a ``{urlName}`` placeholder."""

    name: str
    html: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LinkTemplate | None":
        if not isinstance(data, dict) or data.get("name") is None:
            return None
        return cls(name=str(data["name"]), html=_as_str(data.get("html")))


@dataclass
class Rendered:
    """Entry survives with a display name; ``errors`` holds config warnings."""

    name: str
    errors: list[str] = field(default_factory=list)


@dataclass
class Skipped:
    """Entry is excluded from the column."""


TransformResult = Rendered | Skipped


@dataclass
class ColumnView:
    """
    Rendered output of one column.

    status is one of ``ok``, ``missing_dir`` or ``empty_dir``.
    """

    rule: ColumnRule
    directory: str = ""
    items: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    status: str = "ok"


@dataclass
class FolderView:
    """
    All columns plus the de-duplicated warnings shown under them.

    ``notice`` is set instead of columns when nothing is configured yet.
    """

    columns: list[ColumnView] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    has_vhost_columns: bool = False
    notice: str = ""
