"""
Template Core - Link template resolution and item rendering.

Templates are small HTML snippets containing a ``{urlName}`` placeholder
(``{name}`` is accepted too). Rendering escapes the name, substitutes it,
and can strip interactive markup for link-less columns.
"""

import logging
from collections.abc import Iterable
from typing import Any
from urllib.parse import urlsplit

from bs4 import BeautifulSoup, Comment
from markupsafe import escape

from core.models import LinkTemplate

logger = logging.getLogger(__name__)

PLACEHOLDERS = ("{urlName}", "{name}")
DEFAULT_TEMPLATE = "basic"
FALLBACK_TEMPLATE_HTML = '<li><a href="/{urlName}">{urlName}</a></li>'

# Tags kept when links are disabled; everything else is unwrapped
STRUCTURAL_TAGS = frozenset({"li", "div", "span"})


def index_templates(templates: Iterable[Any]) -> dict[str, LinkTemplate]:
    """
    Indexes templates by name.

    Accepts LinkTemplate objects or raw link_templates.json objects;
    entries without a name are ignored. Later duplicates win.
    """
    by_name = {}
    for item in templates or []:
        template = item if isinstance(item, LinkTemplate) else LinkTemplate.from_dict(item)
        if template is None:
            continue
        by_name[template.name] = template
    return by_name


def resolve_template_html(template_name: str, templates_by_name: dict[str, LinkTemplate]) -> str:
    """Returns the named template, else "basic", else a minimal anchor."""
    if template_name in templates_by_name:
        return templates_by_name[template_name].html
    if DEFAULT_TEMPLATE in templates_by_name:
        return templates_by_name[DEFAULT_TEMPLATE].html
    return FALLBACK_TEMPLATE_HTML


def substitute(template_html: str, value: str) -> str:
    """Replaces every placeholder occurrence with ``value`` (no escaping)."""
    for placeholder in PLACEHOLDERS:
        template_html = template_html.replace(placeholder, value)
    return template_html


def render_template(template_html: str, url_name: str) -> str:
    """Substitutes the HTML-escaped name into the template."""
    return substitute(template_html, str(escape(url_name)))


def strip_links(html: str) -> str:
    """
    Removes all tags except li/div/span, keeping their text content.

    Comments are dropped entirely.
    """
    soup = BeautifulSoup(html, "html.parser")
    for comment in soup.find_all(string=lambda text: isinstance(text, Comment)):
        comment.extract()
    for tag in soup.find_all(True):
        if tag.name not in STRUCTURAL_TAGS:
            tag.unwrap()
    return str(soup)


def render_item_html(template_html: str, url_name: str, disable_links: bool) -> str:
    """
    Renders one list item.

    Args:
        template_html: Template markup with a placeholder.
        url_name: Transformed folder name.
        disable_links: Strip anchors and other non-structural tags.

    Returns:
        HTML fragment.
    """
    html = render_template(template_html, url_name)
    if disable_links:
        html = strip_links(html)
    return html


def extract_template_hosts(html: str) -> list[str]:
    """
    Returns the unique, lower-cased hostnames of all href attributes.

    Relative links (no host) contribute nothing. Order is first-seen.
    """
    hosts: list[str] = []
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup.find_all(href=True):
        href = tag.get("href")
        if isinstance(href, list):
            href = " ".join(href)
        try:
            host = urlsplit(str(href).strip()).hostname
        except ValueError:
            logger.debug("Ignoring unparsable href: %s", href)
            continue
        if host and host not in hosts:
            hosts.append(host)
    return hosts
