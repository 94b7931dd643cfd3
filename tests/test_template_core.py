"""
Tests for core/template_core.py – link template rendering.
"""

import pytest

from core.models import LinkTemplate
from core.template_core import (
    FALLBACK_TEMPLATE_HTML,
    extract_template_hosts,
    index_templates,
    render_item_html,
    resolve_template_html,
    strip_links,
)

TEMPLATES = [
    {"name": "basic", "html": '<li><a href="/{urlName}">{urlName}</a></li>'},
    {"name": "vhost", "html": '<li><a href="https://{urlName}.test/">{urlName}</a></li>'},
    {"html": "<li>nameless</li>"},
    "not-an-object",
]


class TestTemplateResolution:
    def test_index_skips_nameless_entries(self):
        by_name = index_templates(TEMPLATES)

        assert list(by_name) == ["basic", "vhost"]
        assert isinstance(by_name["basic"], LinkTemplate)

    def test_index_accepts_template_objects(self):
        by_name = index_templates([LinkTemplate("x", "<li>{urlName}</li>")])

        assert by_name["x"].html == "<li>{urlName}</li>"

    def test_named_template(self):
        by_name = index_templates(TEMPLATES)

        assert "https://" in resolve_template_html("vhost", by_name)

    def test_falls_back_to_basic(self):
        by_name = index_templates(TEMPLATES)

        assert resolve_template_html("missing", by_name) == TEMPLATES[0]["html"]

    def test_falls_back_to_hard_coded_anchor(self):
        assert resolve_template_html("basic", {}) == FALLBACK_TEMPLATE_HTML
        assert resolve_template_html("other", index_templates([])) == FALLBACK_TEMPLATE_HTML


class TestRenderItemHtml:
    def test_name_placeholder_substituted_everywhere(self):
        html = render_item_html('<li><a href="/{name}">{name}</a></li>', "proj", False)

        assert html == '<li><a href="/proj">proj</a></li>'
        assert "{name}" not in html

    def test_url_name_placeholder(self):
        html = render_item_html(FALLBACK_TEMPLATE_HTML, "proj", False)

        assert html == '<li><a href="/proj">proj</a></li>'

    def test_name_is_escaped(self):
        html = render_item_html("<li>{urlName}</li>", '<script>"x"</script>', False)

        assert "<script>" not in html
        assert "&lt;script&gt;" in html
        assert "&#34;x&#34;" in html

    def test_disable_links_keeps_structural_tags_and_text(self):
        template = '<li><div class="card"><a href="/{urlName}"><span>{urlName}</span></a></div></li>'

        html = render_item_html(template, "proj", True)

        assert html == '<li><div class="card"><span>proj</span></div></li>'

    def test_disable_links_removes_other_tags(self):
        html = render_item_html(
            '<li><strong><a href="/{urlName}">{urlName}</a></strong><button>Go</button></li>',
            "proj",
            True,
        )

        assert html == "<li>projGo</li>"

    def test_disable_links_keeps_escaped_text_safe(self):
        html = render_item_html('<li><a href="/{urlName}">{urlName}</a></li>', "a<b", True)

        assert html == "<li>a&lt;b</li>"


class TestStripLinks:
    def test_drops_comments(self):
        assert strip_links("<li><!-- note -->text</li>") == "<li>text</li>"


class TestExtractTemplateHosts:
    def test_extracts_lowercased_hosts(self):
        html = (
            '<li><a href="https://Proj.Test/">x</a>'
            "<a href='http://proj.test:8080/admin'>y</a>"
            '<a href="//cdn.example.com/lib.js">z</a></li>'
        )

        assert extract_template_hosts(html) == ["proj.test", "cdn.example.com"]

    @pytest.mark.parametrize(
        "html",
        [
            '<li><a href="/proj">proj</a></li>',
            "<li>no links</li>",
            '<li><a href="mailto:someone">m</a></li>',
            "",
        ],
    )
    def test_no_hosts(self, html):
        assert extract_template_hosts(html) == []

    def test_hosts_reflect_substituted_name(self):
        html = render_item_html('<li><a href="https://{urlName}.test/">{urlName}</a></li>', "Shop", False)

        assert extract_template_hosts(html) == ["shop.test"]
