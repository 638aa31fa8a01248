"""Tests for anchored heading markup and the single-heading renderer hook."""

from markdown_header_anchors.config.configuration_manager import MarkupConfig
from markdown_header_anchors.rendering.markup import AnchoredHeadingMarkup
from markdown_header_anchors.rendering.markdown_renderer import (
    MarkdownHeadingRenderer,
    split_explicit_id
)


def test_attribute_mode_markup():
    html = AnchoredHeadingMarkup().render(3, "API Reference", "api-reference")
    assert html.startswith('<h3 id="api-reference" class="doc-header">')
    assert html.endswith("</h3>")
    assert '<span class="header-text">API Reference</span>' in html
    assert 'aria-label="Copy link to API Reference section"' in html
    assert 'title="Copy link to this section"' in html
    assert 'data-anchor="#api-reference"' in html
    assert 'data-copy-handler="copyHeaderLink"' in html
    assert "onclick" not in html
    assert '<i class="pi pi-link" aria-hidden="true"></i>' in html


def test_inline_mode_uses_configured_handler():
    config = MarkupConfig(copy_mode="inline", copy_handler="copyAnchor")
    html = AnchoredHeadingMarkup(config).render(1, "Title", "it's")
    assert "onclick=\"copyAnchor(&#x27;#it\\&#x27;s&#x27;)\"" in html
    assert "data-anchor" not in html


def test_text_left_raw_unless_escaping_enabled():
    raw = AnchoredHeadingMarkup().render(2, "Use <code>", "use-code")
    assert '<span class="header-text">Use <code></span>' in raw
    assert 'aria-label="Copy link to Use &lt;code&gt; section"' in raw

    escaped = AnchoredHeadingMarkup(MarkupConfig(escape_text=True)).render(2, "Use <code>", "use-code")
    assert '<span class="header-text">Use &lt;code&gt;</span>' in escaped


def test_attribute_values_are_escaped():
    html = AnchoredHeadingMarkup().render(1, "Quote", 'a"b')
    assert 'id="a&quot;b"' in html
    assert 'data-anchor="#a&quot;b"' in html


def test_split_explicit_id():
    assert split_explicit_id("Heading {#custom-id}") == ("Heading", "custom-id")
    assert split_explicit_id("  Plain  ") == ("Plain", None)
    assert split_explicit_id("Empty {# }") == ("Empty {# }", None)


def test_renderer_heading_hook():
    renderer = MarkdownHeadingRenderer()
    html = renderer.heading("Quick Start {#start}", 2, raw="Quick Start {#start}")
    assert html.startswith('<h2 id="start" class="doc-header">')
    assert '<span class="header-text">Quick Start</span>' in html


def test_renderer_does_not_deduplicate():
    renderer = MarkdownHeadingRenderer()
    first = renderer.heading("Config", 2)
    second = renderer.heading("Config", 2)
    assert first == second
    assert 'id="config"' in first


def test_renderer_fallback_and_level_clamp():
    renderer = MarkdownHeadingRenderer(fallback_slug="section")
    html = renderer.heading("???", 9)
    assert html.startswith('<h6 id="section"')
