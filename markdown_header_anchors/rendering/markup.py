"""Anchored heading markup with a copy-link control."""

from html import escape
from typing import Optional

from ..core.interfaces import HeadingMarkupInterface
from ..config.configuration_manager import MarkupConfig


def _js_string(value: str) -> str:
    """Quote value as a single-quoted JavaScript string literal."""
    return "'" + value.replace("\\", "\\\\").replace("'", "\\'") + "'"


class AnchoredHeadingMarkup(HeadingMarkupInterface):
    """
    Builds the heading block injected in place of a markdown heading line.

    The block carries the slug as element id and a button that hands the
    section anchor ("#" + slug) to an external copy-link function. In
    "attribute" mode the anchor and handler name are exposed as data
    attributes for the rendering layer to bind; in "inline" mode the button
    calls the handler through an onclick attribute.
    """

    def __init__(self, config: Optional[MarkupConfig] = None):
        self.config = config or MarkupConfig()

    def render(self, level: int, text: str, slug: str) -> str:
        cfg = self.config
        anchor = f"#{slug}"
        visible_text = escape(text, quote=False) if cfg.escape_text else text
        label = f"Copy link to {text} section"

        return (
            f'<h{level} id="{escape(slug)}" class="{escape(cfg.header_class)}">\n'
            f'  <span class="{escape(cfg.text_class)}">{visible_text}</span>\n'
            f'  <button type="button" class="{escape(cfg.button_class)}"\n'
            f'          title="{escape(cfg.button_title)}"\n'
            f'          aria-label="{escape(label)}"\n'
            f'          {self._copy_binding(anchor)}>\n'
            f'    <i class="{escape(cfg.icon_class)}" aria-hidden="true"></i>\n'
            f'  </button>\n'
            f'</h{level}>'
        )

    def _copy_binding(self, anchor: str) -> str:
        handler = self.config.copy_handler
        if self.config.copy_mode == "inline":
            call = f"{handler}({_js_string(anchor)})"
            return f'onclick="{escape(call)}"'
        return f'data-anchor="{escape(anchor)}" data-copy-handler="{escape(handler)}"'
