"""Heading hook for markdown renderers that emit one heading at a time."""

import re
from typing import Optional, Tuple

from ..config.configuration_manager import MarkupConfig
from ..processing.slugs import DEFAULT_FALLBACK_SLUG, generate_slug
from .markup import AnchoredHeadingMarkup


EXPLICIT_ID_PATTERN = re.compile(r'^(.*?)\s*\{#([^\s}][^}]*)\}\s*$', re.DOTALL)


def split_explicit_id(text: str) -> Tuple[str, Optional[str]]:
    """Split "Heading {#custom-id}" into ("Heading", "custom-id")."""
    match = EXPLICIT_ID_PATTERN.match(text)
    if not match or not match.group(2).strip():
        return text.strip(), None
    return match.group(1).strip(), match.group(2).strip()


class MarkdownHeadingRenderer:
    """
    Renders a single heading for a markdown renderer callback.

    Unlike HeaderProcessor, nothing is tracked between calls: two headings
    with the same text get the same id.
    """

    def __init__(self,
                 markup_config: Optional[MarkupConfig] = None,
                 fallback_slug: str = DEFAULT_FALLBACK_SLUG):
        self.markup = AnchoredHeadingMarkup(markup_config)
        self.fallback_slug = fallback_slug

    def heading(self, text: str, level: int, raw: Optional[str] = None) -> str:
        """
        Render an anchored heading block.

        Args:
            text: Heading text, possibly ending with {#custom-id}
            level: Heading depth, 1-6
            raw: Unrendered heading source, unused but accepted for renderer compatibility

        Returns:
            Anchored heading markup
        """
        level = min(max(level, 1), 6)
        header_text, explicit_id = split_explicit_id(text)
        slug = explicit_id or generate_slug(header_text, self.fallback_slug)
        return self.markup.render(level, header_text, slug)
