"""Heading detection, slug assignment and anchor markup injection."""

import logging
import re
from typing import List, Optional

from ..core.models import HeadingRecord, TocEntry, ProcessResult
from ..core.interfaces import HeadingMarkupInterface
from ..config.configuration_manager import ProcessorConfig
from ..rendering.markup import AnchoredHeadingMarkup
from .slugs import SlugRegistry, generate_slug


logger = logging.getLogger(__name__)


# 1-6 hashes, horizontal whitespace, heading text and an optional trailing
# {#custom-id}. A trailing \r is left in place so CRLF input round-trips.
HEADING_PATTERN = re.compile(
    r'^(?P<hashes>#{1,6})[^\S\r\n]+'
    r'(?P<text>[^\r\n]*?)'
    r'(?:[^\S\r\n]*\{#(?P<explicit_id>[^\s}][^}\r\n]*)\})?'
    r'[^\S\r\n]*(?=\r?$)',
    re.MULTILINE
)


class HeaderProcessor:
    """
    Rewrites markdown headings into anchored heading blocks.

    Each call to process() works on its own slug registry, so one processor
    instance can be shared between callers.
    """

    def __init__(self,
                 config: Optional[ProcessorConfig] = None,
                 markup: Optional[HeadingMarkupInterface] = None):
        """
        Initialize the header processor.

        Args:
            config: Processor settings (fallback slug, collision warnings)
            markup: Builder for the injected heading block
        """
        self.config = config or ProcessorConfig()
        self.markup = markup or AnchoredHeadingMarkup()

    def process(self, content: str) -> ProcessResult:
        """
        Detect headings, assign unique slugs and inject anchored markup.

        Args:
            content: Markdown text

        Returns:
            ProcessResult with the rewritten content and the headings in
            source order
        """
        if not content:
            return ProcessResult("", [])

        headers: List[HeadingRecord] = []
        registry = SlugRegistry()

        def replace(match: re.Match) -> str:
            level = len(match.group('hashes'))
            text = match.group('text').strip()
            explicit_id = (match.group('explicit_id') or '').strip()

            if explicit_id:
                slug = registry.claim(explicit_id)
                if slug != explicit_id and self.config.warn_on_explicit_id_collision:
                    logger.warning(
                        f"Explicit heading id '{explicit_id}' already in use, renumbered to '{slug}'"
                    )
            else:
                slug = registry.claim(generate_slug(text, self.config.fallback_slug))

            headers.append(HeadingRecord(
                level=level,
                text=text,
                slug=slug,
                original_text=match.group(0)
            ))
            return self.markup.render(level, text, slug)

        processed_content = HEADING_PATTERN.sub(replace, content)
        logger.debug(f"Processed {len(headers)} headings")

        return ProcessResult(processed_content, headers)

    def generate_table_of_contents(self, headers: List[HeadingRecord]) -> List[TocEntry]:
        """Project headings into table-of-contents entries."""
        return generate_table_of_contents(headers)


def generate_table_of_contents(headers: List[HeadingRecord]) -> List[TocEntry]:
    """
    Map each heading to a TocEntry, one to one and in the same order.

    Args:
        headers: Headings returned by HeaderProcessor.process

    Returns:
        Freshly built TocEntry list with anchor set to "#" + slug
    """
    return [TocEntry.from_heading(header) for header in headers]


def process_headers(content: str) -> ProcessResult:
    """Process content with a default-configured HeaderProcessor."""
    return HeaderProcessor().process(content)
