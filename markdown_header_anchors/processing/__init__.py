"""Heading processing: detection, slugs and table of contents."""

from .header_processor import (
    HeaderProcessor,
    HEADING_PATTERN,
    generate_table_of_contents,
    process_headers
)
from .slugs import SlugRegistry, generate_slug, DEFAULT_FALLBACK_SLUG
from .toc import format_toc_markdown, toc_to_dicts

__all__ = [
    'HeaderProcessor',
    'HEADING_PATTERN',
    'generate_table_of_contents',
    'process_headers',
    'SlugRegistry',
    'generate_slug',
    'DEFAULT_FALLBACK_SLUG',
    'format_toc_markdown',
    'toc_to_dicts'
]
