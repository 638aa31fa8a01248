"""
Markdown Header Anchors

Detects markdown headings, assigns each a unique anchor slug, injects
copy-link heading markup and derives a table of contents.
"""

__version__ = "0.1.0"
__author__ = "Markdown Header Anchors Team"

from .core.models import (
    HeadingRecord,
    TocEntry,
    ProcessResult
)
from .processing.header_processor import (
    HeaderProcessor,
    generate_table_of_contents,
    process_headers
)
from .processing.slugs import generate_slug
from .processing.toc import format_toc_markdown

__all__ = [
    "HeadingRecord",
    "TocEntry",
    "ProcessResult",
    "HeaderProcessor",
    "generate_table_of_contents",
    "process_headers",
    "generate_slug",
    "format_toc_markdown"
]
