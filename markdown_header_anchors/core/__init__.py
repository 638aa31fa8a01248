"""Core components and data models for Markdown Header Anchors."""

from .models import (
    HeadingRecord,
    TocEntry,
    ProcessResult
)

from .interfaces import (
    HeadingMarkupInterface,
    SlugRegistryInterface
)

__all__ = [
    "HeadingRecord",
    "TocEntry",
    "ProcessResult",
    "HeadingMarkupInterface",
    "SlugRegistryInterface"
]
