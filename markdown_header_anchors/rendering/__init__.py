"""Anchored heading markup builders."""

from .markup import AnchoredHeadingMarkup
from .markdown_renderer import MarkdownHeadingRenderer, split_explicit_id

__all__ = [
    "AnchoredHeadingMarkup",
    "MarkdownHeadingRenderer",
    "split_explicit_id"
]
