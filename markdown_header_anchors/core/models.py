"""Core data models for Markdown Header Anchors."""

from dataclasses import dataclass
from typing import List, NamedTuple


@dataclass(frozen=True)
class HeadingRecord:
    """Represents one markdown heading detected during a processing call."""
    level: int
    text: str
    slug: str
    original_text: str

    @property
    def anchor(self) -> str:
        return f"#{self.slug}"


@dataclass(frozen=True)
class TocEntry:
    """Read-only table-of-contents projection of a HeadingRecord."""
    level: int
    text: str
    slug: str
    anchor: str

    @classmethod
    def from_heading(cls, heading: HeadingRecord) -> "TocEntry":
        return cls(
            level=heading.level,
            text=heading.text,
            slug=heading.slug,
            anchor=f"#{heading.slug}"
        )


class ProcessResult(NamedTuple):
    """Processed content together with the headings found in it."""
    processed_content: str
    headers: List[HeadingRecord]
