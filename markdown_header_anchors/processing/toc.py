"""Table-of-contents formatting and export helpers."""

from dataclasses import asdict
from typing import Any, Dict, List, Optional

from ..core.models import TocEntry


def format_toc_markdown(entries: List[TocEntry],
                        indent: str = "  ",
                        max_level: Optional[int] = None) -> str:
    """
    Render TOC entries as a nested markdown bullet list.
    
    Indentation is relative to the shallowest level present, so a document
    starting at "##" still produces top-level bullets.
    
    Args:
        entries: Entries from generate_table_of_contents
        indent: Indentation unit per nesting level
        max_level: Drop entries deeper than this level
        
    Returns:
        Markdown list, one line per entry, newline terminated
    """
    selected = [e for e in entries if max_level is None or e.level <= max_level]
    if not selected:
        return ""
    
    base_level = min(e.level for e in selected)
    lines = []
    for entry in selected:
        depth = entry.level - base_level
        lines.append(f"{indent * depth}- [{entry.text}]({entry.anchor})")
    
    return "\n".join(lines) + "\n"


def toc_to_dicts(entries: List[TocEntry]) -> List[Dict[str, Any]]:
    """Convert TOC entries to plain dictionaries for JSON/YAML export."""
    return [asdict(entry) for entry in entries]
