"""Slug generation and per-call uniqueness tracking."""

import re
from typing import Set

from ..core.interfaces import SlugRegistryInterface


DEFAULT_FALLBACK_SLUG = "header"

# Anything that is not a letter, digit, whitespace or hyphen (underscore included).
_DISALLOWED_CHARS = re.compile(r'[^\w\s-]|_')
_WHITESPACE_RUN = re.compile(r'\s+')
_HYPHEN_RUN = re.compile(r'-+')


def generate_slug(text: str, fallback: str = DEFAULT_FALLBACK_SLUG) -> str:
    """
    Generate a kebab-case slug from heading text.
    
    Args:
        text: Visible heading text
        fallback: Value returned when nothing usable is left
        
    Returns:
        Lower-case slug, never empty
    """
    slug = text.lower().strip()
    slug = _DISALLOWED_CHARS.sub('', slug)
    slug = _WHITESPACE_RUN.sub('-', slug)
    slug = _HYPHEN_RUN.sub('-', slug)
    slug = slug.strip('-')
    
    return slug or fallback


class SlugRegistry(SlugRegistryInterface):
    """Tracks slugs assigned during a single processing call."""
    
    def __init__(self):
        self._assigned: Set[str] = set()
    
    def __contains__(self, slug: str) -> bool:
        return slug in self._assigned
    
    def claim(self, candidate: str) -> str:
        """
        Claim the first free variant of candidate.
        
        Tries the candidate itself, then candidate-1, candidate-2, ...
        """
        unique = candidate
        counter = 1
        while unique in self._assigned:
            unique = f"{candidate}-{counter}"
            counter += 1
        
        self._assigned.add(unique)
        return unique
