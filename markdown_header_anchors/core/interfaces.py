"""Abstract interfaces for extensibility and dependency injection."""

from abc import ABC, abstractmethod


class HeadingMarkupInterface(ABC):
    """Abstract interface for anchored heading markup builders."""
    
    @abstractmethod
    def render(self, level: int, text: str, slug: str) -> str:
        """Render an anchored heading block for the given heading."""
        pass


class SlugRegistryInterface(ABC):
    """Abstract interface for per-call slug uniqueness tracking."""
    
    @abstractmethod
    def claim(self, candidate: str) -> str:
        """Return the first unused variant of candidate and mark it used."""
        pass
    
    @abstractmethod
    def __contains__(self, slug: str) -> bool:
        """Check whether a slug has already been assigned."""
        pass
