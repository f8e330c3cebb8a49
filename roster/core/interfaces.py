"""
Core interfaces and abstract base classes for the Roster application.
"""

from abc import ABC, abstractmethod
from typing import Protocol


class TextSink(Protocol):
    """Anything rendered output can be written to (files, StringIO, sys.stdout)."""
    
    def write(self, text: str) -> int:
        ...


class Serializable(ABC):
    """Interface for entities with a compact one-line representation."""
    
    @abstractmethod
    def serialize(self) -> str:
        """Return the delimiter-joined export line."""
        pass


class Renderable(ABC):
    """Interface for entities that print a human-readable block."""
    
    @abstractmethod
    def role(self) -> str:
        """Get the role label of this entity."""
        pass
    
    @abstractmethod
    def render(self, sink: TextSink) -> None:
        """Write a multi-line description to the sink."""
        pass
