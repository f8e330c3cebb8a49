"""
Persistence module holding the in-memory student store.
"""

from .repositories import StudentRepository

__all__ = [
    "StudentRepository",
]
