"""
Core module containing the student record model and its error types.
"""

from .entities import Address, Course, Person, Student, HonorsStudent
from .enums import PersonRole, MenuChoice, SearchMode, UpdateField
from .exceptions import (
    RosterError,
    ValidationError,
    DuplicateKeyError,
    RecordNotFoundError,
    ConfigurationError,
)
from .interfaces import Serializable, Renderable, TextSink
from .roll_counter import RollCounter

__all__ = [
    # Entities
    "Address",
    "Course",
    "Person",
    "Student",
    "HonorsStudent",
    "RollCounter",
    
    # Interfaces
    "Serializable",
    "Renderable",
    "TextSink",
    
    # Enums
    "PersonRole",
    "MenuChoice",
    "SearchMode",
    "UpdateField",
    
    # Exceptions
    "RosterError",
    "ValidationError",
    "DuplicateKeyError",
    "RecordNotFoundError",
    "ConfigurationError",
]
