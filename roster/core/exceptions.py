"""
Custom exceptions for the Roster application.
"""

from typing import Optional, Any, Dict


class RosterError(Exception):
    """Base exception for all Roster-related errors."""
    
    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class ValidationError(RosterError):
    """Raised when a field value is malformed (name, age, roll, scholarship)."""
    
    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        super().__init__(message, error_code="validation", details={"field": field, "value": value})
        self.field = field


class DuplicateKeyError(RosterError):
    """Raised when a student with the same roll is already held."""
    
    def __init__(self, roll: int, message: str = "Duplicate roll"):
        super().__init__(message, error_code="duplicate_key", details={"roll": roll})
        self.roll = roll


class RecordNotFoundError(RosterError):
    """Raised when a requested student is not in the repository."""
    
    def __init__(self, roll: int, message: str = "Not found."):
        super().__init__(message, error_code="not_found", details={"roll": roll})
        self.roll = roll


class ConfigurationError(RosterError):
    """Raised when configuration is invalid."""
    pass
