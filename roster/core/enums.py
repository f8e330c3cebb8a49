"""
Enumerations and constants for the Roster application.
"""

from enum import Enum, IntEnum


class PersonRole(Enum):
    """Role labels shown in rendered student blocks."""
    STUDENT = "Student"
    HONORS_STUDENT = "Honors Student"


class MenuChoice(IntEnum):
    """Main menu entries."""
    ADD = 1
    ADD_HONORS = 2
    SHOW_ALL = 3
    SEARCH = 4
    UPDATE = 5
    DELETE = 6
    SORT = 7
    EXIT = 8


class SearchMode(IntEnum):
    """Ways of looking a student up."""
    BY_ROLL = 1
    BY_NAME = 2


class UpdateField(IntEnum):
    """Fields that can be changed on an existing student."""
    NAME = 1
    AGE = 2
    ROLL = 3
    ADDRESS = 4
    ADD_COURSE = 5
    REMOVE_COURSE = 6


# Valid range for a person's age, inclusive on both ends.
MIN_AGE = 0
MAX_AGE = 130

# Auto-assigned rolls start right after this value.
DEFAULT_ROLL_SEED = 1000

# Field delimiter of the compact serialized form.
SERIAL_DELIMITER = "|"
