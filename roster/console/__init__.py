"""
Console front end: prompt helpers and the interactive menu session.
"""

from .prompts import read_line, read_int, read_float, read_yes_no
from .session import RosterSession

__all__ = [
    "RosterSession",
    "read_line",
    "read_int",
    "read_float",
    "read_yes_no",
]
