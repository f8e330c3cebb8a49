"""
Roster: an interactive console manager for student records.

Keeps an in-memory collection of students (and honors students with a
scholarship) and supports creation, lookup by roll or name, field updates,
deletion and sorting by roll.
"""

__version__ = "1.0.0"
__author__ = "Roster Development Team"
__description__ = "Interactive console manager for student records"
