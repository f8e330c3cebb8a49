"""
In-memory repository holding the authoritative collection of students.
"""

import threading
from typing import Iterator, List, Optional, Tuple

from ..core.entities import Student
from ..core.exceptions import DuplicateKeyError, RecordNotFoundError
from ..core.roll_counter import RollCounter
from ..logging import get_logger

logger = get_logger("repository")


class StudentRepository:
    """
    Ordered collection of students keyed by roll.

    This is the only place roll uniqueness is enforced: no two held
    students ever share a roll. Entries may be plain students or honors
    students; the repository does not care which.
    """

    def __init__(self, roll_counter: Optional[RollCounter] = None):
        self._students: List[Student] = []
        self._roll_counter = roll_counter or RollCounter()
        self._lock = threading.RLock()

    @property
    def roll_counter(self) -> RollCounter:
        """Counter used to auto-assign rolls to students created for this repository."""
        return self._roll_counter

    def add(self, student: Student) -> Student:
        """Take ownership of a student. Raises DuplicateKeyError on a roll collision."""
        with self._lock:
            if self.find_by_roll(student.roll) is not None:
                logger.info("Rejected %s: roll %s already taken", student.role(), student.roll)
                raise DuplicateKeyError(student.roll)
            self._students.append(student)
            logger.debug("Added %s with roll %s", student.role(), student.roll)
            return student

    def find_by_roll(self, roll: int) -> Optional[Student]:
        """Find the student holding a roll."""
        with self._lock:
            for student in self._students:
                if student.roll == roll:
                    return student
            return None

    def find_by_name(self, name: str) -> List[Student]:
        """All students with exactly this name, in collection order."""
        with self._lock:
            return [student for student in self._students if student.name == name]

    def remove_by_roll(self, roll: int) -> bool:
        """Remove the student with this roll. Returns False if none was held."""
        with self._lock:
            kept = [student for student in self._students if student.roll != roll]
            removed = len(kept) != len(self._students)
            self._students = kept
            if removed:
                logger.info("Removed student with roll %s", roll)
            return removed

    def change_roll(self, roll: int, new_roll: int) -> Student:
        """
        Give a held student a new roll without breaking uniqueness.

        Raises RecordNotFoundError if nobody holds ``roll``, DuplicateKeyError
        if another student already holds ``new_roll`` and ValidationError if
        ``new_roll`` is not a positive integer.
        """
        with self._lock:
            student = self.find_by_roll(roll)
            if student is None:
                raise RecordNotFoundError(roll)
            if new_roll != roll and self.find_by_roll(new_roll) is not None:
                logger.info("Rejected roll change %s -> %s: roll already taken", roll, new_roll)
                raise DuplicateKeyError(new_roll)
            student.set_roll(new_roll)
            logger.debug("Changed roll %s -> %s", roll, new_roll)
            return student

    def sort_by_roll(self) -> None:
        """Stable ascending sort by roll, in place."""
        with self._lock:
            self._students.sort(key=lambda student: student.roll)
            logger.debug("Sorted %d students by roll", len(self._students))

    def all(self) -> Tuple[Student, ...]:
        """
        Read-only snapshot of the collection in its current order.

        The tuple cannot be used to add or drop students. Its entries are the
        held students themselves; change their roll with ``change_roll``.
        """
        with self._lock:
            return tuple(self._students)

    def count(self) -> int:
        """Number of students held."""
        with self._lock:
            return len(self._students)

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator[Student]:
        return iter(self.all())
