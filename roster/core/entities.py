"""
Core entities for the Roster application.

Person is the abstract root; Student and its final specialization
HonorsStudent are the only concrete record types. Address and Course are
immutable value objects owned by the student holding them.
"""

import io
import math
from abc import abstractmethod
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Tuple, final

from .enums import MAX_AGE, MIN_AGE, SERIAL_DELIMITER, PersonRole
from .exceptions import ValidationError
from .interfaces import Renderable, Serializable, TextSink
from .roll_counter import RollCounter


def _check_name(name: Any, message: str = "Name empty") -> str:
    if not isinstance(name, str) or not name:
        raise ValidationError(message, field="name", value=name)
    return name


def _check_age(age: Any) -> int:
    if isinstance(age, bool) or not isinstance(age, int) or not MIN_AGE <= age <= MAX_AGE:
        raise ValidationError("Invalid age.", field="age", value=age)
    return age


def _check_roll(roll: Any) -> int:
    if isinstance(roll, bool) or not isinstance(roll, int) or roll <= 0:
        raise ValidationError("Invalid roll", field="roll", value=roll)
    return roll


def _check_scholarship(amount: Any) -> float:
    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        raise ValidationError("Invalid scholarship", field="scholarship", value=amount)
    # NaN fails the comparison as well
    if not amount >= 0 or math.isinf(amount):
        raise ValidationError("Invalid scholarship", field="scholarship", value=amount)
    return float(amount)


@dataclass(frozen=True)
class Address:
    """Postal address. Every field is optional free text."""
    line1: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""

    def to_string(self) -> str:
        """Single-line form, e.g. ``12 High St, Leeds, WY (LS1)``."""
        text = ", ".join(part for part in (self.line1, self.city, self.state) if part)
        if self.zip:
            text = f"{text} ({self.zip})" if text else f"({self.zip})"
        return text

    def is_empty(self) -> bool:
        return not self.to_string()


@dataclass(frozen=True)
class Course:
    """A course a student takes. Two courses are equal when their codes are."""
    code: str
    title: str = field(default="", compare=False)


class Person(Renderable, Serializable):
    """Abstract base class for all persons in the system."""

    def __init__(self, name: str, age: int):
        self._name = _check_name(name)
        self._age = _check_age(age)

    @property
    def name(self) -> str:
        return self._name

    @property
    def age(self) -> int:
        return self._age

    def set_name(self, name: str) -> None:
        """Rename the person; the name must not be empty."""
        self._name = _check_name(name, message="Empty name")

    def set_age(self, age: int) -> None:
        """Change the age; must stay within 0..130."""
        self._age = _check_age(age)

    @abstractmethod
    def role(self) -> str:
        pass

    def render(self, sink: TextSink) -> None:
        sink.write(f"Name: {self._name}\n")
        sink.write(f"Age: {self._age}\n")

    def to_dict(self) -> Dict[str, Any]:
        """Convert person to dictionary."""
        return {
            'role': self.role(),
            'name': self._name,
            'age': self._age,
        }

    def __str__(self) -> str:
        buffer = io.StringIO()
        self.render(buffer)
        return buffer.getvalue()


class Student(Person):
    """
    Student record identified by a roll number.

    The roll is either given explicitly or drawn from ``counter`` when
    omitted. Uniqueness of the roll is the repository's concern, not the
    entity's.
    """

    def __init__(self, name: str, age: int, roll: Optional[int] = None,
                 counter: Optional[RollCounter] = None):
        super().__init__(name, age)
        if roll is None:
            if counter is None:
                raise ValidationError("Roll required", field="roll")
            roll = counter.next_roll()
        self._roll = _check_roll(roll)
        self._address = Address()
        self._courses: List[Course] = []

    @property
    def roll(self) -> int:
        return self._roll

    @property
    def address(self) -> Address:
        return self._address

    @property
    def courses(self) -> Tuple[Course, ...]:
        return tuple(self._courses)

    def set_roll(self, roll: int) -> None:
        """
        Change the roll number. Does not check uniqueness.

        A student held by a StudentRepository must be re-rolled through
        ``StudentRepository.change_roll`` instead, which rejects a roll that
        another held student already has.
        """
        self._roll = _check_roll(roll)

    def set_address(self, address: Optional[Address]) -> None:
        """Replace the address wholesale; ``None`` clears it."""
        self._address = address if address is not None else Address()

    def add_course(self, course: Course) -> None:
        """Add a course unless one with the same code is already listed."""
        if any(existing.code == course.code for existing in self._courses):
            return
        self._courses.append(course)

    def remove_course_by_code(self, code: str) -> bool:
        """Drop every course with this code. Returns True if any was removed."""
        kept = [course for course in self._courses if course.code != code]
        removed = len(kept) != len(self._courses)
        self._courses = kept
        return removed

    def has_course(self, code: str) -> bool:
        return any(course.code == code for course in self._courses)

    def role(self) -> str:
        return PersonRole.STUDENT.value

    def render(self, sink: TextSink) -> None:
        sink.write(f"[ {self.role()} ]\n")
        super().render(sink)
        sink.write(f"Roll No: {self._roll}\n")
        if not self._address.is_empty():
            sink.write(f"Address: {self._address.to_string()}\n")
        if self._courses:
            sink.write("Courses: " + ", ".join(course.code for course in self._courses) + "\n")

    def serialize(self) -> str:
        return SERIAL_DELIMITER.join(
            [PersonRole.STUDENT.value, str(self._roll), self._name, str(self._age)]
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert student to dictionary."""
        base_dict = super().to_dict()
        base_dict.update({
            'roll': self._roll,
            'address': asdict(self._address),
            'courses': [asdict(course) for course in self._courses],
        })
        return base_dict

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(roll={self._roll}, name={self._name!r}, age={self._age})"


@final
class HonorsStudent(Student):
    """Student carrying a non-negative scholarship amount. Cannot be subclassed."""

    def __init__(self, name: str, age: int, roll: int, scholarship: float):
        super().__init__(name, age, roll)
        self._scholarship = _check_scholarship(scholarship)

    def __init_subclass__(cls, **kwargs):
        raise TypeError("HonorsStudent cannot be subclassed")

    @property
    def scholarship(self) -> float:
        return self._scholarship

    def set_scholarship(self, amount: float) -> None:
        """Change the scholarship amount; must not be negative."""
        self._scholarship = _check_scholarship(amount)

    def role(self) -> str:
        return PersonRole.HONORS_STUDENT.value

    def render(self, sink: TextSink) -> None:
        super().render(sink)
        sink.write(f"Scholarship: {self._scholarship:.2f}\n")

    def serialize(self) -> str:
        return super().serialize() + f"{SERIAL_DELIMITER}SCH:{self._scholarship:.2f}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert honors student to dictionary."""
        base_dict = super().to_dict()
        base_dict['scholarship'] = self._scholarship
        return base_dict
