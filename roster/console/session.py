"""
Interactive menu session.

Turns menu choices into repository operations. Every action catches the
Roster errors it can trigger, reports them on one line and returns to the
menu with all earlier state intact.
"""

from typing import Optional

from ..core.entities import Address, Course, HonorsStudent, Student
from ..core.enums import MenuChoice, SearchMode, UpdateField
from ..core.exceptions import RosterError, ValidationError
from ..logging import get_logger
from ..persistence.repositories import StudentRepository
from .prompts import read_float, read_int, read_line, read_yes_no

logger = get_logger("console")

MENU = (
    "\n"
    "1) Add\n"
    "2) Add Honors\n"
    "3) Show All\n"
    "4) Search\n"
    "5) Update\n"
    "6) Delete\n"
    "7) Sort\n"
    "8) Exit"
)

UPDATE_MENU = "1) Name 2) Age 3) Roll 4) Address 5) Add course 6) Remove course: "


class RosterSession:
    """Menu loop over a single student repository."""

    def __init__(self, repository: Optional[StudentRepository] = None):
        self._repository = repository if repository is not None else StudentRepository()

    @property
    def repository(self) -> StudentRepository:
        return self._repository

    def run(self) -> None:
        """Show the menu and dispatch choices until Exit is picked."""
        while True:
            print(MENU)
            choice = read_int("Choice: ")

            if choice == MenuChoice.ADD:
                self.add_student(honors=False)
            elif choice == MenuChoice.ADD_HONORS:
                self.add_student(honors=True)
            elif choice == MenuChoice.SHOW_ALL:
                self.display_all()
            elif choice == MenuChoice.SEARCH:
                self.search()
            elif choice == MenuChoice.UPDATE:
                self.update()
            elif choice == MenuChoice.DELETE:
                self.remove()
            elif choice == MenuChoice.SORT:
                self.sort()
            elif choice == MenuChoice.EXIT:
                logger.info("Session ended with %d students", self._repository.count())
                break
            else:
                print("Invalid.")

    @staticmethod
    def _enter_address() -> Address:
        return Address(
            line1=read_line("Address line: "),
            city=read_line("City: "),
            state=read_line("State: "),
            zip=read_line("ZIP: "),
        )

    def add_student(self, honors: bool) -> Optional[Student]:
        """
        Collect a new student from the terminal and store it.

        Honors students always need an explicit roll; plain students get one
        from the repository's roll counter unless a manual roll is given.
        Nothing is stored if any field is rejected.
        """
        try:
            name = read_line("Enter name: ")
            age = read_int("Enter age: ")
            roll = read_int("Roll: ") if read_yes_no("Manual roll?") else None

            if honors:
                if roll is None:
                    roll = read_int("Enter roll: ")
                scholarship = read_float("Scholarship: ")
                student = HonorsStudent(name, age, roll, scholarship)
            else:
                student = Student(name, age, roll, counter=self._repository.roll_counter)

            if read_yes_no("Add address?"):
                student.set_address(self._enter_address())

            return self._repository.add(student)
        except RosterError as e:
            logger.info("Add rejected: %s", e.message)
            print(f"Error: {e.message}")
            return None

    def display_all(self) -> None:
        students = self._repository.all()
        if not students:
            print("No students.")
            return
        for student in students:
            print(student)

    def search(self) -> None:
        """Look up by roll (single match) or by name (all matches)."""
        mode = read_int("1) Roll 2) Name: ")
        if mode == SearchMode.BY_ROLL:
            student = self._repository.find_by_roll(read_int("Roll: "))
            if student is None:
                print("Not found.")
            else:
                print(student, end="")
        else:
            matches = self._repository.find_by_name(read_line("Name: "))
            if not matches:
                print("Not found.")
            for student in matches:
                print(student)

    def update(self) -> None:
        """Change one field of an existing student, then show the result."""
        student = self._repository.find_by_roll(read_int("Enter roll: "))
        if student is None:
            print("Not found.")
            return

        choice = read_int(UPDATE_MENU)
        try:
            if choice == UpdateField.NAME:
                student.set_name(read_line("New name: "))
            elif choice == UpdateField.AGE:
                student.set_age(read_int("New age: "))
            elif choice == UpdateField.ROLL:
                self._repository.change_roll(student.roll, read_int("New roll: "))
            elif choice == UpdateField.ADDRESS:
                student.set_address(self._enter_address())
            elif choice == UpdateField.ADD_COURSE:
                code = read_line("Course code: ")
                if not code:
                    raise ValidationError("Course code empty", field="code")
                student.add_course(Course(code, read_line("Course title: ")))
            elif choice == UpdateField.REMOVE_COURSE:
                if not student.remove_course_by_code(read_line("Course code: ")):
                    print("Course not found.")
            else:
                print("Invalid.")
            print(student, end="")
        except RosterError as e:
            logger.info("Update of roll %s rejected: %s", student.roll, e.message)
            print(f"Error: {e.message}")

    def remove(self) -> None:
        if self._repository.remove_by_roll(read_int("Roll to delete: ")):
            print("Deleted.")
        else:
            print("Not found.")

    def sort(self) -> None:
        self._repository.sort_by_roll()
        print("Sorted.")
