"""
Tests for the student record model.

These tests verify:
1. Construction-time validation of name, age, roll and scholarship
2. Setters re-validate and never leave a half-updated record
3. Course set semantics (unique by code)
4. Rendering and serialization of both record types
"""

import io
import math

import pytest

from roster.core.entities import Address, Course, HonorsStudent, Person, Student
from roster.core.exceptions import RosterError, ValidationError
from roster.core.roll_counter import RollCounter


# =============================================================================
# CONSTRUCTION
# =============================================================================

class TestConstruction:
    """Test validated construction."""

    @pytest.mark.parametrize("name,age", [("Ann", 0), ("Bo", 20), ("Cy", 130), ("x", 65)])
    def test_valid_values_are_kept(self, name, age):
        """Accessors return exactly what was supplied."""
        student = Student(name, age, 1)

        assert student.name == name
        assert student.age == age
        assert student.roll == 1

    @pytest.mark.parametrize("age", [-1, 131, 1000, -130])
    def test_age_out_of_range_is_rejected(self, age):
        with pytest.raises(ValidationError) as exc_info:
            Student("Ann", age, 1)

        assert exc_info.value.message == "Invalid age."
        assert exc_info.value.field == "age"

    @pytest.mark.parametrize("age", ["20", 20.0, True, None])
    def test_non_integer_age_is_rejected(self, age):
        with pytest.raises(ValidationError):
            Student("Ann", age, 1)

    def test_empty_name_is_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Student("", 20, 1)

        assert exc_info.value.message == "Name empty"

    @pytest.mark.parametrize("roll", [0, -1, -1000])
    def test_non_positive_roll_is_rejected(self, roll):
        with pytest.raises(ValidationError) as exc_info:
            Student("Ann", 20, roll)

        assert exc_info.value.message == "Invalid roll"

    def test_validation_error_is_a_roster_error(self):
        with pytest.raises(RosterError):
            Student("", 20, 1)

    def test_person_is_abstract(self):
        with pytest.raises(TypeError):
            Person("Ann", 20)

    def test_new_student_has_no_address_or_courses(self):
        student = Student("Ann", 20, 1)

        assert student.address == Address()
        assert student.address.is_empty()
        assert student.courses == ()


class TestAutoRoll:
    """Test roll assignment from a RollCounter."""

    def test_first_auto_rolls_follow_seed(self):
        """With seed 1000 the first two auto rolls are 1001 and 1002."""
        counter = RollCounter()

        first = Student("Ann", 20, counter=counter)
        second = Student("Bo", 21, counter=counter)

        assert first.roll == 1001
        assert second.roll == 1002

    def test_custom_seed(self):
        counter = RollCounter(seed=50)

        assert Student("Ann", 20, counter=counter).roll == 51

    def test_explicit_roll_does_not_advance_counter(self):
        counter = RollCounter()

        Student("Ann", 20, 7, counter=counter)

        assert counter.current == 1000
        assert Student("Bo", 20, counter=counter).roll == 1001

    def test_rejected_construction_does_not_consume_a_roll(self):
        counter = RollCounter()

        with pytest.raises(ValidationError):
            Student("", 20, counter=counter)
        with pytest.raises(ValidationError):
            Student("Ann", 200, counter=counter)

        assert counter.current == 1000

    def test_missing_roll_and_counter_is_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Student("Ann", 20)

        assert exc_info.value.message == "Roll required"

    @pytest.mark.parametrize("seed", [-1, "1000", 1.5])
    def test_bad_seed_is_rejected(self, seed):
        with pytest.raises(ValueError):
            RollCounter(seed)


class TestHonorsStudent:
    """Test the honors specialization."""

    def test_scholarship_is_kept(self):
        honors = HonorsStudent("Bo", 22, 5, 1500.5)

        assert honors.scholarship == 1500.5
        assert honors.roll == 5

    def test_zero_scholarship_is_allowed(self):
        assert HonorsStudent("Bo", 22, 5, 0).scholarship == 0.0

    @pytest.mark.parametrize("amount", [-0.01, -100, math.nan, math.inf, "100"])
    def test_bad_scholarship_is_rejected(self, amount):
        with pytest.raises(ValidationError) as exc_info:
            HonorsStudent("Bo", 22, 5, amount)

        assert exc_info.value.message == "Invalid scholarship"

    def test_base_rules_still_apply(self):
        with pytest.raises(ValidationError):
            HonorsStudent("", 22, 5, 10.0)
        with pytest.raises(ValidationError):
            HonorsStudent("Bo", 22, 0, 10.0)

    def test_is_a_student(self):
        assert isinstance(HonorsStudent("Bo", 22, 5, 10.0), Student)

    def test_cannot_be_subclassed(self):
        with pytest.raises(TypeError):
            class TopHonorsStudent(HonorsStudent):
                pass

    def test_set_scholarship_revalidates(self):
        honors = HonorsStudent("Bo", 22, 5, 10.0)

        with pytest.raises(ValidationError):
            honors.set_scholarship(-1)
        assert honors.scholarship == 10.0

        honors.set_scholarship(20)
        assert honors.scholarship == 20.0


# =============================================================================
# MUTATION
# =============================================================================

class TestSetters:
    """Test setters re-validate and leave other fields untouched."""

    def test_set_name(self):
        student = Student("Ann", 20, 1)

        student.set_name("Annie")

        assert (student.name, student.age, student.roll) == ("Annie", 20, 1)

    def test_set_empty_name_keeps_old_name(self):
        student = Student("Ann", 20, 1)

        with pytest.raises(ValidationError) as exc_info:
            student.set_name("")

        assert student.name == "Ann"
        assert exc_info.value.message == "Empty name"

    def test_set_age(self):
        student = Student("Ann", 20, 1)

        student.set_age(130)

        assert (student.name, student.age, student.roll) == ("Ann", 130, 1)

    def test_set_bad_age_keeps_old_age(self):
        student = Student("Ann", 20, 1)

        with pytest.raises(ValidationError):
            student.set_age(131)

        assert student.age == 20

    def test_set_roll(self):
        student = Student("Ann", 20, 1)

        student.set_roll(99)

        assert student.roll == 99

    def test_set_bad_roll_keeps_old_roll(self):
        student = Student("Ann", 20, 1)

        with pytest.raises(ValidationError):
            student.set_roll(0)

        assert student.roll == 1

    def test_set_address_replaces_wholesale(self):
        student = Student("Ann", 20, 1)
        student.set_address(Address("1 Main St", "Springfield", "IL", "62701"))

        student.set_address(Address(city="Leeds"))

        assert student.address == Address(city="Leeds")

    def test_set_address_none_clears(self):
        student = Student("Ann", 20, 1)
        student.set_address(Address("1 Main St"))

        student.set_address(None)

        assert student.address.is_empty()


class TestCourses:
    """Test the per-student course set."""

    def test_add_course(self):
        student = Student("Ann", 20, 1)

        student.add_course(Course("CS101", "Intro to CS"))

        assert student.courses == (Course("CS101", "Intro to CS"),)
        assert student.has_course("CS101")

    def test_add_course_is_idempotent_on_code(self):
        """Re-adding the same code is a silent no-op, even with a new title."""
        student = Student("Ann", 20, 1)

        student.add_course(Course("CS101", "Intro to CS"))
        student.add_course(Course("CS101", "Something else"))

        assert len(student.courses) == 1
        assert student.courses[0].title == "Intro to CS"

    def test_courses_keep_insertion_order(self):
        student = Student("Ann", 20, 1)

        for code in ("MA201", "CS101", "PH110"):
            student.add_course(Course(code))

        assert [c.code for c in student.courses] == ["MA201", "CS101", "PH110"]

    def test_remove_course_by_code(self):
        student = Student("Ann", 20, 1)
        student.add_course(Course("CS101"))
        student.add_course(Course("MA201"))

        assert student.remove_course_by_code("CS101") is True
        assert [c.code for c in student.courses] == ["MA201"]

    def test_remove_missing_course(self):
        student = Student("Ann", 20, 1)
        student.add_course(Course("CS101"))

        assert student.remove_course_by_code("XX000") is False
        assert len(student.courses) == 1

    def test_courses_view_cannot_mutate_student(self):
        student = Student("Ann", 20, 1)

        courses = student.courses

        assert isinstance(courses, tuple)

    def test_course_equality_is_keyed_on_code(self):
        assert Course("CS101", "A") == Course("CS101", "B")
        assert Course("CS101") != Course("CS102")


# =============================================================================
# PRESENTATION
# =============================================================================

class TestAddress:
    """Test single-line address formatting."""

    def test_full_address(self):
        address = Address("1 Main St", "Springfield", "IL", "62701")

        assert address.to_string() == "1 Main St, Springfield, IL (62701)"

    def test_empty_fields_are_omitted(self):
        assert Address("1 Main St", "", "IL", "").to_string() == "1 Main St, IL"
        assert Address(city="Leeds").to_string() == "Leeds"
        assert Address(zip="LS1").to_string() == "(LS1)"

    def test_empty_address(self):
        assert Address().to_string() == ""
        assert Address().is_empty()


class TestRoleAndRender:
    """Test polymorphic role labels and rendering."""

    def test_roles(self):
        assert Student("Ann", 20, 1).role() == "Student"
        assert HonorsStudent("Bo", 22, 5, 1.0).role() == "Honors Student"

    def test_render_minimal_student(self):
        sink = io.StringIO()

        Student("Ann", 20, 1001).render(sink)

        assert sink.getvalue() == (
            "[ Student ]\n"
            "Name: Ann\n"
            "Age: 20\n"
            "Roll No: 1001\n"
        )

    def test_render_with_address_and_courses(self):
        student = Student("Ann", 20, 1001)
        student.set_address(Address("1 Main St", "Springfield", "IL", "62701"))
        student.add_course(Course("CS101"))
        student.add_course(Course("MA201"))
        sink = io.StringIO()

        student.render(sink)

        assert sink.getvalue() == (
            "[ Student ]\n"
            "Name: Ann\n"
            "Age: 20\n"
            "Roll No: 1001\n"
            "Address: 1 Main St, Springfield, IL (62701)\n"
            "Courses: CS101, MA201\n"
        )

    def test_render_honors_appends_scholarship_last(self):
        honors = HonorsStudent("Bo", 22, 5, 1500.5)
        honors.add_course(Course("CS101"))
        sink = io.StringIO()

        honors.render(sink)

        assert sink.getvalue() == (
            "[ Honors Student ]\n"
            "Name: Bo\n"
            "Age: 22\n"
            "Roll No: 5\n"
            "Courses: CS101\n"
            "Scholarship: 1500.50\n"
        )

    def test_str_matches_render(self):
        honors = HonorsStudent("Bo", 22, 5, 3.0)
        sink = io.StringIO()
        honors.render(sink)

        assert str(honors) == sink.getvalue()


class TestSerialize:
    """Test the compact export line."""

    def test_student(self):
        assert Student("Ann", 20, 1001).serialize() == "Student|1001|Ann|20"

    def test_honors_student(self):
        """Scholarship is always printed with two decimals."""
        assert HonorsStudent("Bo", 22, 5, 1500.5).serialize() == "Student|5|Bo|22|SCH:1500.50"

    def test_honors_student_whole_amount(self):
        assert HonorsStudent("Bo", 22, 5, 100).serialize() == "Student|5|Bo|22|SCH:100.00"

    def test_serialize_ignores_address_and_courses(self):
        student = Student("Ann", 20, 1)
        student.set_address(Address("1 Main St"))
        student.add_course(Course("CS101"))

        assert student.serialize() == "Student|1|Ann|20"


class TestToDict:
    """Test the dictionary form used for log context."""

    def test_student_dict(self):
        student = Student("Ann", 20, 1)
        student.add_course(Course("CS101", "Intro"))

        data = student.to_dict()

        assert data["role"] == "Student"
        assert data["roll"] == 1
        assert data["courses"] == [{"code": "CS101", "title": "Intro"}]
        assert data["address"] == {"line1": "", "city": "", "state": "", "zip": ""}

    def test_honors_dict(self):
        data = HonorsStudent("Bo", 22, 5, 2.5).to_dict()

        assert data["role"] == "Honors Student"
        assert data["scholarship"] == 2.5
