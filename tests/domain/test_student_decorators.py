"""Tests for student decorators."""
from unittest.mock import Mock

import pytest

from src.domain.student.decorators import StudentDecorator, TutoringSupportDecorator
from src.domain.student.student import BasicStudent, Student


class RestrictedStudent(BasicStudent):
    """Student refusing every course, to show overrides ignore the delegate."""

    def can_take_course(self, course_name: str) -> bool:
        return False


class TestStudentDecorator:
    """Test default delegation of the base decorator."""

    def setup_method(self):
        """Set up test fixtures."""
        self.wrapped = Mock(spec=Student)
        self.wrapped.can_take_course.return_value = False
        self.wrapped.has_skip_level_test.return_value = True
        self.wrapped.get_categories.return_value = ("Math",)
        self.decorator = StudentDecorator(self.wrapped)

    def test_delegates_every_operation(self):
        assert self.decorator.can_take_course("Algebra") is False
        self.wrapped.can_take_course.assert_called_once_with("Algebra")

        assert self.decorator.has_skip_level_test() is True
        assert self.decorator.get_categories() == ("Math",)

    def test_clone_delegates_to_wrapped(self):
        self.wrapped.clone.return_value = "cloned"

        assert self.decorator.clone() == "cloned"
        self.wrapped.clone.assert_called_once_with()

    def test_wrapped_is_read_only(self):
        assert self.decorator.wrapped is self.wrapped

        with pytest.raises(AttributeError):
            self.decorator.wrapped = Mock(spec=Student)

    def test_decorator_conforms_to_student_contract(self):
        assert isinstance(self.decorator, Student)


class TestTutoringSupportDecorator:
    """Test the tutoring support enhancement."""

    def setup_method(self):
        """Set up test fixtures."""
        self.student = RestrictedStudent(categories=["Math", "Physics"], test_to_skip_levels=True)
        self.tutored = TutoringSupportDecorator(self.student)

    @pytest.mark.parametrize("course_name", ["Advanced Quantum Mechanics", "", "Anything"])
    def test_can_take_any_course(self, course_name):
        assert self.student.can_take_course(course_name) is False
        assert self.tutored.can_take_course(course_name) is True

    def test_unoverridden_operations_pass_through(self):
        assert self.tutored.get_categories() == self.student.get_categories()
        assert self.tutored.has_skip_level_test() == self.student.has_skip_level_test()

    def test_wrapping_does_not_mutate_wrapped(self):
        before = self.student.model_dump()

        self.tutored.can_take_course("Physics")
        self.tutored.clone()

        assert self.student.model_dump() == before
        assert self.student.can_take_course("Physics") is False

    def test_clone_drops_decoration(self):
        clone = self.tutored.clone()

        assert not isinstance(clone, StudentDecorator)
        assert isinstance(clone, RestrictedStudent)
        assert clone is not self.student
        assert clone.get_categories() == ("Math", "Physics")
        assert clone.can_take_course("Physics") is False

    def test_decorators_stack(self):
        double = StudentDecorator(self.tutored)

        assert double.wrapped is self.tutored
        assert double.can_take_course("Physics") is True
        assert double.get_categories() == ("Math", "Physics")
        assert isinstance(double.clone(), RestrictedStudent)

    def test_wrapped_student_may_be_shared(self):
        other = TutoringSupportDecorator(self.student)

        assert other.wrapped is self.tutored.wrapped
