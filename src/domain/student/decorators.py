"""Student decorators - add or alter behaviour without touching the wrapped class."""
from typing import Tuple

from src.domain.student.student import Student


class StudentDecorator(Student):
    """
    Base decorator that forwards every operation to the wrapped student.

    Subclasses override a strict subset of the operations. The wrapped
    student is fixed at construction and is never mutated by the decorator;
    it may still be shared with other owners.

    Note:
        ``clone()`` delegates to the wrapped student and returns its clone.
        The decoration layer is not reproduced, so cloning a decorated
        student yields an undecorated copy.
    """

    def __init__(self, student: Student):
        self._student = student

    @property
    def wrapped(self) -> Student:
        """The student this decorator delegates to."""
        return self._student

    def clone(self) -> Student:
        return self._student.clone()

    def can_take_course(self, course_name: str) -> bool:
        return self._student.can_take_course(course_name)

    def has_skip_level_test(self) -> bool:
        return self._student.has_skip_level_test()

    def get_categories(self) -> Tuple[str, ...]:
        return self._student.get_categories()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._student!r})"


class TutoringSupportDecorator(StudentDecorator):
    """Tutoring support lets the student take any course."""

    def can_take_course(self, course_name: str) -> bool:
        return True
