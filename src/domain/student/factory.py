"""Student factories - construct base students from raw attributes."""
from abc import ABC, abstractmethod
from typing import Sequence

from src.domain.student.student import BasicStudent, Student


class StudentFactory(ABC):
    """Interface for student factories."""

    @abstractmethod
    def create_student(self, categories: Sequence[str], has_skip_level_test: bool) -> Student:
        """Create a student with the given attributes."""
        pass


class BasicStudentFactory(StudentFactory):
    """Factory producing ``BasicStudent`` instances."""

    def create_student(self, categories: Sequence[str], has_skip_level_test: bool) -> Student:
        """
        Create a basic student.

        Args:
            categories: Category names, kept verbatim and in order (may be empty)
            has_skip_level_test: Whether the student has taken a skip-level test

        Returns:
            A new BasicStudent
        """
        return BasicStudent(
            categories=tuple(categories),
            test_to_skip_levels=has_skip_level_test
        )
