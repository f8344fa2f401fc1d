"""Student capability contract and the concrete basic student.

A student exposes four read operations: cloning, course eligibility,
the skip-level test flag and its ordered category list. Every conformer
of ``Student`` (basic students and decorators alike) can be used
interchangeably by callers.
"""
from abc import ABC, abstractmethod
from typing import Tuple

from pydantic import Field

from src.domain.base.entity import Entity


class Student(ABC):
    """Interface every student variant must implement."""

    @abstractmethod
    def clone(self) -> "Student":
        """Return a new, independently owned copy of this student."""

    @abstractmethod
    def can_take_course(self, course_name: str) -> bool:
        """Check whether the student is eligible for the given course."""

    @abstractmethod
    def has_skip_level_test(self) -> bool:
        """Return whether the student has taken a skip-level test."""

    @abstractmethod
    def get_categories(self) -> Tuple[str, ...]:
        """Return the student's categories in insertion order."""


class BasicStudent(Entity, Student):
    """Concrete student holding the actual category and skip-level data.

    Instances are frozen. Categories are stored as a tuple so the
    sequence handed out by ``get_categories`` cannot be used to mutate
    the student.
    """

    categories: Tuple[str, ...] = Field(default_factory=tuple)
    test_to_skip_levels: bool = False

    def clone(self) -> "BasicStudent":
        return self.copy_entity()

    def can_take_course(self, course_name: str) -> bool:
        # Placeholder policy: no eligibility rule is evaluated.
        return True

    def has_skip_level_test(self) -> bool:
        return self.test_to_skip_levels

    def get_categories(self) -> Tuple[str, ...]:
        return self.categories
