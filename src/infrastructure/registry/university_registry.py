"""University registry - the process-wide collection of known students.

The university keeps students in insertion order without deduplication.
There is no removal: the collection only grows.
"""

from typing import List

from src.domain.student.student import Student
from src.infrastructure.logging.logger import get_logger
from src.infrastructure.patterns.singleton_access import get_singleton


class University:
    """In-memory registry of students."""

    def __init__(self):
        self._students: List[Student] = []
        self.logger = get_logger(__name__)

    def add_student(self, student: Student) -> None:
        """Append a student. No duplicate check, no capacity limit."""
        self._students.append(student)
        self.logger.debug("Student added to university", student_count=len(self._students))

    def get_students(self) -> List[Student]:
        """Return a snapshot of the current students in insertion order."""
        return list(self._students)

    def student_count(self) -> int:
        return len(self._students)

    def __repr__(self) -> str:
        return f"University(students={len(self._students)})"


def get_university() -> University:
    """Get the process-wide university, creating it on first access."""
    return get_singleton(University)
