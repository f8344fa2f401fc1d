# src/application/student/service.py
from typing import Sequence

from src.domain.student.builder import BasicStudentBuilder
from src.domain.student.decorators import TutoringSupportDecorator
from src.domain.student.factory import StudentFactory
from src.domain.student.student import Student
from src.infrastructure.logging.logger import get_logger
from src.infrastructure.registry.university_registry import University


class StudentApplicationService:
    """Application service for student use cases.

    The factory and the university are injected; the service never reaches
    for the process-wide university on its own.
    """

    def __init__(self, student_factory: StudentFactory, university: University):
        self._factory = student_factory
        self._university = university
        self._logger = get_logger(__name__)

    def create_student(self, categories: Sequence[str], has_skip_level_test: bool) -> Student:
        """Create a student through the injected factory."""
        student = self._factory.create_student(categories, has_skip_level_test)
        self._logger.debug(
            "Created student",
            factory=type(self._factory).__name__,
            categories=list(student.get_categories()),
        )
        return student

    def build_student(self, categories: Sequence[str], has_skip_level_test: bool) -> Student:
        """Create a student through a fresh builder."""
        student = (
            BasicStudentBuilder()
            .set_categories(categories)
            .set_skip_level_test(has_skip_level_test)
            .build()
        )
        self._logger.debug("Built student", categories=list(student.get_categories()))
        return student

    def enhance_with_tutoring(self, student: Student) -> Student:
        """Wrap a student with tutoring support."""
        self._logger.debug("Enhancing student with tutoring support")
        return TutoringSupportDecorator(student)

    def enroll(self, student: Student) -> None:
        """Add a student to the university."""
        self._university.add_student(student)
        self._logger.info(f"Enrolled student, university now has {self._university.student_count()}")

    def student_count(self) -> int:
        return self._university.student_count()

    def can_take_course(self, student: Student, course_name: str) -> bool:
        result = student.can_take_course(course_name)
        self._logger.debug("Checked course eligibility", course=course_name, eligible=result)
        return result
