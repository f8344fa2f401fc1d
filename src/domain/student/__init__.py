"""Student bounded context - student model and its composition rules."""

from .builder import BasicStudentBuilder
from .decorators import StudentDecorator, TutoringSupportDecorator
from .factory import BasicStudentFactory, StudentFactory
from .student import BasicStudent, Student

__all__: list[str] = [
    "Student",
    "BasicStudent",
    "StudentDecorator",
    "TutoringSupportDecorator",
    "StudentFactory",
    "BasicStudentFactory",
    "BasicStudentBuilder",
]
