"""
Domain Layer - DDD Compliant Bounded Contexts

This domain layer is organized by bounded contexts:
- base/: Shared kernel with base classes
- core/: Cross-cutting domain exceptions
- student/: Student bounded context

The student context contains:
- student.py: Student contract and the basic student entity
- decorators.py: Decorators layering behaviour onto a student
- factory.py: Student factories
- builder.py: Student builder
"""

from .base import Entity
from .core.exceptions import ConfigurationError, DomainException
from .student import (
    BasicStudent,
    BasicStudentBuilder,
    BasicStudentFactory,
    Student,
    StudentDecorator,
    StudentFactory,
    TutoringSupportDecorator,
)

__all__ = [
    # Base primitives
    "Entity",
    "DomainException",
    "ConfigurationError",
    # Student context
    "Student",
    "BasicStudent",
    "StudentDecorator",
    "TutoringSupportDecorator",
    "StudentFactory",
    "BasicStudentFactory",
    "BasicStudentBuilder",
]
