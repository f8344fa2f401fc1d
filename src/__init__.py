"""University Patterns - Root Package.

This package demonstrates four object-oriented design patterns (factory,
decorator, builder and singleton) on a small student/university model.

Key Components:
    - domain: Student contract, decorators, factory and builder
    - application: Student application service
    - infrastructure: Logging, singleton support and the university registry
    - config: Typed configuration
    - cli: Console entry point

Architecture:
    The system follows Clean Architecture principles with clear separation
    between domain logic, application services, and infrastructure concerns.
"""

from ._package import PACKAGE_NAME, __version__

__package_name__ = PACKAGE_NAME

"""
Usage:
    >>> university-demo
    Factory Pattern: Created a BasicStudent using BasicStudentFactory.
    ...
"""
