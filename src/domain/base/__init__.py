"""Base domain layer - shared kernel for all bounded contexts."""

from .entity import Entity

__all__ = [
    "Entity",
]
