"""Infrastructure registry patterns."""

from .university_registry import University, get_university

__all__ = [
    'University',
    'get_university'
]
