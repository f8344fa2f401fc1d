# src/domain/core/exceptions.py
from typing import Any, Optional, List


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, details: Any = None, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.details = details
        self.missing_fields = missing_fields or []
