"""Student application services."""

from .service import StudentApplicationService

__all__ = ["StudentApplicationService"]
