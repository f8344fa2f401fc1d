"""Base domain entities - foundation for all domain objects."""
from typing import TypeVar
from abc import ABC
from pydantic import BaseModel, ConfigDict

T = TypeVar('T', bound='Entity')

class Entity(BaseModel, ABC):
    """
    Base class for all domain entities.

    Entities in this domain are immutable once constructed: any change
    produces a new instance. Equality is by value.
    """
    model_config = ConfigDict(
        frozen=True,
        extra='forbid',
        arbitrary_types_allowed=True
    )

    def copy_entity(self: T) -> T:
        """Return an independently owned copy with identical values."""
        return self.model_copy(deep=True)
