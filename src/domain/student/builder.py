"""Builder for basic students."""
from typing import List, Sequence

from src.domain.student.student import BasicStudent


class BasicStudentBuilder:
    """
    Mutable, chainable builder for ``BasicStudent``.

    Setters return the builder itself. ``build()`` does not reset the
    accumulated state, so it can be called repeatedly and each call yields
    an independent student reflecting the values set so far.
    """

    def __init__(self):
        self._categories: List[str] = []
        self._test_to_skip_levels = False

    def set_categories(self, categories: Sequence[str]) -> 'BasicStudentBuilder':
        self._categories = list(categories)
        return self

    def set_skip_level_test(self, test_to_skip_levels: bool) -> 'BasicStudentBuilder':
        self._test_to_skip_levels = test_to_skip_levels
        return self

    def build(self) -> BasicStudent:
        return BasicStudent(
            categories=tuple(self._categories),
            test_to_skip_levels=self._test_to_skip_levels
        )
