"""Abstract repository interface for lessons."""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List

from solid_examples.domain.lessons.models import Lesson


class LessonRepository(ABC):

    @abstractmethod
    def get_all(self) -> List[Lesson]:
        """
        Return every lesson as a plain list, in insertion order.

        Each call returns a new list; implementations must not hand out
        wrapped or lazily evaluated collections.
        """
        ...
