"""Lesson repository that loads through an ORM-style collection object."""
from __future__ import annotations
from typing import Iterable, Iterator, List, Optional, Tuple

from solid_examples.domain.lessons.models import DEFAULT_LESSONS, Lesson
from solid_examples.persistence.interfaces.lesson_repository import LessonRepository


class LessonCollection:
    """Minimal stand-in for an ORM result collection."""

    def __init__(self, items: Iterable[Lesson]):
        self._items = list(items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Lesson]:
        return iter(self._items)

    def to_list(self) -> List[Lesson]:
        return list(self._items)


class OrmLessonRepository(LessonRepository):

    def __init__(self, lessons: Optional[Iterable[Lesson]] = None):
        self._rows: Tuple[Lesson, ...] = tuple(lessons) if lessons is not None else DEFAULT_LESSONS

    def _query(self) -> LessonCollection:
        return LessonCollection(self._rows)

    def get_all(self) -> List[Lesson]:
        # Callers get the same plain list every other repository returns,
        # never the collection itself.
        return self._query().to_list()
