"""Lesson repository serving a literal list, standing in for a lessons file."""
from __future__ import annotations
from typing import Iterable, List, Optional, Tuple

from solid_examples.domain.lessons.models import DEFAULT_LESSONS, Lesson
from solid_examples.persistence.interfaces.lesson_repository import LessonRepository


class FileLessonRepository(LessonRepository):

    def __init__(self, lessons: Optional[Iterable[Lesson]] = None):
        self._lessons: Tuple[Lesson, ...] = tuple(lessons) if lessons is not None else DEFAULT_LESSONS

    def get_all(self) -> List[Lesson]:
        return list(self._lessons)
