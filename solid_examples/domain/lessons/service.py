"""Lesson consumers. They accept any LessonRepository and never check its type."""
from __future__ import annotations
from typing import List

from solid_examples.persistence.interfaces.lesson_repository import LessonRepository


def describe_lessons(repo: LessonRepository) -> List[str]:
    lessons = repo.get_all()
    lines = [f"Found {len(lessons)} lessons:"]
    lines.extend(f"- {lesson.title} ({lesson.duration} min)" for lesson in lessons)
    return lines


def calculate_total_duration(repo: LessonRepository) -> int:
    return sum(lesson.duration for lesson in repo.get_all())
