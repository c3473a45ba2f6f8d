"""Lesson domain models."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Lesson:
    id: int
    title: str
    duration: int  # minutes


DEFAULT_LESSONS: Tuple[Lesson, ...] = (
    Lesson(id=1, title="Introduction to PHP", duration=30),
    Lesson(id=2, title="Object-Oriented Programming", duration=45),
    Lesson(id=3, title="SOLID Principles", duration=60),
)
