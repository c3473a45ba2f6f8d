"""Lesson listing endpoint. Any repository variant yields the same response shape."""
from __future__ import annotations
from typing import Dict

from fastapi import APIRouter, Depends, HTTPException, Query

from solid_examples.container import get_lesson_repos
from solid_examples.domain.lessons.service import calculate_total_duration, describe_lessons
from solid_examples.persistence.interfaces.lesson_repository import LessonRepository

router = APIRouter(prefix="/lessons", tags=["lessons"])


@router.get("/")
def list_lessons(
    source: str = Query("file", description="file | orm"),
    repos: Dict[str, LessonRepository] = Depends(get_lesson_repos),
):
    repo = repos.get(source.lower())
    if repo is None:
        raise HTTPException(
            status_code=400,
            detail=f"Unknown lesson source '{source}'. Must be one of {sorted(repos)}.",
        )
    lessons = repo.get_all()
    return {
        "count": len(lessons),
        "total_duration": calculate_total_duration(repo),
        "lessons": [
            {"id": lesson.id, "title": lesson.title, "duration": lesson.duration}
            for lesson in lessons
        ],
        "summary": describe_lessons(repo),
    }
