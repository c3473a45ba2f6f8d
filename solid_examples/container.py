"""Dependency injection container — wires implementations to interfaces."""
from __future__ import annotations
from functools import lru_cache
from typing import Dict

from solid_examples.application.password_reminder import PasswordReminder
from solid_examples.application.sales_app_service import SalesAppService
from solid_examples.core import config
from solid_examples.domain.shapes.calculator import AreaCalculator
from solid_examples.domain.workers.captain import Captain
from solid_examples.persistence.connections.registry import build_connection
from solid_examples.persistence.interfaces.connection import Connection, ConnectionSettings
from solid_examples.persistence.interfaces.lesson_repository import LessonRepository
from solid_examples.persistence.repositories.memory.file_lesson_repository import FileLessonRepository
from solid_examples.persistence.repositories.memory.memory_sales_repository import InMemorySalesRepository
from solid_examples.persistence.repositories.memory.orm_lesson_repository import OrmLessonRepository


@lru_cache(maxsize=1)
def get_sales_repo() -> InMemorySalesRepository:
    return InMemorySalesRepository()


@lru_cache(maxsize=1)
def get_sales_app_service() -> SalesAppService:
    return SalesAppService(repo=get_sales_repo(), default_format=config.DEFAULT_SALES_FORMAT)


@lru_cache(maxsize=1)
def get_lesson_repos() -> Dict[str, LessonRepository]:
    return {
        "file": FileLessonRepository(),
        "orm": OrmLessonRepository(),
    }


@lru_cache(maxsize=1)
def get_area_calculator() -> AreaCalculator:
    return AreaCalculator()


@lru_cache(maxsize=1)
def get_captain() -> Captain:
    return Captain()


def get_connection_settings() -> ConnectionSettings:
    return ConnectionSettings(
        host=config.DB_HOST,
        username=config.DB_USERNAME,
        password=config.DB_PASSWORD,
        database=config.DB_NAME,
    )


def get_connection() -> Connection:
    # Not cached: each reminder gets its own connection state
    return build_connection(config.DB_DRIVER, get_connection_settings())


def get_password_reminder() -> PasswordReminder:
    return PasswordReminder(connection=get_connection())
