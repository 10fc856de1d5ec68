from __future__ import annotations

from collections.abc import Iterator

import pytest
from src.core.config import get_settings
from src.core.ids import IdFactory, sequential_ids
from src.core.logging import reset_logging
from src.domain.models import EducationalContent, Level, Program, User


@pytest.fixture()
def id_factory() -> IdFactory:
    """Deterministic ids so assertions never depend on uuid4."""
    return sequential_ids("test")


@pytest.fixture()
def program(id_factory: IdFactory) -> Program:
    return Program(id=id_factory(), name="Kotlin Developer Program", level=Level.INTERMEDIATE)


@pytest.fixture()
def jhon(id_factory: IdFactory) -> User:
    return User(id=id_factory(), name="Jhon", age=25)


@pytest.fixture()
def caio(id_factory: IdFactory) -> User:
    return User(id=id_factory(), name="Caio", age=30)


@pytest.fixture()
def intro(id_factory: IdFactory) -> EducationalContent:
    return EducationalContent(id_factory(), "Introduction to Kotlin", 90)


@pytest.fixture()
def oop(id_factory: IdFactory) -> EducationalContent:
    return EducationalContent(id_factory(), "Object-Oriented Programming", 120)


@pytest.fixture()
def clean_settings() -> Iterator[None]:
    """Clear the cached Settings before and after a test that tweaks the environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def clean_logging() -> Iterator[None]:
    """Leave structlog unconfigured so capture_logs sees every event."""
    reset_logging()
    yield
    reset_logging()
