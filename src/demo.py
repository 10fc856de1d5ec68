"""Console walkthrough: build a program, enroll two users and print its summary."""

from __future__ import annotations

from collections.abc import Callable
from uuid import uuid4

import structlog
from src.core.config import get_settings
from src.core.ids import IdFactory, generate_id
from src.core.logging import setup_logging
from src.domain.models import EducationalContent, Level, Program, User
from src.domain.services.summary_formatter import (
    format_enrollment_notice,
    format_program_summary,
    format_roster,
)
from structlog.contextvars import bind_contextvars, clear_contextvars

logger = structlog.get_logger()


def run_demo(id_factory: IdFactory = generate_id, out: Callable[[str], None] = print) -> Program:
    """Wire the sample Kotlin program and render every step through ``out``."""
    intro = EducationalContent(id_factory(), "Introduction to Kotlin", 90)
    oop = EducationalContent(id_factory(), "Object-Oriented Programming", 120)

    program = Program(
        id=id_factory(),
        name="Kotlin Developer Program",
        level=Level.INTERMEDIATE,
    )
    program.add_content(intro)
    program.add_content(oop)

    jhon = User(id=id_factory(), name="Jhon", age=25)
    caio = User(id=id_factory(), name="Caio", age=30)

    for user in (jhon, caio):
        out(format_enrollment_notice(program.enroll(user)))

    out(format_program_summary(program.summary()))

    out("\nListing enrollees:")
    out(format_roster(program.list_enrollees()))
    return program


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level_value, json=settings.log_json)

    clear_contextvars()
    bind_contextvars(run_id=str(uuid4()))
    logger.info("demo_started", app=settings.app_name, environment=settings.environment)
    program = run_demo()
    logger.info("demo_finished", **program.summary().as_dict())
    clear_contextvars()


if __name__ == "__main__":
    main()
