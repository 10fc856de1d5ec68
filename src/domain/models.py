from __future__ import annotations

import dataclasses
import enum
import threading
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

import structlog

logger = structlog.get_logger()


class InvalidArgumentError(ValueError):
    """Raised when an entity is constructed with a blank name or a non-positive number."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


def _require_text(field: str, value: Any, message: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(field, message)


def _require_positive(field: str, value: Any, message: str) -> None:
    # bool is an int subclass; True must not pass as a duration of one minute.
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidArgumentError(field, message)


class Level(str, enum.Enum):
    """Difficulty classification of a program."""

    BASIC = "basic"
    INTERMEDIATE = "intermediate"
    HARD = "hard"


class EnrollmentStatus(str, enum.Enum):
    ENROLLED = "enrolled"
    ALREADY_ENROLLED = "already_enrolled"
    CANCELLED = "cancelled"
    NOT_FOUND = "not_found"


@dataclass(frozen=True, slots=True)
class User:
    """A learner who can enroll in programs."""

    id: str
    name: str
    age: int

    def __post_init__(self) -> None:
        _require_text("name", self.name, "User name must not be blank.")
        _require_positive("age", self.age, "Age must be greater than zero.")


@dataclass(frozen=True, slots=True)
class EducationalContent:
    """A unit of course material with a duration in minutes."""

    id: str
    name: str
    duration_minutes: int = 60

    def __post_init__(self) -> None:
        _require_text("name", self.name, "Content name must not be blank.")
        _require_positive(
            "duration_minutes", self.duration_minutes, "Duration must be greater than zero."
        )

    def renamed(self, name: str) -> EducationalContent:
        """Return a copy carrying a new, validated name."""
        return dataclasses.replace(self, name=name)


@dataclass(frozen=True, slots=True)
class EnrollmentResult:
    """Outcome of an enroll or cancel request."""

    status: EnrollmentStatus
    program_id: str
    user_id: str
    user_name: str | None = None

    @property
    def changed(self) -> bool:
        return self.status in (EnrollmentStatus.ENROLLED, EnrollmentStatus.CANCELLED)


@dataclass(frozen=True, slots=True)
class ProgramSummary:
    """Read-only statistics derived from a program's current state."""

    program_id: str
    name: str
    level: Level
    content_count: int
    total_duration_minutes: int
    enrollee_count: int

    def as_dict(self) -> dict[str, Any]:
        data = dataclasses.asdict(self)
        data["level"] = self.level.value
        return data


class Program:
    """Aggregate grouping educational content and enrolled users under a level.

    Contents keep insertion order and may repeat. The roster keeps insertion
    order and holds at most one user per id. Content and user objects are
    referenced, not copied, so the same user can be enrolled in several
    programs.
    """

    def __init__(
        self,
        id: str,
        name: str,
        level: Level,
        contents: Iterable[EducationalContent] | None = None,
    ) -> None:
        _require_text("name", name, "Program name must not be blank.")
        if not isinstance(level, Level):
            raise InvalidArgumentError("level", f"Unknown program level: {level!r}.")
        self._id = id
        self._name = name
        self._level = level
        self._contents: list[EducationalContent] = list(contents or ())
        self._enrollees: list[User] = []
        self._lock = threading.Lock()

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def level(self) -> Level:
        return self._level

    def __repr__(self) -> str:
        return f"Program(id={self._id!r}, name={self._name!r}, level={self._level.name})"

    # Content management

    def add_content(self, content: EducationalContent) -> None:
        with self._lock:
            self._contents.append(content)
        logger.debug("content_added", program_id=self._id, content_id=content.id)

    def list_contents(self) -> list[EducationalContent]:
        with self._lock:
            return list(self._contents)

    def total_duration(self) -> int:
        with self._lock:
            return sum(content.duration_minutes for content in self._contents)

    # Enrollment management

    def enroll(self, user: User) -> EnrollmentResult:
        """Add ``user`` to the roster unless a user with the same id is already there."""
        with self._lock:
            if any(enrollee.id == user.id for enrollee in self._enrollees):
                status = EnrollmentStatus.ALREADY_ENROLLED
            else:
                self._enrollees.append(user)
                status = EnrollmentStatus.ENROLLED

        if status is EnrollmentStatus.ENROLLED:
            logger.debug("user_enrolled", program_id=self._id, user_id=user.id)
        else:
            logger.debug("user_already_enrolled", program_id=self._id, user_id=user.id)
        return EnrollmentResult(
            status=status, program_id=self._id, user_id=user.id, user_name=user.name
        )

    def cancel_enrollment(self, user_id: str) -> EnrollmentResult:
        """Remove the user with ``user_id`` from the roster, reporting whether one was found."""
        with self._lock:
            remaining = [enrollee for enrollee in self._enrollees if enrollee.id != user_id]
            removed = len(remaining) != len(self._enrollees)
            self._enrollees = remaining

        if removed:
            logger.debug("enrollment_cancelled", program_id=self._id, user_id=user_id)
            status = EnrollmentStatus.CANCELLED
        else:
            logger.debug("enrollment_not_found", program_id=self._id, user_id=user_id)
            status = EnrollmentStatus.NOT_FOUND
        return EnrollmentResult(status=status, program_id=self._id, user_id=user_id)

    def is_enrolled(self, user_id: str) -> bool:
        with self._lock:
            return any(enrollee.id == user_id for enrollee in self._enrollees)

    def list_enrollees(self) -> list[User]:
        with self._lock:
            return list(self._enrollees)

    # Reporting

    def summary(self) -> ProgramSummary:
        with self._lock:
            content_count = len(self._contents)
            total = sum(content.duration_minutes for content in self._contents)
            enrollee_count = len(self._enrollees)
        return ProgramSummary(
            program_id=self._id,
            name=self._name,
            level=self._level,
            content_count=content_count,
            total_duration_minutes=total,
            enrollee_count=enrollee_count,
        )
