"""Training catalog domain: programs, their contents and enrolled users."""

from src.domain.models import (
    EducationalContent,
    EnrollmentResult,
    EnrollmentStatus,
    InvalidArgumentError,
    Level,
    Program,
    ProgramSummary,
    User,
)

__all__ = [
    "EducationalContent",
    "EnrollmentResult",
    "EnrollmentStatus",
    "InvalidArgumentError",
    "Level",
    "Program",
    "ProgramSummary",
    "User",
]
