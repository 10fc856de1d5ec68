from __future__ import annotations

from collections.abc import Iterable

from src.domain.models import EnrollmentResult, EnrollmentStatus, ProgramSummary, User

_RULE = "=" * 25


def format_program_summary(summary: ProgramSummary) -> str:
    """Build the console banner describing a program's current state."""
    lines = [
        f"=== Program: {summary.name} ===",
        f"Level: {summary.level.name}",
        f"Contents: {summary.content_count}",
        f"Total duration: {summary.total_duration_minutes} minutes",
        f"Enrollees: {summary.enrollee_count}",
        _RULE,
    ]
    return "\n".join(lines)


def format_enrollment_notice(result: EnrollmentResult) -> str:
    """Render the one-line notice shown after an enroll or cancel request."""
    if result.status is EnrollmentStatus.ENROLLED:
        return f"User {result.user_name} enrolled successfully."
    if result.status is EnrollmentStatus.ALREADY_ENROLLED:
        return f"User {result.user_name} is already enrolled."
    if result.status is EnrollmentStatus.CANCELLED:
        return "Enrollment cancelled."
    return "User not found in program."


def format_roster(users: Iterable[User]) -> str:
    return "\n".join(f"{user.name} ({user.age} years)" for user in users)
