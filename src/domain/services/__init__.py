"""Domain services."""

from src.domain.services.summary_formatter import (
    format_enrollment_notice,
    format_program_summary,
    format_roster,
)

__all__ = [
    "format_enrollment_notice",
    "format_program_summary",
    "format_roster",
]
