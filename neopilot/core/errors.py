"""Exceptions raised by neopilot."""

from __future__ import annotations

from collections.abc import Iterable

REPORT_HEADER = "Environment variable validation failed:"


def format_violations(violations: Iterable[str]) -> str:
    """Render violations as a header line followed by indented bullets."""
    bullets = "\n".join(f"  - {violation}" for violation in violations)
    return f"{REPORT_HEADER}\n{bullets}"


class EnvironmentValidationError(Exception):
    """Required environment variables are missing or conflicting."""

    def __init__(self, violations: Iterable[str]) -> None:
        self.violations = tuple(violations)
        super().__init__(format_violations(self.violations))
