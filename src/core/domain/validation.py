"""Input validators for terminal prompts.

A validator is any callable `str -> ValidationResult`. Messages are rich markup
so they can be printed as-is by the prompt.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable
from urllib.parse import urlparse


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one candidate input."""

    successful: bool
    message: str | None = None

    @classmethod
    def success(cls) -> "ValidationResult":
        return cls(successful=True)

    @classmethod
    def error(cls, message: str) -> "ValidationResult":
        return cls(successful=False, message=message)


Validator = Callable[[str], ValidationResult]

EMPTY_VALUE_MESSAGE = "[red]Please enter a value.[/]"
INVALID_URL_MESSAGE = "[red]Please enter a valid URL starting with http or https.[/]"


def validate_not_empty(value: str) -> ValidationResult:
    if not value or not value.strip():
        return ValidationResult.error(EMPTY_VALUE_MESSAGE)
    return ValidationResult.success()


def validate_http_url(value: str) -> ValidationResult:
    """Accept only absolute `http`/`https` URLs with a host."""

    result = validate_not_empty(value)
    if not result.successful:
        return result

    try:
        parsed = urlparse(value.strip())
    except ValueError:
        return ValidationResult.error(INVALID_URL_MESSAGE)

    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        return ValidationResult.error(INVALID_URL_MESSAGE)
    return ValidationResult.success()
