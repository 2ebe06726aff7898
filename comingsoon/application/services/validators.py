"""Form validators for the early access form.

Validators never raise: they return a ValidationResult so callers can
store the message as per-field state. The use case layer converts a
failed result into ValidationException where raising is wanted.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9+_.-]+@([A-Za-z0-9.-]+\.[A-Za-z]{2,})$")

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a validator; error_message is None when valid."""

    error_message: str | None = None

    @property
    def is_valid(self) -> bool:
        return self.error_message is None


VALID = ValidationResult()


def is_valid_email(email: str) -> bool:
    """Format check only (EMAIL_PATTERN, full match)."""
    return EMAIL_PATTERN.fullmatch(email) is not None


class EmailValidator:
    """Required email with a basic local@domain.tld shape."""

    @staticmethod
    def validate(email: str) -> ValidationResult:
        if not email.strip():
            return ValidationResult("Email is required")
        if not is_valid_email(email):
            return ValidationResult("Invalid email format")
        return VALID


class NameValidator:
    """Required person name, 2-100 characters."""

    @staticmethod
    def validate(name: str) -> ValidationResult:
        if not name.strip():
            return ValidationResult("Name is required")
        if len(name) < NAME_MIN_LENGTH:
            return ValidationResult(
                f"Name must be at least {NAME_MIN_LENGTH} characters"
            )
        if len(name) > NAME_MAX_LENGTH:
            return ValidationResult(
                f"Name must not exceed {NAME_MAX_LENGTH} characters"
            )
        return VALID


class FieldValidator:
    """Generic required-field (non-blank) check."""

    @staticmethod
    def validate(value: str, field_label: str) -> ValidationResult:
        if not value.strip():
            return ValidationResult(f"{field_label} is required")
        return VALID
