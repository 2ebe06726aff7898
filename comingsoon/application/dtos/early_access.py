"""DTOs exchanged with the early access submission endpoint."""

from dataclasses import dataclass


@dataclass(frozen=True)
class EarlyAccessRequest:
    """Waitlist submission built from a valid form. referral_code is None when left blank."""

    full_name: str
    email: str
    institution: str
    role: str
    referral_code: str | None = None
    agree_to_terms: bool = False


@dataclass(frozen=True)
class EarlyAccessResponse:
    """Outcome reported by the submission endpoint."""

    success: bool
    message: str
    access_code: str | None = None
