"""DTOs for the launching screen: state snapshot, intents and effects."""

from __future__ import annotations

from dataclasses import dataclass, field

from comingsoon.domain.enums import EffectKind, FormField
from comingsoon.domain.value_objects import RemainingDuration


@dataclass(frozen=True)
class LaunchingScreenState:
    """Immutable snapshot of the coming-soon screen.

    Owned by LaunchingController; every change produces a new instance via
    dataclasses.replace. Observers only read it.
    """

    countdown: RemainingDuration = field(default_factory=RemainingDuration)

    # Form values
    full_name: str = ""
    email: str = ""
    institution: str = ""
    role: str = ""
    referral_code: str = ""
    agree_to_terms: bool = False

    # Submission lifecycle
    is_submitting: bool = False
    show_success_dialog: bool = False
    success_message: str = ""
    access_code: str | None = None
    error_message: str | None = None

    # Per-field validation messages (None = valid or not yet validated)
    full_name_error: str | None = None
    email_error: str | None = None
    institution_error: str | None = None
    role_error: str | None = None

    @property
    def required_fields_filled(self) -> bool:
        return all(
            value.strip()
            for value in (self.full_name, self.email, self.institution, self.role)
        )

    @property
    def is_form_valid(self) -> bool:
        """Required fields non-blank, terms agreed, no outstanding full name or email error.

        Institution and role errors are tracked but do not take part here;
        LaunchingController adds them when strict validity is configured.
        """
        return (
            self.required_fields_filled
            and self.agree_to_terms
            and self.full_name_error is None
            and self.email_error is None
        )

    def value_of(self, form_field: FormField) -> str:
        """Current value of a text field."""
        return getattr(self, form_field.value)


@dataclass(frozen=True)
class InitializeCountdown:
    """Start (or restart) the per-second countdown."""


@dataclass(frozen=True)
class UpdateCountdown:
    """Recompute the countdown once from the clock."""


@dataclass(frozen=True)
class UpdateField:
    """User edited a text field."""

    field: FormField
    value: str


@dataclass(frozen=True)
class UpdateAgreeToTerms:
    """User ticked or cleared the terms checkbox."""

    agree: bool


@dataclass(frozen=True)
class SubmitEarlyAccessRequest:
    """Validate the form and, when valid, send it to the submission endpoint."""


@dataclass(frozen=True)
class ClearError:
    """Dismiss the error message; form values are kept."""


@dataclass(frozen=True)
class CloseSuccessDialog:
    """Hide the success dialog; form values are kept."""


@dataclass(frozen=True)
class OpenLink:
    """Open an external URL and emit an OPEN_LINK effect."""

    url: str


LaunchingIntent = (
    InitializeCountdown
    | UpdateCountdown
    | UpdateField
    | UpdateAgreeToTerms
    | SubmitEarlyAccessRequest
    | ClearError
    | CloseSuccessDialog
    | OpenLink
)


@dataclass(frozen=True)
class LaunchingEffect:
    """One-shot event for observers (success/error toast, link navigation)."""

    kind: EffectKind
    message: str | None = None
    url: str | None = None
