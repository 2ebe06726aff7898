"""Launching screen API schemas."""

from __future__ import annotations

from pydantic import AnyHttpUrl, BaseModel, Field

from comingsoon.application.dtos.launching import LaunchingEffect, LaunchingScreenState
from comingsoon.domain.value_objects import CivilTimestamp, RemainingDuration

FIELD_VALUE_MAX_LENGTH = 500


class CountdownResponse(BaseModel):
    """Remaining time until launch."""

    days: int = Field(..., ge=0)
    hours: int = Field(..., ge=0, le=23)
    minutes: int = Field(..., ge=0, le=59)
    seconds: int = Field(..., ge=0, le=59)
    target: str | None = Field(default=None, description="Launch target (local, ISO-8601)")

    @classmethod
    def from_duration(
        cls, duration: RemainingDuration, target: CivilTimestamp | None = None
    ) -> CountdownResponse:
        return cls(
            days=duration.days,
            hours=duration.hours,
            minutes=duration.minutes,
            seconds=duration.seconds,
            target=target.isoformat() if target else None,
        )


class LaunchingStateResponse(BaseModel):
    """Snapshot of the coming-soon screen (GET /launching/state and WebSocket stream)."""

    countdown: CountdownResponse
    full_name: str
    email: str
    institution: str
    role: str
    referral_code: str
    agree_to_terms: bool
    is_submitting: bool
    show_success_dialog: bool
    success_message: str
    access_code: str | None
    error_message: str | None
    full_name_error: str | None
    email_error: str | None
    institution_error: str | None
    role_error: str | None
    is_form_valid: bool

    @classmethod
    def from_state(
        cls,
        state: LaunchingScreenState,
        *,
        is_form_valid: bool,
        target: CivilTimestamp | None = None,
    ) -> LaunchingStateResponse:
        return cls(
            countdown=CountdownResponse.from_duration(state.countdown, target),
            full_name=state.full_name,
            email=state.email,
            institution=state.institution,
            role=state.role,
            referral_code=state.referral_code,
            agree_to_terms=state.agree_to_terms,
            is_submitting=state.is_submitting,
            show_success_dialog=state.show_success_dialog,
            success_message=state.success_message,
            access_code=state.access_code,
            error_message=state.error_message,
            full_name_error=state.full_name_error,
            email_error=state.email_error,
            institution_error=state.institution_error,
            role_error=state.role_error,
            is_form_valid=is_form_valid,
        )


class EffectResponse(BaseModel):
    """One-shot effect pushed on the WebSocket stream."""

    kind: str
    message: str | None = None
    url: str | None = None

    @classmethod
    def from_effect(cls, effect: LaunchingEffect) -> EffectResponse:
        return cls(kind=effect.kind.value, message=effect.message, url=effect.url)


class FieldUpdateRequest(BaseModel):
    """Body for PUT /launching/form/{field}."""

    value: str = Field(..., max_length=FIELD_VALUE_MAX_LENGTH)


class AgreeToTermsRequest(BaseModel):
    """Body for PUT /launching/form/agree-to-terms."""

    agree: bool


class OpenLinkRequest(BaseModel):
    """Body for POST /launching/open-link (http/https only)."""

    url: AnyHttpUrl
