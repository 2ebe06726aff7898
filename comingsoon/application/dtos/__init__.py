"""Application DTOs (no framework dependency)."""

from comingsoon.application.dtos.early_access import (
    EarlyAccessRequest,
    EarlyAccessResponse,
)
from comingsoon.application.dtos.launching import (
    ClearError,
    CloseSuccessDialog,
    InitializeCountdown,
    LaunchingEffect,
    LaunchingIntent,
    LaunchingScreenState,
    OpenLink,
    SubmitEarlyAccessRequest,
    UpdateAgreeToTerms,
    UpdateCountdown,
    UpdateField,
)

__all__ = [
    "ClearError",
    "CloseSuccessDialog",
    "EarlyAccessRequest",
    "EarlyAccessResponse",
    "InitializeCountdown",
    "LaunchingEffect",
    "LaunchingIntent",
    "LaunchingScreenState",
    "OpenLink",
    "SubmitEarlyAccessRequest",
    "UpdateAgreeToTerms",
    "UpdateCountdown",
    "UpdateField",
]
