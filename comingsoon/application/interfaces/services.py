"""Collaborator interfaces (ports) for the application layer.

Protocols define contracts for the clock, the submission endpoint and
the link opener. Each target environment supplies its own
implementation; the application never branches on platform.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from comingsoon.application.dtos.early_access import (
        EarlyAccessRequest,
        EarlyAccessResponse,
    )
    from comingsoon.domain.value_objects import CivilTimestamp


class IClock(Protocol):
    """Protocol for reading the host's wall clock (no timezone handling)."""

    def now(self) -> CivilTimestamp:
        """Return the current local wall-clock reading."""


class IEarlyAccessClient(Protocol):
    """Protocol for the remote early access endpoint."""

    async def submit_early_access_request(
        self, request: EarlyAccessRequest
    ) -> EarlyAccessResponse:
        """Submit a waitlist request. May raise on transport or server failure."""

    async def validate_email(self, email: str) -> bool:
        """Ask the endpoint whether the email is acceptable."""


class ILinkOpener(Protocol):
    """Protocol for fire-and-forget external navigation."""

    async def open(self, url: str) -> None:
        """Open url in the host's browser (or equivalent). May raise; callers log and swallow."""
