"""Mock early access endpoint.

Stands in for the remote waitlist API: always accepts, issues an
IAIAIN-prefixed access code. Optional latency simulates the network.
"""

from __future__ import annotations

import asyncio
import random

from comingsoon.application.dtos.early_access import (
    EarlyAccessRequest,
    EarlyAccessResponse,
)
from comingsoon.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

ACCESS_CODE_PREFIX = "IAIAIN-"
SUCCESS_MESSAGE = "Thank you for your interest! Check your email for next steps."


class MockEarlyAccessClient:
    """IEarlyAccessClient that never fails.

    Args:
        latency_seconds: Delay before each response.
        rng: Random source for access codes (seed it for deterministic codes).
    """

    def __init__(
        self,
        latency_seconds: float = 0.0,
        rng: random.Random | None = None,
    ) -> None:
        self._latency = latency_seconds
        self._rng = rng or random.Random()

    async def _simulate_network(self) -> None:
        await asyncio.sleep(self._latency)

    async def submit_early_access_request(
        self, request: EarlyAccessRequest
    ) -> EarlyAccessResponse:
        await self._simulate_network()
        access_code = f"{ACCESS_CODE_PREFIX}{self._rng.randrange(100000, 999999)}"
        logger.info(
            "Mock early access accepted (institution=%s, role=%s, referral=%s)",
            request.institution,
            request.role,
            request.referral_code is not None,
        )
        return EarlyAccessResponse(
            success=True,
            message=SUCCESS_MESSAGE,
            access_code=access_code,
        )

    async def validate_email(self, email: str) -> bool:
        await self._simulate_network()
        return True
