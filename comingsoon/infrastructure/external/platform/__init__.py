"""Per-environment collaborators: clock and link opener."""

from comingsoon.infrastructure.external.platform.clock import SystemClock
from comingsoon.infrastructure.external.platform.link_opener import (
    BrowserLinkOpener,
    LinkOpenerFactory,
    LoggingLinkOpener,
)

__all__ = [
    "BrowserLinkOpener",
    "LinkOpenerFactory",
    "LoggingLinkOpener",
    "SystemClock",
]
