"""Link-opening collaborators: desktop browser or log-only (headless hosts)."""

import asyncio
import webbrowser
from typing import ClassVar

from comingsoon.application.interfaces.services import ILinkOpener
from comingsoon.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class BrowserLinkOpener:
    """Opens URLs in the host's default browser (desktop environments)."""

    async def open(self, url: str) -> None:
        """Run webbrowser.open off the event loop; logs when no browser accepted the URL."""
        opened = await asyncio.to_thread(webbrowser.open, url, 2)
        if not opened:
            logger.warning("No browser available to open %s", url)


class LoggingLinkOpener:
    """Records and logs URLs instead of navigating (servers, CI)."""

    def __init__(self) -> None:
        self.opened: list[str] = []

    async def open(self, url: str) -> None:
        self.opened.append(url)
        logger.info("Open link requested: %s", url)


class LinkOpenerFactory:
    """Factory for link openers by environment name (settings.link_opener)."""

    _openers: ClassVar[dict[str, type[ILinkOpener]]] = {
        "browser": BrowserLinkOpener,
        "log": LoggingLinkOpener,
    }

    @classmethod
    def create(cls, kind: str) -> ILinkOpener:
        """Create the opener registered for kind.

        Raises:
            ValueError: If kind is not registered.
        """
        opener_class = cls._openers.get(kind.lower())
        if opener_class is None:
            raise ValueError(
                f"Unsupported link opener: {kind}. Supported: {list(cls._openers)}"
            )
        logger.debug("Creating %s", opener_class.__name__)
        return opener_class()

    @classmethod
    def register(cls, kind: str, opener_class: type[ILinkOpener]) -> None:
        """Register an opener for another environment (e.g. a native shell)."""
        cls._openers[kind.lower()] = opener_class
        logger.info("Registered link opener: %s", kind)
