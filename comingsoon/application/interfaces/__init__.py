from comingsoon.application.interfaces.services import (
    IClock,
    IEarlyAccessClient,
    ILinkOpener,
)

__all__ = ["IClock", "IEarlyAccessClient", "ILinkOpener"]
