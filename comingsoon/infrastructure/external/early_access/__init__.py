from comingsoon.infrastructure.external.early_access.mock_client import (
    ACCESS_CODE_PREFIX,
    SUCCESS_MESSAGE,
    MockEarlyAccessClient,
)

__all__ = ["ACCESS_CODE_PREFIX", "SUCCESS_MESSAGE", "MockEarlyAccessClient"]
