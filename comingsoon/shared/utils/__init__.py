from comingsoon.shared.utils.async_helpers import retry_with_backoff, ticker

__all__ = ["retry_with_backoff", "ticker"]
