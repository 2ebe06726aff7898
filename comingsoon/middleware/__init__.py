"""HTTP middleware: timeout, request ID, security headers.

Applied in comingsoon.main; first added is outermost.
"""

from comingsoon.middleware.request_id import RequestIDMiddleware
from comingsoon.middleware.security_headers import SecurityHeadersMiddleware
from comingsoon.middleware.timeout import TimeoutMiddleware

__all__ = [
    "RequestIDMiddleware",
    "SecurityHeadersMiddleware",
    "TimeoutMiddleware",
]
