"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the
same instance without circular imports.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from comingsoon.core.config import get_settings

limiter = Limiter(key_func=get_remote_address)

# Public form endpoints: submissions are the only writes that reach the endpoint collaborator.
INTENT_LIMIT = "120/minute"

limit_submit = limiter.limit(lambda: get_settings().submit_rate_limit)
limit_intents = limiter.limit(INTENT_LIMIT)
