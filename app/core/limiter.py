"""Rate limiter instance for SlowAPI.

Shared by main (app.state.limiter, enabled from RATE_LIMIT_ENABLED) and the
route modules. Limits are keyed by client address.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

limiter = Limiter(key_func=get_remote_address)

LOGIN_LIMIT = "10/minute"
REGISTER_LIMIT = "5/minute"
WRITE_ENDPOINT_LIMIT = "120/minute"

limit_auth = limiter.limit(LOGIN_LIMIT)
limit_register = limiter.limit(REGISTER_LIMIT)
limit_writes = limiter.limit(WRITE_ENDPOINT_LIMIT)
