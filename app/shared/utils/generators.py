"""Identifier generators: CUID2 primary keys and request ids."""

from cuid2 import Cuid

_primary_key = Cuid(length=25)
_request_id = Cuid(length=16)


def generate_cuid() -> str:
    """Generate a collision-resistant primary key (CUID2, 25 chars)."""
    return _primary_key.generate()


def generate_request_id() -> str:
    """Generate a short id for X-Request-ID when the client sent none (or an unsafe one)."""
    return _request_id.generate()
