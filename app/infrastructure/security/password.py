"""Password hashing (bcrypt with SHA-256 pre-hash).

Bcrypt truncates inputs at 72 bytes; pre-hashing with SHA-256 yields a
fixed-length input so long passwords are not silently truncated. The async
helpers run bcrypt in a worker thread so the event loop is never blocked.
"""

import asyncio
import base64
import hashlib

import bcrypt

# Valid bcrypt hash compared against when a login email is unknown, so that
# unknown-email and wrong-password responses take the same time.
_dummy_hash_cache: str | None = None


def _prehash(password: str) -> bytes:
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Return True if plain_password matches hashed_password."""
    try:
        return bool(
            bcrypt.checkpw(_prehash(plain_password), hashed_password.encode("utf-8"))
        )
    except (ValueError, TypeError):
        return False


def get_password_hash(password: str) -> str:
    """Return bcrypt hash of password (SHA-256 pre-hashed before bcrypt)."""
    return bcrypt.hashpw(_prehash(password), bcrypt.gensalt()).decode("utf-8")


async def hash_password(password: str) -> str:
    return await asyncio.to_thread(get_password_hash, password)


async def check_password(plain_password: str, hashed_password: str | None) -> bool:
    """Verify in a thread. A None hash is checked against a dummy and always fails."""
    if hashed_password is None:
        await asyncio.to_thread(verify_password, plain_password, await _get_dummy_hash())
        return False
    return await asyncio.to_thread(verify_password, plain_password, hashed_password)


async def _get_dummy_hash() -> str:
    global _dummy_hash_cache
    if _dummy_hash_cache is None:
        _dummy_hash_cache = await asyncio.to_thread(
            get_password_hash, "not-a-real-password"
        )
    return _dummy_hash_cache


class BcryptPasswordHasher:
    """IPasswordHasher implementation backed by the functions above."""

    async def hash(self, password: str) -> str:
        return await hash_password(password)

    async def verify(self, password: str, hashed_password: str | None) -> bool:
        return await check_password(password, hashed_password)
