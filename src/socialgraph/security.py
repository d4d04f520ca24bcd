"""Password hashing utilities."""

import asyncio
import base64
import hashlib

import bcrypt

from .config import settings


def _prehash(password: str) -> bytes:
    # bcrypt only accepts 72 bytes of input; digest first so any length hashes
    digest = hashlib.sha256(password.encode("utf-8")).digest()
    return base64.b64encode(digest)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    salt = bcrypt.gensalt(rounds=settings.password_hash_rounds)
    return bcrypt.hashpw(_prehash(password), salt).decode("utf-8")


async def get_password_hash_async(password: str) -> str:
    """Hash a password in the default thread pool, off the event loop."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, get_password_hash, password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against its hash."""
    try:
        return bcrypt.checkpw(_prehash(plain_password), hashed_password.encode("utf-8"))
    except ValueError:
        # Not a bcrypt hash
        return False
