"""
podcast_api.auth.passwords

Password hashing helpers.

Responsibilities:
- Hash passwords before they are stored.
- Verify login attempts against stored hashes.
"""

from __future__ import annotations

from passlib.context import CryptContext

# Plain bcrypt only looks at the first 72 bytes; bcrypt_sha256 digests the whole password first.
_pwd_context = CryptContext(schemes=["bcrypt_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return _pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    return _pwd_context.verify(password, password_hash)
