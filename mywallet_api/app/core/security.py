"""
Security helpers for password hashing and bearer tokens.

Passwords are hashed with PBKDF2‑HMAC (SHA‑256) and a random
per‑password salt.  Session tokens are opaque random UUID4 strings;
they carry no claims and are only meaningful through the ``sessions``
table.  The ``bearer_token`` dependency extracts the token from the
``Authorization`` header without rejecting the request, so that body
validation always runs before any authentication failure is reported.
"""

import hashlib
import hmac
import os
import uuid
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

PBKDF2_ITERATIONS = 100_000


def hash_password(password: str) -> str:
    """Hash a password using PBKDF2‑HMAC with SHA‑256.

    A 16‑byte random salt is generated for each password.  The
    resulting string contains the salt and hash separated by a
    ``$`` (salt in hex, then hash in hex).

    Parameters
    ----------
    password : str
        The plain text password to hash.

    Returns
    -------
    str
        Salt and hash concatenated with ``$``.
    """
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return f"{salt.hex()}${dk.hex()}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a stored salt+hash string.

    Returns ``False`` for a stored value that is not in the
    ``salt$hash`` format.
    """
    try:
        salt_hex, hash_hex = hashed_password.split("$", 1)
        salt = bytes.fromhex(salt_hex)
        stored_hash = bytes.fromhex(hash_hex)
    except ValueError:
        return False
    dk = hashlib.pbkdf2_hmac("sha256", plain_password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return hmac.compare_digest(dk, stored_hash)


def generate_token() -> str:
    """Return a fresh opaque session token."""
    return str(uuid.uuid4())


security = HTTPBearer(auto_error=False)


def bearer_token(credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)) -> Optional[str]:
    """Dependency returning the bearer token, or ``None`` if absent/malformed."""
    if credentials is None:
        return None
    return credentials.credentials
