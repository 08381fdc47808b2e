"""
Bearer tokens and admin password digests.

The token is base64("id:username:region:isAdmin"). It is an encoding, not a
signature: anyone holding a token can read the identity fields back.
"""

import base64
import binascii
import hashlib
from typing import Any, Dict

from guild_api.core.errors import InvalidToken

TOKEN_SEPARATOR = ":"


def generate_token(user: Dict[str, Any]) -> str:
    """Encode the identity fields of ``user`` into an opaque bearer token."""
    is_admin = "true" if user.get("is_admin") else "false"
    payload = TOKEN_SEPARATOR.join(
        [str(user["id"]), user["username"], user["region"], is_admin]
    )
    return base64.b64encode(payload.encode("utf-8")).decode("ascii")


def parse_token(token: str) -> Dict[str, Any]:
    """Decode a bearer token back into ``{id, username, region, is_admin}``."""
    if not token:
        raise InvalidToken()
    try:
        decoded = base64.b64decode(token.encode("ascii"), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeError, ValueError):
        raise InvalidToken()

    # id, region and flag never contain the separator; the username may
    head = decoded.split(TOKEN_SEPARATOR, 1)
    if len(head) != 2:
        raise InvalidToken()
    tail = head[1].rsplit(TOKEN_SEPARATOR, 2)
    if len(tail) != 3:
        raise InvalidToken()

    user_id = head[0]
    username, region, is_admin = tail
    try:
        user_id = int(user_id)
    except ValueError:
        raise InvalidToken()

    return {
        "id": user_id,
        "username": username,
        "region": region,
        "is_admin": is_admin == "true",
    }


def hash_password(password: str) -> str:
    # Unsalted SHA-256 hex digest; equal passwords give equal hashes
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


def verify_password(password: str, hashed_password: str) -> bool:
    return hash_password(password) == hashed_password
