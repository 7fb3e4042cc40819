"""Admin authentication: one shared password and signed, expiring tokens.

Tokens are HS256 JWTs with claims ``{"sub": "admin", "iat": ..., "exp": ...}``
signed with the configured secret.
"""

import logging
import time
from typing import Optional

import jwt
from werkzeug.security import check_password_hash

from normand.errors import AuthError

logger = logging.getLogger(__name__)

TOKEN_SUBJECT = "admin"
TOKEN_ALGORITHM = "HS256"


def verify_password(password: str, password_hash: Optional[str]) -> bool:
    """Check ``password`` against a Werkzeug password hash.

    Returns False when no hash is configured, so a missing setting never
    lets anyone in.
    """
    if not password_hash or not password:
        return False
    try:
        return check_password_hash(password_hash, password)
    except ValueError as e:
        logger.error(f"Configured admin password hash is unusable: {e}")
        return False


def issue_token(secret: str, ttl_seconds: int, now: Optional[float] = None) -> tuple[str, int]:
    """Create a signed admin token.

    Returns:
        Tuple of (token, expiry as unix seconds).
    """
    issued_at = int(now if now is not None else time.time())
    expires_at = issued_at + ttl_seconds
    claims = {"sub": TOKEN_SUBJECT, "iat": issued_at, "exp": expires_at}
    return jwt.encode(claims, secret, algorithm=TOKEN_ALGORITHM), expires_at


def verify_token(token: str, secret: str) -> dict:
    """Validate a token and return its claims.

    Raises:
        AuthError: If the token is malformed, forged or expired.
    """
    try:
        claims = jwt.decode(
            token,
            secret,
            algorithms=[TOKEN_ALGORITHM],
            options={"require": ["exp", "sub"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise AuthError("Token expired") from e
    except jwt.InvalidTokenError as e:
        raise AuthError("Invalid token") from e

    if claims.get("sub") != TOKEN_SUBJECT:
        raise AuthError("Invalid token")
    return claims
