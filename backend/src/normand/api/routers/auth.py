"""Admin login endpoint."""

import logging
from datetime import datetime, UTC

from fastapi import APIRouter, Depends

from normand.api.deps import get_settings
from normand.api.schemas import LoginRequest, LoginResponse
from normand.auth import issue_token, verify_password
from normand.config import Config
from normand.errors import AuthError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
async def login(
    data: LoginRequest,
    settings: Config = Depends(get_settings),
) -> LoginResponse:
    """Exchange the shared admin password for a signed, time-limited token."""
    if not settings.admin_password_hash or not settings.admin_token_secret:
        logger.error("Admin login attempted but ADMIN_PASSWORD_HASH/ADMIN_TOKEN_SECRET are unset")
        raise AuthError("Admin login is not configured")

    if not verify_password(data.password, settings.admin_password_hash):
        logger.warning("Rejected admin login with invalid password")
        raise AuthError("Invalid password")

    token, expires_at = issue_token(settings.admin_token_secret, settings.token_ttl_seconds)
    return LoginResponse(token=token, expires_at=datetime.fromtimestamp(expires_at, UTC))
