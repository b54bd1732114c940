"""JWT issuance for JewelCalc API clients.

Access tokens are short-lived and returned in the response body; refresh
tokens are longer-lived and travel in an httponly cookie.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any

from jose import JWTError, jwt

from jewelcalc.config import get_config

logger = logging.getLogger(__name__)

REFRESH_COOKIE_NAME = "refreshToken"


def _sign(claims: dict[str, Any], secret: str, expires_in: timedelta) -> str:
    config = get_config()
    payload = dict(claims)
    now = datetime.now(timezone.utc)
    payload.update({"iat": now, "exp": now + expires_in})
    return jwt.encode(payload, secret, algorithm=config.auth.algorithm)


def generate_access_token(claims: dict[str, Any]) -> str:
    """Sign an access token with ACCESS_SECRET (default 15 minutes)."""
    auth = get_config().auth
    return _sign(claims, auth.access_secret, timedelta(minutes=auth.access_ttl_minutes))


def generate_refresh_token(claims: dict[str, Any]) -> str:
    """Sign a refresh token with REFRESH_SECRET (default 7 days)."""
    auth = get_config().auth
    return _sign(claims, auth.refresh_secret, timedelta(days=auth.refresh_ttl_days))


def decode_token(token: str, refresh: bool = False) -> dict[str, Any]:
    """Verify a token and return its claims.

    Raises:
        ValueError: on bad signature, expiry or malformed token
    """
    auth = get_config().auth
    secret = auth.refresh_secret if refresh else auth.access_secret
    try:
        return jwt.decode(token, secret, algorithms=[auth.algorithm])
    except JWTError as exc:
        logger.warning("Token validation failed: %s", exc)
        raise ValueError(f"Token validation failed: {exc}") from exc
