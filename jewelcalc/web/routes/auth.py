"""Token issuance routes.

Routes:
- POST /api/auth/token-auth - Issue access token (body) and refresh token (cookie)
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Response

from jewelcalc.config import get_config
from jewelcalc.web.auth import (
    REFRESH_COOKIE_NAME,
    generate_access_token,
    generate_refresh_token,
)

router = APIRouter(prefix="/api/auth", tags=["authentication"])


@router.post("/token-auth")
async def token_auth(response: Response, user: dict[str, Any] = Body(...)):
    """Sign the posted user claims.

    No credential check happens here; the body is trusted as the user.
    """
    access_token = generate_access_token(user)
    refresh_token = generate_refresh_token(user)

    response.set_cookie(
        key=REFRESH_COOKIE_NAME,
        value=refresh_token,
        httponly=True,
        samesite="lax",
        max_age=get_config().auth.refresh_ttl_days * 86400,
    )
    return {"access_token": access_token}
