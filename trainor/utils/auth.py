from datetime import datetime, timezone
from typing import Any, Dict

import jwt
from fastapi import HTTPException, Request
from jwt import InvalidTokenError

from trainor.settings import settings
from trainor.utils.log import logger

ACCESS_COOKIE = "sb-access-token"
REFRESH_COOKIE = "sb-refresh-token"
AUDIENCE = "authenticated"


def get_jwt_secret() -> str:
    secret = settings.SUPABASE_JWT_SECRET
    if not secret:
        logger.error("Missing SUPABASE_JWT_SECRET env var")
        raise HTTPException(
            status_code=500,
            detail="Missing SUPABASE_JWT_SECRET in environment variables.",
        )
    return secret


def get_access_token(request: Request) -> str:
    """Extract the access token from the Authorization header or cookie, or raise 401"""
    header = request.headers.get("authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() == "bearer" and token:
        logger.debug("Access token found in Authorization header")
        return token.strip()

    token = request.cookies.get(ACCESS_COOKIE)
    if not token:
        logger.warning("Access token missing from request")
        raise HTTPException(
            status_code=401, detail="Access token is missing. Login again."
        )

    logger.debug("Access token found in cookies")
    return token


def decode_and_validate_access_token(
    access_token: str, secret: str, audience: str = AUDIENCE
) -> Dict[str, Any]:
    """
    Decode the Supabase access token, verify signature and claims, return decoded
    """
    decoded_token = jwt.decode(
        access_token,
        secret,
        algorithms=["HS256"],
        audience=audience,
    )

    logger.debug("JWT successfully decoded and verified")

    if not decoded_token.get("sub"):
        logger.error("Token has no 'sub' claim")
        raise HTTPException(status_code=401, detail="Invalid token")

    return decoded_token


def log_sub_and_exp(decoded_token: Dict[str, Any]):  # pragma: no cover
    """Logging the user sub and token expiry to help with debugging"""
    exp = decoded_token.get("exp")
    exp_time = (
        datetime.fromtimestamp(exp, tz=timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")
        if exp
        else None
    )
    sub = decoded_token.get("sub")
    logger.info(f"Authenticated user sub={sub}, token exp={exp_time}")


async def require_auth(request: Request):
    """
    Validate the Supabase access token and return decoded claims.
    The raw token is kept under "access_token" for per-user clients.
    """

    if settings.DISABLE_AUTH_FOR_LOCAL_DEV:  # pragma: no cover
        logger.warning("Auth bypass enabled: returning fake LOCAL-DEV-USER claims")
        return {
            "sub": settings.DEV_USER_SUB or "LOCAL-DEV-USER",
            "email": "local-dev@example.com",
            "access_token": None,
        }

    access_token = get_access_token(request)
    secret = get_jwt_secret()

    try:
        decoded_token = decode_and_validate_access_token(access_token, secret)

        log_sub_and_exp(decoded_token)

        return {**decoded_token, "access_token": access_token}

    except jwt.ExpiredSignatureError:
        logger.warning("Access token expired")
        raise HTTPException(status_code=401, detail="Token expired")

    except InvalidTokenError as e:
        logger.error(f"Invalid token: {e}")
        raise HTTPException(status_code=401, detail="Invalid token")
