from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from trainor.models.auth import SignInForm, SignUpForm
from trainor.services.auth import AuthService
from trainor.settings import settings
from trainor.utils import auth, db
from trainor.utils.log import logger
from trainor.utils.responses import envelope

router = APIRouter(prefix="/auth", tags=["auth"])

COMMON_COOKIE_OPTS = {
    "httponly": True,
    "secure": True,
    "samesite": "none",
}


async def get_auth_service() -> AuthService:  # pragma: no cover
    """Auth service over a fresh server client"""
    client = await db.create_server_client()
    return AuthService(client)


async def get_session_auth_service(request: Request) -> AuthService:  # pragma: no cover
    """Auth service whose client carries the session from the request cookies"""
    client = await db.create_server_client()
    access_token = request.cookies.get(auth.ACCESS_COOKIE)
    refresh_token = request.cookies.get(auth.REFRESH_COOKIE)

    if access_token and refresh_token:
        try:
            await client.auth.set_session(access_token, refresh_token)
        except Exception as e:
            logger.warning(f"Could not restore session from cookies: {e}")

    return AuthService(client)


def set_cookies(response: Response, session) -> None:
    response.set_cookie(
        key=auth.ACCESS_COOKIE,
        value=session.access_token,
        max_age=session.expires_in or settings.AUTH_COOKIE_MAX_AGE_SECONDS,
        **COMMON_COOKIE_OPTS,
    )
    response.set_cookie(
        key=auth.REFRESH_COOKIE,
        value=session.refresh_token,
        max_age=settings.REFRESH_COOKIE_MAX_AGE_SECONDS,
        **COMMON_COOKIE_OPTS,
    )


def delete_cookies(response: Response) -> None:
    for cookie in [auth.ACCESS_COOKIE, auth.REFRESH_COOKIE]:
        response.delete_cookie(cookie)


def user_summary(user) -> dict | None:
    if user is None:
        return None
    return {"id": user.id, "email": user.email}


@router.post("/signup")
async def auth_signup(
    form: SignUpForm, service: AuthService = Depends(get_auth_service)
):
    result = await service.sign_up(form.email, form.password, form.full_name)

    if not result.success:
        return JSONResponse(envelope(result), status_code=400)

    user = result.data.user
    session = result.data.session
    response = JSONResponse(
        {
            "success": True,
            "data": {
                "user": user_summary(user),
                # no session until the email address is confirmed
                "confirmation_required": session is None,
            },
        }
    )
    if session is not None:
        set_cookies(response, session)
    return response


@router.post("/signin")
async def auth_signin(
    form: SignInForm, service: AuthService = Depends(get_auth_service)
):
    result = await service.sign_in(form.email, form.password)

    if not result.success:
        return JSONResponse(envelope(result), status_code=400)

    response = JSONResponse(
        {"success": True, "data": {"user": user_summary(result.data.user)}}
    )

    # Yummy cookies
    set_cookies(response, result.data.session)
    return response


@router.post("/signout")
async def auth_signout(service: AuthService = Depends(get_session_auth_service)):
    result = await service.sign_out()

    response = JSONResponse(envelope(result), status_code=200 if result.success else 400)
    delete_cookies(response)
    return response


@router.get("/session")
async def auth_session(claims=Depends(auth.require_auth)):
    return {
        "success": True,
        "data": {
            "user": {"id": claims["sub"], "email": claims.get("email")},
            "expires_at": claims.get("exp"),
        },
    }
