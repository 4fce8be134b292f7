from fastapi import APIRouter, Depends, Response

from app.dependencies import get_session
from app.config import AUTH_COOKIE_NAME, AUTH_COOKIE_SECURE, JWT_EXPIRES_DAYS
from app.logger import logger

from app.ringvote_auth.auth_bearer import AuthUser
from app.ringvote_auth.model import models, schemas
from app.ringvote_auth.utils import generate_token, get_or_create_external_user

auth_router = APIRouter(prefix="/api/auth")


@auth_router.post("/microsoft", response_model=schemas.LoginOut, status_code=200)
async def login_microsoft(
    login: schemas.MicrosoftLoginIn,
    response: Response,
    session=Depends(get_session),
):
    """
    Login with the profile obtained from the Microsoft identity flow.

    The token exchange with Microsoft happens in the browser, this route
    trusts the profile it receives.
    """
    user = await get_or_create_external_user(session=session, login=login)
    token = generate_token(user)

    response.set_cookie(
        key=AUTH_COOKIE_NAME,
        value=token,
        httponly=True,
        secure=AUTH_COOKIE_SECURE,
        samesite="strict",
        max_age=JWT_EXPIRES_DAYS * 24 * 60 * 60,
    )
    logger.info("User %s logged in" % user.id)
    return {"user": user, "token": token}


@auth_router.post("/logout", status_code=200)
async def logout(response: Response):
    """
    Logout a user
    """
    response.delete_cookie(AUTH_COOKIE_NAME)
    return {"message": "Logged out successfully"}


@auth_router.get("/me", response_model=schemas.UserOut, status_code=200)
async def get_me(current_user: models.User = Depends(AuthUser())):
    """
    Returns the authenticated user
    """
    return current_user
