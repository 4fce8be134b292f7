from fastapi import Request, HTTPException, Depends
from fastapi.security import HTTPBearer
from app.config import AUTH_COOKIE_NAME
from sqlalchemy.orm import Session
from app.dependencies import get_session
from sqlalchemy.ext.asyncio import AsyncSession

from app.ringvote_auth.model import crud
from app.ringvote_auth.utils import decode_token

import jwt

async def decodeJWT(token: str, session: Session | AsyncSession):
    try:
        decoded_token = decode_token(token)
    except jwt.InvalidTokenError:
        raise HTTPException(status_code=403, detail="Invalid or expired token")
    user = await crud.get_user_by_id(user_id=decoded_token.get("id"), session=session)
    if user is None:
        raise HTTPException(status_code=403, detail="Invalid or expired token")
    return user


class AuthUser(HTTPBearer):

    """
    HTTPBearer class for authentication with Bearer tokens.

    The token is read from the Authorization header and, when
    missing, from the auth cookie set at login.
    """

    def __init__(self, auto_error: bool = True):
        super(AuthUser, self).__init__(auto_error=False)
        self.required = auto_error

    async def __call__(self, request: Request, session: Session | AsyncSession = Depends(get_session)):
        credentials = await super(AuthUser, self).__call__(request)
        token = credentials.credentials if credentials else request.cookies.get(AUTH_COOKIE_NAME)
        if not token:
            if self.required:
                raise HTTPException(status_code=401, detail="Access token required")
            return None
        try:
            user = await decodeJWT(token, session)
        except HTTPException:
            # Optional auth: a stale token or cookie makes the caller anonymous
            if self.required:
                raise
            return None
        return await self.check_user(user)

    async def check_user(self, user):
        return user


class AuthAdmin(AuthUser):

    """
    Same as AuthUser, restricted to administrators.
    """

    async def check_user(self, user):
        if not user.is_admin:
            raise HTTPException(status_code=403, detail="Administrator access required")
        return user
