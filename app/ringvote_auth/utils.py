import jwt

from datetime import timedelta

from app.config import SECRET_KEY, JWT_ALGORITHM, JWT_ISSUER, JWT_AUDIENCE, JWT_EXPIRES_DAYS
from app.database import db_handler
from app.logger import logger
from app.ringvote.utils import tz_now

from app.ringvote_auth.model import models as auth_models
from app.ringvote_auth.model import crud as auth_crud
from app.ringvote_auth.model import schemas as auth_schemas

from sqlalchemy.orm import Session
from sqlalchemy.ext.asyncio import AsyncSession


def generate_token(user: auth_models.User) -> str:
    now = tz_now()
    payload = {
        "id": user.id,
        "email": user.email,
        "isAdmin": bool(user.is_admin),
        "microsoftId": user.external_id,
        "iat": now,
        "exp": now + timedelta(days=JWT_EXPIRES_DAYS),
        "iss": JWT_ISSUER,
        "aud": JWT_AUDIENCE,
    }
    return jwt.encode(payload, SECRET_KEY, algorithm=JWT_ALGORITHM)


def decode_token(token: str) -> dict:
    """
    Raises jwt.InvalidTokenError on a bad signature, a wrong
    issuer/audience or an expired token.
    """
    return jwt.decode(
        token,
        SECRET_KEY,
        algorithms=[JWT_ALGORITHM],
        issuer=JWT_ISSUER,
        audience=JWT_AUDIENCE,
    )


async def get_or_create_external_user(session: Session | AsyncSession, login: auth_schemas.MicrosoftLoginIn) -> auth_models.User:
    """
    Resolves the user behind an identity provider profile.

    Lookup order: the external id, then the email of a user not yet
    linked to any external account (the id gets linked). Otherwise a
    regular, non admin, user is created.
    """
    user = await auth_crud.get_user_by_external_id(session=session, external_id=login.microsoft_id)
    if user is not None:
        return user

    user = await auth_crud.get_user_by_email(session=session, email=login.email)
    if user is not None and user.external_id is None:
        logger.info("Linking external account to user %s" % user.id)
        return await auth_crud.update_user(
            session=session, email=login.email, fields={"external_id": login.microsoft_id}
        )

    user_in = auth_schemas.UserIn(
        email=login.email,
        name=login.name,
        external_id=login.microsoft_id,
        is_admin=False,
    )
    user = await auth_crud.create_user(session=session, user=user_in)
    logger.info("User %s created from external login" % user.id)
    return user


@db_handler.func_with_session
async def create_admin(session, email: str, name: str) -> auth_models.User:
    """
    Create a new administrator
    :param email: email of the user
    :param name: display name of the user
    """
    user = await auth_crud.get_user_by_email(session=session, email=email)
    if user is not None:
        return await auth_crud.update_user(session=session, email=email, fields={"is_admin": True})

    user_in = auth_schemas.UserIn(email=email, name=name, is_admin=True)
    user = await auth_crud.create_user(session=session, user=user_in)
    logger.info("Admin user %s created successfully!" % email)
    return user


@db_handler.func_with_session
async def grant_admin(session, email: str) -> auth_models.User | None:
    """
    Give the admin flag to an existing user
    :param email: email of the user
    """
    user = await auth_crud.update_user(session=session, email=email, fields={"is_admin": True})
    if user is None:
        logger.warning("No user with email %s" % email)
    else:
        logger.info("User %s is now an admin" % email)
    return user
