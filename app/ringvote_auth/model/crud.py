from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update
from sqlalchemy.orm import Session
from app.ringvote_auth.model import models, schemas
from app.database import db_handler

async def get_user_by_id(session: Session | AsyncSession, user_id: int):
    query = select(models.User).where(models.User.id == user_id)
    result = await db_handler.execute(session, query)
    return result.scalars().first()

async def get_user_by_email(session: Session | AsyncSession, email: str):
    query = select(models.User).where(models.User.email == email)
    result = await db_handler.execute(session, query)
    return result.scalars().first()

async def get_user_by_external_id(session: Session | AsyncSession, external_id: str):
    query = select(models.User).where(models.User.external_id == external_id)
    result = await db_handler.execute(session, query)
    return result.scalars().first()


async def create_user(session: Session | AsyncSession, user: schemas.UserIn):
    db_user = models.User(**user.model_dump())
    db_handler.add(session, db_user)
    await db_handler.commit(session)
    await db_handler.refresh(session, db_user)
    return db_user

async def update_user(session: Session | AsyncSession, email: str, fields: dict):
    query = update(models.User).where(
        models.User.email == email
    ).values(fields)
    await db_handler.execute(session, query)
    await db_handler.commit(session)

    user = await get_user_by_email(session=session, email=email)
    if user is not None:
        await db_handler.refresh(session, user)
    return user
