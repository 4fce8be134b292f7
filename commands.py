from app.database import Base, engine
from app.config import USE_ASYNC_ENGINE
from app.ringvote.model import models  # noqa: F401
from app.ringvote.seed import seed_demo_election
from app.ringvote_auth.utils import create_admin, grant_admin
import asyncio
import sys

DEMO_ADMIN_EMAIL = "admin@securevote.com"
DEMO_ADMIN_NAME = "Admin User"


async def init_models():
    method = sys.argv[1] if len(sys.argv) > 1 else None
    methods = {
        "reset_db": reset_db,
        "create_admin": create_admin_user,
        "grant_admin": grant_admin_user,
        "seed_demo": seed_demo,
    }
    if method not in methods:
        print(f"Unknown method: {method}. Available methods: {', '.join(methods.keys())}")
        return

    await methods[method](*sys.argv[2:])


async def reset_db():
    if USE_ASYNC_ENGINE:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
    else:
        Base.metadata.drop_all(bind=engine)
        Base.metadata.create_all(bind=engine)
    print("Database tables recreated")

async def create_admin_user(email: str, name: str):
    await create_admin(email, name)
    print(f"Admin user {email} created successfully")

async def grant_admin_user(email: str):
    user = await grant_admin(email)
    if user is None:
        print(f"No user with email {email}")
        return
    print(f"User {email} is now an admin")

async def seed_demo():
    await create_admin(DEMO_ADMIN_EMAIL, DEMO_ADMIN_NAME)
    election = await seed_demo_election()
    print(f"Demo election {election.id} seeded, admin user {DEMO_ADMIN_EMAIL}")

if __name__ == "__main__":
    asyncio.run(init_models())
