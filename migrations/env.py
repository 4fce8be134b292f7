# migrations/env.py

from logging.config import fileConfig
from alembic import context

from app.database import Base, db_url
from app.ringvote.model import models  # noqa: F401

config = context.config
fileConfig(config.config_file_name)
target_metadata = Base.metadata

# Migrations always run on a sync driver
sync_url = db_url.replace("+asyncmy", "+pymysql").replace("+aiosqlite", "")


def run_migrations_offline():
    context.configure(
        url=sync_url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    from sqlalchemy import create_engine

    connectable = create_engine(sync_url)
    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata
        )
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
