import os

# Retrieve enviroment variables from .env file

DATABASE_USER = os.environ.get("DATABASE_USER")
DATABASE_PASS = os.environ.get("DATABASE_PASS")
DATABASE_HOST = os.environ.get("DATABASE_HOST")
DATABASE_NAME = os.environ.get("DATABASE_NAME")

# Full SQLAlchemy URL, takes precedence over the DATABASE_* parts
DATABASE_URL = os.environ.get("DATABASE_URL")

USE_ASYNC_ENGINE = bool(int(os.environ.get("USE_ASYNC_ENGINE", False)))

SECRET_KEY: str = os.environ.get("SECRET_KEY", "ringvote-development-secret-key")

JWT_ALGORITHM = "HS256"
JWT_ISSUER = os.environ.get("JWT_ISSUER", "ringvote")
JWT_AUDIENCE = os.environ.get("JWT_AUDIENCE", "ringvote-users")
JWT_EXPIRES_DAYS = int(os.environ.get("JWT_EXPIRES_DAYS", 7))

AUTH_COOKIE_NAME = os.environ.get("AUTH_COOKIE_NAME", "auth_token")
AUTH_COOKIE_SECURE = bool(int(os.environ.get("AUTH_COOKIE_SECURE", False)))

TIMEZONE = os.environ.get("TIMEZONE", "UTC")

ORIGINS: list = [
    origin.strip() for origin in os.environ.get("ORIGINS", "*").split(",") if origin.strip()
]
