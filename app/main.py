from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette_context import context

from .ringvote.routes import api_router
from .ringvote_auth.routes import auth_router

from app.logger import logger
from app.middleware import register_middlewares
from app.ringvote.exceptions import PersistenceError, RingVoteError

app = FastAPI(title="RingVote")

app.logger = logger

register_middlewares(app)

# Routes
app.include_router(api_router)
app.include_router(auth_router)


def request_id() -> str | None:
    return context.get("X-Request-ID") if context.exists() else None


@app.exception_handler(RingVoteError)
async def ringvote_error_handler(request: Request, exc: RingVoteError):
    if exc.status_code >= 500:
        logger.bind(request_id=request_id()).opt(exception=exc.__cause__).error(
            "%s %s failed: %s" % (request.method, request.url.path, exc.message)
        )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.bind(request_id=request_id()).opt(exception=exc).error(
        "%s %s failed on the database" % (request.method, request.url.path)
    )
    error = PersistenceError()
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = [
        {
            "field": ".".join(str(part) for part in error["loc"] if part != "body"),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]
    return JSONResponse(status_code=400, content={"detail": "Invalid request data", "errors": errors})
