"""Translate domain and infrastructure errors into HTTP responses.

Conflict and authentication failures render the generic ``common/js.html``
alert page; infrastructure failures only ever return a generic message, the
detail goes to the log.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from redis.exceptions import RedisError
from sqlalchemy.exc import SQLAlchemyError

from goodjob.common.exceptions import (
    AuthenticationError,
    ConfigurationError,
    ConflictError,
    GoodJobError,
    NotFoundError,
)
from goodjob.common.templates import templates

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "일시적인 오류가 발생했습니다. 잠시 후 다시 시도해주세요."


def _alert(request: Request, message: str, status_code: int):
    return templates.TemplateResponse(
        request, "common/js.html", {"message": message}, status_code=status_code
    )


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ConflictError)
    async def conflict_handler(request: Request, exc: ConflictError):
        logger.info("conflict at %s", request.url.path)
        return _alert(request, exc.message, status.HTTP_409_CONFLICT)

    @app.exception_handler(AuthenticationError)
    async def authentication_handler(request: Request, exc: AuthenticationError):
        logger.info("authentication failed at %s", request.url.path)
        return _alert(request, exc.message, status.HTTP_401_UNAUTHORIZED)

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": exc.message})

    @app.exception_handler(ConfigurationError)
    async def configuration_handler(request: Request, exc: ConfigurationError):
        logger.error("configuration error at %s: %s", request.url.path, exc.message, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": SERVER_ERROR_MESSAGE},
        )

    @app.exception_handler(RedisError)
    async def redis_handler(request: Request, exc: RedisError):
        logger.error("redis unavailable at %s", request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": SERVER_ERROR_MESSAGE},
        )

    @app.exception_handler(SQLAlchemyError)
    async def database_handler(request: Request, exc: SQLAlchemyError):
        logger.error("database error at %s", request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": SERVER_ERROR_MESSAGE},
        )

    @app.exception_handler(GoodJobError)
    async def goodjob_handler(request: Request, exc: GoodJobError):
        logger.warning("unhandled domain error at %s: %s", request.url.path, type(exc).__name__)
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})
