from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


logger = logging.getLogger("articles_api.errors")


class ArticleError(Exception):
    """Base for every failure an article operation reports to the client."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    @property
    def message(self) -> str:
        return str(self)


class ArticleValidationError(ArticleError):
    """A required field is missing or empty."""


class ArticleConflictError(ArticleError):
    """Another article already carries the requested title."""


class ArticleNotFoundError(ArticleError):
    """No row matches the given id."""


class EmptyArticlesError(ArticleError):
    """The articles table holds no rows."""


class ArticleStorageError(ArticleError):
    """The database could not be reached or rejected the statement."""


def error_body(message: str) -> dict:
    return {"message": message}


async def article_error_handler(request: Request, exc: ArticleError):
    return JSONResponse(error_body(exc.message), status_code=exc.status_code)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    problems = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        problems.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    message = "Invalid request: " + "; ".join(problems)
    logger.warning(
        "Request rejected",
        extra={"event": "request_invalid", "path": str(request.url.path)},
    )
    # Validation failures share the 500 status of every other article error
    return JSONResponse(error_body(message), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(
        "Unhandled error",
        extra={"event": "unhandled_error", "path": str(request.url.path)},
    )
    return JSONResponse(error_body(str(exc)), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ArticleError, article_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
