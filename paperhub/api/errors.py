"""
Error taxonomy of the HTTP layer and the handlers that render it.

- RequestValidationFailed  -> 400 {"error": "Validation Error", "message": ...}
- BodyValidationFailed     -> 400 {"error": "Validation Error", "messages": [...]}
- EntityNotFound           -> 404 {"error": "<Entity> not found"}
- AuthorConstraintError    -> 400 {"error": "Constraint Error", "message": ...}
- anything else            -> 500 generic body, traceback only in the log
"""

import logging
from typing import List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from paperhub.database.exceptions import AuthorConstraintError

logger = logging.getLogger(__name__)

VALIDATION_ERROR = "Validation Error"
CONSTRAINT_ERROR = "Constraint Error"

INVALID_ID_FORMAT = "Invalid ID format"
INVALID_QUERY_FORMAT = "Invalid query parameter format"
INVALID_BODY = "Invalid request body"


class RequestValidationFailed(Exception):
    """Malformed path or query parameter."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class BodyValidationFailed(Exception):
    """Request body failed field validation; carries the ordered messages."""

    def __init__(self, messages: List[str]):
        self.messages = list(messages)
        super().__init__("; ".join(self.messages))


class EntityNotFound(Exception):
    def __init__(self, entity: str):
        self.entity = entity
        super().__init__(f"{entity} not found")


async def _request_validation_failed(request: Request, exc: RequestValidationFailed):
    return JSONResponse(
        status_code=400,
        content={"error": VALIDATION_ERROR, "message": exc.message},
    )


async def _body_validation_failed(request: Request, exc: BodyValidationFailed):
    return JSONResponse(
        status_code=400,
        content={"error": VALIDATION_ERROR, "messages": exc.messages},
    )


async def _malformed_body(request: Request, exc: Exception):
    # Unparseable JSON
    logger.info("Rejected malformed body on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=400,
        content={"error": VALIDATION_ERROR, "message": INVALID_BODY},
    )


async def _entity_not_found(request: Request, exc: EntityNotFound):
    return JSONResponse(status_code=404, content={"error": str(exc)})


async def _author_constraint(request: Request, exc: AuthorConstraintError):
    return JSONResponse(
        status_code=400,
        content={"error": CONSTRAINT_ERROR, "message": str(exc)},
    )


async def _unexpected(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal Server Error",
            "message": "An unexpected error occurred",
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationFailed, _request_validation_failed)
    app.add_exception_handler(BodyValidationFailed, _body_validation_failed)
    app.add_exception_handler(RequestValidationError, _malformed_body)
    app.add_exception_handler(EntityNotFound, _entity_not_found)
    app.add_exception_handler(AuthorConstraintError, _author_constraint)
    app.add_exception_handler(Exception, _unexpected)
