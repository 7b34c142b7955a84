"""Exception handlers: every failure renders as ``{success, message, code, errors?}``."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ExpectedVersionError, ObjectNotFoundError, ValidationError

from storefront.errors import ConcurrentUpdate, StorefrontError
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def error_body(message: str, code: str, errors=None) -> dict:
    body = {"success": False, "message": message, "code": code}
    if errors:
        body["errors"] = errors
    return body


def _field_errors(messages) -> list[dict]:
    if not isinstance(messages, dict):
        return [{"field": None, "message": str(messages)}]
    return [
        {"field": field, "message": message}
        for field, field_messages in messages.items()
        for message in (field_messages if isinstance(field_messages, list) else [field_messages])
    ]


async def storefront_error_handler(request: Request, exc: StorefrontError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.message, exc.code, exc.errors))


async def domain_validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content=error_body("Validation failed", "VALIDATION_ERROR", _field_errors(exc.messages)),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {"field": ".".join(str(part) for part in error["loc"] if part != "body"), "message": error["msg"]}
        for error in exc.errors()
    ]
    return JSONResponse(status_code=400, content=error_body("Validation failed", "VALIDATION_ERROR", errors))


async def object_not_found_handler(request: Request, exc: ObjectNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content=error_body("Resource not found", "NOT_FOUND"))


async def expected_version_handler(request: Request, exc: ExpectedVersionError) -> JSONResponse:
    conflict = ConcurrentUpdate()
    return JSONResponse(status_code=conflict.status_code, content=error_body(conflict.message, conflict.code))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error", path=request.url.path, method=request.method)
    return JSONResponse(status_code=500, content={"message": str(exc) or "Internal server error"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StorefrontError, storefront_error_handler)
    app.add_exception_handler(ValidationError, domain_validation_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ObjectNotFoundError, object_not_found_handler)
    app.add_exception_handler(ExpectedVersionError, expected_version_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
