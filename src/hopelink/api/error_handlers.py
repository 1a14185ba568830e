"""Global exception handlers: every error leaves the API as {"message": ...}."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from hopelink.core.errors import HopeLinkError

logger = logging.getLogger(__name__)

# First path segment after /api -> entity named in validation errors.
INVALID_DATA_MESSAGES = {
    "register": "Invalid user data",
    "login": "Login failed",
    "users": "Invalid user data",
    "initiatives": "Invalid initiative data",
    "stories": "Invalid story data",
    "messages": "Invalid message data",
    "conversations": "Invalid message data",
    "donations": "Invalid donation data",
    "supports": "Invalid support data",
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(HopeLinkError)
    async def domain_error_handler(request: Request, exc: HopeLinkError):
        return JSONResponse(
            status_code=exc.http_status,
            content={"message": exc.message},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "message": _invalid_data_message(request.url.path),
                "errors": jsonable_encoder(exc.errors()),
            },
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )


def _invalid_data_message(path: str) -> str:
    segments = [s for s in path.split("/") if s]
    if len(segments) >= 2 and segments[0] == "api":
        return INVALID_DATA_MESSAGES.get(segments[1], "Invalid request data")
    return "Invalid request data"
