"""
Exception handlers shared by every route.

- Request validation errors become 400 (not FastAPI's 422) so that every
  validation failure reaches clients as a bad request.
- Anything uncaught becomes a 500 carrying only the exception message. This
  handler runs outside the middleware stack, so it re-applies CORS itself.
"""
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.app.api.cors import CorsPolicy
from src.app.logging import get_logger

logger = get_logger(__name__)

INVALID_REQUEST_MESSAGE = "Solicitud inválida."


def register_exception_handlers(app: FastAPI, cors_policy: CorsPolicy) -> None:
    """Register the validation and catch-all handlers on the app."""

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = [
            {
                "field": ".".join(str(part) for part in error["loc"][1:]),
                "message": error["msg"],
                "type": error["type"],
            }
            for error in exc.errors()
        ]
        logger.warning("Invalid request to %s %s: %s", request.method, request.url.path, errors)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": INVALID_REQUEST_MESSAGE, "errors": errors},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        response = JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(exc)},
        )
        return cors_policy.apply(request, response)
