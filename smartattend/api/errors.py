import logging
from contextlib import contextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status

from smartattend.exceptions import SmartAttendError, StoreFailure

logger = logging.getLogger(__name__)


@contextmanager
def failure_boundary(message: str):
    """Let domain errors through; log anything else and report ``message``."""
    try:
        yield
    except SmartAttendError:
        raise
    except Exception:
        logger.exception(message)
        raise StoreFailure(message)


async def smartattend_error_handler(request: Request, exc: SmartAttendError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    detail = "Invalid request body"
    if errors:
        field = ".".join(str(part) for part in errors[0].get("loc", ()) if part != "body")
        detail = f"Invalid value for {field}: {errors[0].get('msg')}" if field else errors[0].get("msg", detail)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": detail})


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal error. Please try again or contact admin."},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SmartAttendError, smartattend_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
