"""Translation of validation and storage errors into HTTP responses."""
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.app.logging import get_logger
from src.client.schemas import ValidationFailureResponse, ValidationResponse
from src.shared.exceptions import StorageError, ValidationError

logger = get_logger(__name__)


def strip_parent_prefix(property_name: str) -> str:
    """Drop everything up to and including the first '.': personalData.firstName -> firstName."""
    _, dot, child = property_name.partition(".")
    return child if dot else property_name


def validation_failure_response(error: ValidationError) -> JSONResponse:
    """Render every aggregated failure as one HTTP 400 body."""
    body = ValidationFailureResponse(
        errors=[
            ValidationResponse(
                property_name=strip_parent_prefix(failure.property_name),
                message=failure.message,
            )
            for failure in error.failures
        ]
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=body.model_dump(mode="json", by_alias=True),
    )


async def _handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    return validation_failure_response(exc)


async def _handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies or parameters use the same 400 shape as rule failures."""
    body = ValidationFailureResponse(
        errors=[
            ValidationResponse(
                property_name=str(err["loc"][-1]) if err.get("loc") else "",
                message=err.get("msg", "Invalid value."),
            )
            for err in exc.errors()
        ]
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=body.model_dump(mode="json", by_alias=True),
    )


async def _handle_storage_error(request: Request, exc: StorageError) -> JSONResponse:
    logger.error(f"Storage unavailable while handling {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "The user store is currently unavailable."},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationError, _handle_validation_error)
    app.add_exception_handler(RequestValidationError, _handle_request_validation_error)
    app.add_exception_handler(StorageError, _handle_storage_error)
