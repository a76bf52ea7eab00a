"""Exception handlers producing problem+json error responses."""

from http import HTTPStatus
from typing import Any

import logfire
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from propmgmt.application.resource.alerts import HeaderAlerts
from propmgmt.config import APISettings
from propmgmt.domain.error import BadRequestAlertError

PROBLEM_BASE_URL = "https://www.jhipster.tech/problem"
PROBLEM_MEDIA_TYPE = "application/problem+json"


def problem_response(
    status: int,
    title: str,
    problem_type: str = "about:blank",
    headers: dict[str, str] | None = None,
    **extra: Any,
) -> JSONResponse:
    """Build a problem+json response.

    Args:
        status: HTTP status code
        title: Human readable summary
        problem_type: Problem type URI
        headers: Extra response headers
        **extra: Additional problem members (message, entityName, ...)

    Returns:
        JSON response with the problem body
    """
    body = {"type": problem_type, "title": title, "status": int(status), **extra}
    return JSONResponse(
        status_code=status,
        content=body,
        headers=headers,
        media_type=PROBLEM_MEDIA_TYPE,
    )


def register_error_handlers(app: FastAPI, api_settings: APISettings) -> None:
    """Register exception handlers on the application.

    Args:
        app: FastAPI application
        api_settings: API settings (alert header app name)
    """
    alerts = HeaderAlerts(api_settings.app_name)

    @app.exception_handler(BadRequestAlertError)
    async def handle_bad_request_alert(
        request: Request, exc: BadRequestAlertError
    ) -> JSONResponse:
        logfire.warn(
            "Bad request",
            entity_name=exc.entity_name,
            error_key=exc.error_key,
            path=request.url.path,
        )
        return problem_response(
            HTTPStatus.BAD_REQUEST,
            exc.message,
            problem_type=f"{PROBLEM_BASE_URL}/problem-with-message",
            headers=alerts.failure(exc.entity_name, exc.error_key),
            entityName=exc.entity_name,
            errorKey=exc.error_key,
            message=f"error.{exc.error_key}",
            params=exc.entity_name,
        )

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        field_errors = [
            {
                "objectName": str(error["loc"][0]) if error["loc"] else "request",
                "field": ".".join(str(part) for part in error["loc"][1:]),
                "message": error["msg"],
            }
            for error in exc.errors()
        ]
        logfire.warn(
            "Request validation failed",
            path=request.url.path,
            field_errors=field_errors,
        )
        return problem_response(
            HTTPStatus.BAD_REQUEST,
            "Method argument not valid",
            problem_type=f"{PROBLEM_BASE_URL}/constraint-violation",
            message="error.validation",
            fieldErrors=field_errors,
        )

    @app.exception_handler(IntegrityError)
    async def handle_integrity_error(
        request: Request, exc: IntegrityError
    ) -> JSONResponse:
        logfire.warn(
            "Constraint violation",
            path=request.url.path,
            error=str(exc.orig),
        )
        return problem_response(
            HTTPStatus.CONFLICT,
            "Conflict",
            message="error.http.409",
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logfire.error(
            "Unexpected error",
            path=request.url.path,
            method=request.method,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return problem_response(
            HTTPStatus.INTERNAL_SERVER_ERROR,
            "Internal Server Error",
            message="error.http.500",
        )
