from __future__ import annotations

from typing import Any, Mapping, cast

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from foodorder.api.middleware.request_context import get_request_id
from foodorder.api.params import InvalidParameterError
from foodorder.api.templating import templates
from foodorder.application.use_cases.get_order import OrderNotFoundError
from foodorder.application.use_cases.update_order_status import InvalidOrderStatusError

_HTTP_ERROR_CODES = {
    400: "BAD_REQUEST",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
}


def _error_response(
    request: Request,
    *,
    status_code: int,
    code: str,
    message: str,
    details: dict[str, Any] | None = None,
    headers: Mapping[str, str] | None = None,
) -> Response:
    if request.url.path.startswith("/api/"):
        return JSONResponse(
            status_code=status_code,
            content={
                "error": {
                    "code": code,
                    "message": message,
                    "details": details or {},
                },
                "requestId": get_request_id(),
            },
            headers=dict(headers) if headers else None,
        )

    return templates.TemplateResponse(
        request,
        "error.html",
        {
            "status_code": status_code,
            "code": code,
            "message": message,
            "details": details or {},
            "request_id": get_request_id(),
        },
        status_code=status_code,
        headers=dict(headers) if headers else None,
    )


def _exception_handler(status_code: int, code: str):
    async def handler(request: Request, exc: Exception) -> Response:
        details = getattr(exc, "details", None)
        return _error_response(
            request,
            status_code=status_code,
            code=code,
            message=str(exc),
            details=details if isinstance(details, dict) else None,
        )

    return handler


def _describe_errors(errors: list[Any]) -> list[str]:
    described = []
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        described.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return described


async def _http_exception_handler(request: Request, exc: Exception) -> Response:
    http_exc = cast(StarletteHTTPException, exc)
    return _error_response(
        request,
        status_code=http_exc.status_code,
        code=_HTTP_ERROR_CODES.get(http_exc.status_code, "HTTP_ERROR"),
        message=str(http_exc.detail) if http_exc.detail else "request failed",
        headers=http_exc.headers,
    )


async def _validation_exception_handler(request: Request, exc: Exception) -> Response:
    errors = exc.errors()  # type: ignore[attr-defined]
    return _error_response(
        request,
        status_code=400,
        code="INVALID_REQUEST",
        message="request validation failed",
        details={"errors": _describe_errors(list(errors))},
    )


def register_exception_handlers(app: FastAPI) -> None:
    mappings: list[tuple[type[Exception], int, str]] = [
        (InvalidParameterError, 400, "INVALID_PARAMETER"),
        (InvalidOrderStatusError, 400, "INVALID_ORDER_STATUS"),
        (OrderNotFoundError, 404, "ORDER_NOT_FOUND"),
    ]

    for exc_cls, status_code, code in mappings:
        app.add_exception_handler(exc_cls, _exception_handler(status_code, code))

    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(ValidationError, _validation_exception_handler)
