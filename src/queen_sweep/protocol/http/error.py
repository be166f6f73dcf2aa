from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, cast

from fastapi import Request
from fastapi import HTTPException as FastAPIHTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status


logger = logging.getLogger(__name__)


_CODES: Dict[int, str] = {
    status.HTTP_400_BAD_REQUEST: "bad_request",
    status.HTTP_404_NOT_FOUND: "not_found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "method_not_allowed",
    422: "unprocessable_entity",
}


def error_envelope(
    *,
    code: str,
    message: str,
    err_type: str,
    request_id: str,
    field_errors: Optional[List[Dict[str, str]]] = None,
) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "error": {
            "code": code,
            "message": message,
            "type": err_type,
            "request_id": request_id,
        }
    }
    if field_errors:
        payload["error"]["field_errors"] = field_errors
    return payload


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "")


def _internal_error(request_id: str) -> JSONResponse:
    payload = error_envelope(
        code="internal_error",
        message="Internal Server Error",
        err_type="server_error",
        request_id=request_id,
    )
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=payload)


def _from_http_exception(exc: FastAPIHTTPException, request_id: str) -> JSONResponse:
    status_code = exc.status_code
    payload = error_envelope(
        code=status_to_code(status_code),
        message=exc.detail if isinstance(exc.detail, str) else str(exc.detail),
        err_type="client_error" if 400 <= status_code < 500 else "server_error",
        request_id=request_id,
    )
    return JSONResponse(status_code=status_code, content=payload)


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    if isinstance(exc, FastAPIHTTPException):
        return _from_http_exception(exc, _request_id(request))
    return _internal_error(_request_id(request))


async def exception_handler(request: Request, exc: Exception) -> JSONResponse:
    request_id = _request_id(request)
    if isinstance(exc, FastAPIHTTPException):
        return _from_http_exception(exc, request_id)
    logger.exception("Unhandled exception", extra={"request_id": request_id})
    return _internal_error(request_id)


async def request_validation_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    # Pydantic errors become field_errors in the envelope, status 422
    errors = []
    for e in cast(RequestValidationError, exc).errors():
        loc = ".".join(str(p) for p in e.get("loc", []) if p is not None)
        errors.append(
            {
                "field": loc,
                "code": e.get("type", "value_error"),
                "message": e.get("msg", "invalid value"),
            }
        )
    payload = error_envelope(
        code="unprocessable_entity",
        message="Validation error",
        err_type="client_error",
        request_id=_request_id(request),
        field_errors=errors or None,
    )
    return JSONResponse(status_code=422, content=payload)


def status_to_code(status_code: int) -> str:
    if status_code in _CODES:
        return _CODES[status_code]
    if 500 <= status_code < 600:
        return "internal_error"
    return "error"
