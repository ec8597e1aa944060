"""
Exception handlers for the FastAPI app.
Errors go back as text/plain bodies; only successful responses are JSON.
"""

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_405_METHOD_NOT_ALLOWED


def _describe(error: dict) -> str:
    loc = ".".join(str(part) for part in error.get("loc", ()))
    return f"{loc}: {error.get('msg', 'invalid value')}" if loc else error.get("msg", "invalid value")


def validation_exception_handler(request: Request, exc: RequestValidationError):
    # Malformed JSON and type mismatches in the receipt body both land here.
    detail = "\n".join(_describe(e) for e in exc.errors()) or "Invalid request body"
    return PlainTextResponse(detail, status_code=HTTP_400_BAD_REQUEST)


def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == HTTP_405_METHOD_NOT_ALLOWED:
        detail = "Invalid request method"
    else:
        detail = str(exc.detail)
    return PlainTextResponse(detail, status_code=exc.status_code, headers=getattr(exc, "headers", None))
