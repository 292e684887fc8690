"""FastAPI boundary for guard failures.

Routes let :class:`InvalidArgument` propagate; the handler installed here
turns it into a 422 response with a stable JSON error body.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Literal

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from precheck.errors import InvalidArgument


class ErrorResponse(BaseModel):
    error: str
    code: Literal["INVALID_ARGUMENT"]
    details: dict[str, object] | None = None
    timestamp: datetime


async def invalid_argument_handler(request: Request, exc: Exception) -> JSONResponse:
    if not isinstance(exc, InvalidArgument):
        raise exc
    payload = ErrorResponse(
        error=exc.message,
        code="INVALID_ARGUMENT",
        details={"type": type(exc).__name__},
        timestamp=datetime.now(timezone.utc),
    )
    return JSONResponse(status_code=422, content=payload.model_dump(mode="json"))


def install_exception_handlers(app: FastAPI) -> FastAPI:
    app.add_exception_handler(InvalidArgument, invalid_argument_handler)
    return app
