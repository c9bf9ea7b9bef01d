"""Reusable error primitives for API exception handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from fastapi import Request, status
from fastapi.responses import JSONResponse

from ..exceptions import ConfigurationError


@dataclass(slots=True)
class ApiError(Exception):
    """Structured application-level error for HTTP handlers."""

    status_code: int
    code: str
    message: str
    details: Mapping[str, object] | None = None

    def to_response(self) -> JSONResponse:
        """Materialise the error into a ``JSONResponse`` instance."""

        error: dict[str, object] = {"code": self.code, "message": self.message}
        if self.details:
            error["details"] = dict(self.details)
        return JSONResponse(status_code=self.status_code, content={"error": error})


async def api_error_handler(_: Request, exc: ApiError) -> JSONResponse:
    """Convert :class:`ApiError` exceptions into JSON payloads."""

    return exc.to_response()


async def configuration_error_handler(_: Request, exc: ConfigurationError) -> JSONResponse:
    """Surface corrupt persisted configuration as ``422``."""

    return invalid_configuration_error(exc).to_response()


def invalid_configuration_error(exc: ConfigurationError) -> ApiError:
    """Return an :class:`ApiError` describing corrupt configuration."""

    return ApiError(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "invalid_configuration",
        exc.message,
        details={"path": exc.path} if exc.path else None,
    )


def not_found_error(message: str) -> ApiError:
    """Return an :class:`ApiError` representing a missing resource."""

    return ApiError(status.HTTP_404_NOT_FOUND, "not_found", message)


__all__ = [
    "ApiError",
    "api_error_handler",
    "configuration_error_handler",
    "invalid_configuration_error",
    "not_found_error",
]
