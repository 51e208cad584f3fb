"""Error normalizer: the one place a failure becomes an HTTP response.

Two modes, chosen by ``APP_ENV``:

* ``development``: every failure, expected or not, discloses its message,
  type, detail and traceback.
* ``production``: operational failures (``AppError`` with
  ``is_operational``) disclose status and message only; anything else is
  answered with a fixed generic 500 while the real cause goes to the log.
"""

import logging
import traceback
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from blog_api.application.pipeline import Failure, StageResult
from blog_api.domain.exceptions import AppError, NotFoundError, ValidationError, Violation

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Something went very wrong!"


class HTTPStatusError(AppError):
    """A framework-level HTTP error (e.g. 405) carried through the normalizer."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        super().__init__(message)


class ErrorNormalizer:
    def __init__(self, app_env: str):
        self._development = app_env != "production"

    @property
    def development(self) -> bool:
        return self._development

    def finalize(self, outcome: StageResult[Response]) -> Response:
        """Pass a handler's response through, or render the failure."""
        if isinstance(outcome, Failure):
            return self.render(outcome.error)
        return outcome.value

    def render(self, exc: Exception) -> JSONResponse:
        operational = isinstance(exc, AppError) and exc.is_operational
        status_code = exc.status_code if isinstance(exc, AppError) else 500
        status = exc.status if isinstance(exc, AppError) else "error"
        message = exc.message if isinstance(exc, AppError) else str(exc)

        if operational:
            logger.info("%d %s: %s", status_code, type(exc).__name__, message)
        else:
            logger.error("Unhandled %s: %s", type(exc).__name__, message, exc_info=exc)

        if self._development:
            content: dict[str, Any] = {
                "status": status,
                "message": message,
                "error": {
                    "type": type(exc).__name__,
                    "detail": str(exc),
                    "status_code": status_code,
                    "is_operational": operational,
                },
                "stack": "".join(traceback.format_exception(exc)),
            }
        elif operational:
            content = {"status": status, "message": message}
        else:
            status_code = 500
            content = {"status": "error", "message": GENERIC_ERROR_MESSAGE}

        if isinstance(exc, ValidationError) and (operational or self._development):
            content["errors"] = [v.to_dict() for v in exc.violations]

        headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
        return JSONResponse(status_code=status_code, content=content, headers=headers)


def register_exception_handlers(app: FastAPI, normalizer: ErrorNormalizer) -> None:
    """Route failures raised outside the pipeline through the same normalizer."""

    async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code == 404:
            error: AppError = NotFoundError(f"Can't find {request.url.path} on this server!")
        else:
            error = HTTPStatusError(exc.status_code, str(exc.detail))
        return normalizer.render(error)

    async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
        violations = [
            Violation(".".join(str(part) for part in err["loc"]), err["msg"])
            for err in exc.errors()
        ]
        return normalizer.render(ValidationError(violations))

    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        return normalizer.render(exc)

    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(Exception, handle_unexpected)
