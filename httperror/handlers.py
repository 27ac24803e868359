"""
Exception handlers for FastAPI applications.

Routes raise StatusError (or any exception chaining one) and the
handlers here translate it into a JSON error response.
No stack traces or internal details are exposed to clients.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

from httperror.config import Settings, settings as default_settings
from httperror.errors import HTTP_500, HasStatusCode, as_status_error, status_code
from httperror.response import error_response

logger = logging.getLogger(__name__)


def _log_error(exc: BaseException, settings: Settings) -> None:
    code = status_code(exc)
    if as_status_error(exc) is None:
        logger.error(
            "Unexpected error: %s",
            type(exc).__name__,
            exc_info=(type(exc), exc, exc.__traceback__),
        )
    elif code >= HTTP_500:
        logger.error("Server error %d: %s", code, exc)
    elif settings.log_client_errors:
        logger.warning("Client error %d: %s", code, exc)


class ChainedStatusErrorMiddleware(BaseHTTPMiddleware):
    """Middleware answering exceptions that chain a status error.

    Exception handlers are looked up by the raised type only, so
    ``raise RuntimeError(...) from status_error`` would otherwise fall
    through to the server error handler, which re-raises to the server
    after responding. Anything that does not chain a status error is
    re-raised unchanged.
    """

    def __init__(self, app: ASGIApp, settings: Settings) -> None:
        super().__init__(app)
        self.settings = settings

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Pass the request on and translate chained status errors."""
        try:
            return await call_next(request)
        except Exception as exc:
            if as_status_error(exc) is None:
                raise
            _log_error(exc, self.settings)
            return error_response(exc)


def register_error_handlers(app: FastAPI, settings: Optional[Settings] = None) -> None:
    """Register the error handlers on the FastAPI application.

    Must be called before the application starts serving requests.

    Args:
        app: The FastAPI application instance.
        settings: Overrides the environment-loaded settings.
    """
    config = settings or default_settings

    app.add_middleware(ChainedStatusErrorMiddleware, settings=config)

    @app.exception_handler(HasStatusCode)
    async def handle_status_error(
        _request: Request, exc: HasStatusCode
    ) -> JSONResponse:
        """Answer with the code and message the error carries."""
        _log_error(exc, config)
        return error_response(exc)

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all. Unrecognized errors answer 500 with the details hidden."""
        _log_error(exc, config)
        return error_response(exc)
