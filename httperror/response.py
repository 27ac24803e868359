"""
JSON error responses.

Writes the classification of an error onto a Starlette response:
status line, JSON content type, nosniff header and a single-field
``{"message": ...}`` body. Internal details of server-side failures
are never exposed to clients.
"""

import json
import logging
from typing import Optional

from starlette.responses import JSONResponse, Response

from httperror.errors import HTTP_500, error_message, status_code
from httperror.status import status_text

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"
ERROR_HEADERS = {
    "Content-Type": JSON_MEDIA_TYPE,
    "X-Content-Type-Options": "nosniff",
}


def error_payload(err: Optional[BaseException]) -> dict[str, str]:
    """Build the client-visible payload for an error.

    A 500 always carries the standard phrase instead of the error text.
    """
    code = status_code(err)
    if code == HTTP_500:
        message = status_text(code)
    else:
        message = error_message(err)
    return {"message": message}


def _render(payload: dict[str, str]) -> bytes:
    return json.dumps(
        payload,
        ensure_ascii=False,
        allow_nan=False,
        indent=None,
        separators=(",", ":"),
    ).encode("utf-8")


def write_response(response: Response, err: Optional[BaseException]) -> None:
    """Write a status code and a JSON-encoded message based on the error.

    The body looks like ``{"message":"error writing to DB"}``. When the
    status is 500 the message is always "Internal Server Error".

    The response is not sent or closed; the caller must make sure nothing
    else is written to it afterwards. Failures while producing the body
    are logged and swallowed, leaving an empty body behind the status.

    Args:
        response: The response to fill in.
        err: The error to report, or None for success.
    """
    for header_name, header_value in ERROR_HEADERS.items():
        response.headers[header_name] = header_value

    response.status_code = status_code(err)

    try:
        body = _render(error_payload(err))
        response.body = body
        response.headers["Content-Length"] = str(len(body))
    except Exception:
        logger.warning(
            "Could not write error body for status %d",
            response.status_code,
            exc_info=True,
        )
        response.body = b""
        response.headers["Content-Length"] = "0"


def error_response(err: Optional[BaseException]) -> JSONResponse:
    """Build a new JSONResponse describing the error.

    Args:
        err: The error to report, or None for success.

    Returns:
        A response ready to be returned from a route or exception handler.
    """
    response = JSONResponse(content=None)
    write_response(response, err)
    return response
