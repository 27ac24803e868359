"""
HTTP status errors.

Lets application code signal "this failure should surface to clients
as status X with message Y" without every layer knowing about HTTP,
and writes such errors as JSON responses at the boundary.
"""

from httperror.errors import (
    HasStatusCode,
    StatusError,
    as_status_error,
    equal,
    error_message,
    new,
    status_code,
    unwrap,
)
from httperror.logging import configure_logging
from httperror.response import error_payload, error_response, write_response
from httperror.status import REASON_PHRASES, reason_phrase, status_text

__version__ = "0.1.0"

__all__ = [
    "HasStatusCode",
    "REASON_PHRASES",
    "StatusError",
    "as_status_error",
    "configure_logging",
    "equal",
    "error_message",
    "error_payload",
    "error_response",
    "new",
    "reason_phrase",
    "status_code",
    "status_text",
    "unwrap",
    "write_response",
]
