"""
Reason phrases for HTTP status codes.

The table is built once from the standard library's HTTPStatus
enumeration and exposed read-only.
"""

from http import HTTPStatus
from types import MappingProxyType
from typing import Mapping, Optional

from httperror.errors import status_code

REASON_PHRASES: Mapping[int, str] = MappingProxyType(
    {int(status): status.phrase for status in HTTPStatus}
)


def status_text(code: int) -> str:
    """Return the reason phrase for a code, or "" if the code is unknown."""
    return REASON_PHRASES.get(code, "")


def reason_phrase(err: Optional[BaseException]) -> str:
    """Return the reason phrase for the status an error classifies to.

    Args:
        err: Any error, or None for success.

    Returns:
        The standard phrase, e.g. "Not Found". Empty for codes without one.
    """
    return status_text(status_code(err))
