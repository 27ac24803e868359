"""
Status-carrying errors and classification helpers.

A StatusError lets application code say "surface this failure to
clients as status X with message Y" without knowing about HTTP.
Classification looks at the error itself and, at most, one level of
explicit chaining (``raise Wrapper(...) from err``).
No framework imports allowed.
"""

from abc import ABCMeta, abstractmethod
from typing import Any, Optional

HTTP_200 = 200
HTTP_500 = 500


class HasStatusCode(Exception, metaclass=ABCMeta):
    """Capability interface for errors that carry an explicit status code.

    Subclasses Exception so frameworks can key exception handlers on it.
    """

    @property
    @abstractmethod
    def status_code(self) -> int:
        """The status code the error should surface as."""

    @property
    @abstractmethod
    def message(self) -> str:
        """The client-facing description of the error."""


class StatusError(HasStatusCode):
    """An error holding a status code and a human-readable description.

    The code is never validated: 0, negative, or otherwise unknown codes
    are stored and reported as-is. Instances are immutable and compare
    by value.
    """

    def __init__(self, status_code: int, message: str = "") -> None:
        super().__init__(message)
        object.__setattr__(self, "_status_code", status_code)
        object.__setattr__(self, "_message", message)

    @property
    def status_code(self) -> int:
        return self._status_code

    @property
    def message(self) -> str:
        return self._message

    def __setattr__(self, name: str, value: Any) -> None:
        if name in ("status_code", "message", "_status_code", "_message"):
            raise AttributeError(f"{type(self).__name__} is immutable")
        super().__setattr__(name, value)

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._status_code!r}, {self._message!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StatusError):
            return NotImplemented
        return (self._status_code, self._message) == (
            other._status_code,
            other._message,
        )

    def __hash__(self) -> int:
        return hash((self._status_code, self._message))

    def __reduce__(self):
        return (type(self), (self._status_code, self._message))


def _format_message(fmt: str, args: tuple) -> str:
    if not args:
        return fmt
    try:
        return fmt % args
    except (TypeError, ValueError, KeyError, OverflowError):
        return f"{fmt} {args!r}"


def new(code: int, fmt: str, *args: Any) -> StatusError:
    """Construct a StatusError with a printf-style formatted message.

    Args:
        code: Status code to carry. Not validated.
        fmt: Message template using ``%`` conversion specifiers.
        *args: Values interpolated into the template.

    Returns:
        The new StatusError. With no args the template is used verbatim.
        If the args do not fit the template, the message is the template
        followed by the repr of the args. Construction never fails.
    """
    return StatusError(code, _format_message(fmt, args))


def error_message(err: Optional[BaseException]) -> str:
    """Return the message text of an error, or "" for None."""
    if err is None:
        return ""
    return str(err)


def unwrap(err: Optional[BaseException]) -> Optional[BaseException]:
    """Look through a single layer of explicit chaining.

    Only ``__cause__`` is followed; the implicit ``__context__`` set while
    handling another exception does not count as wrapping.
    """
    if err is None:
        return None
    return err.__cause__


def as_status_error(err: Optional[BaseException]) -> Optional[HasStatusCode]:
    """Return the status-carrying error behind ``err``, if there is one."""
    if isinstance(err, HasStatusCode):
        return err
    cause = unwrap(err)
    if isinstance(cause, HasStatusCode):
        return cause
    return None


def status_code(err: Optional[BaseException]) -> int:
    """Classify any error into a status code.

    Returns 200 for None, the carried code for status errors (directly or
    one level unwrapped), and 500 in every other case.
    """
    if err is None:
        return HTTP_200

    found = as_status_error(err)
    if found is not None:
        return found.status_code

    return HTTP_500


def equal(err1: Optional[BaseException], err2: Optional[BaseException]) -> bool:
    """Compare two errors by status code and message.

    Two Nones are equal. Otherwise both must resolve to status errors
    with identical code and message.
    """
    if err1 is None or err2 is None:
        return err1 is None and err2 is None

    first = as_status_error(err1)
    second = as_status_error(err2)
    if first is None or second is None:
        return False

    return (
        first.status_code == second.status_code
        and first.message == second.message
    )
