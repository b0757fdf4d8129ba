"""Error hierarchy for the substackify SDK.

Every public error class inherits from SubstackifyError. Each carries a
machine-readable ``code`` (from :class:`ErrorCode`), a human-readable
``message``, an optional structured ``context`` dict, and an optional
``cause`` (chained exception).

Text conversion never raises; all errors originate at the network
boundary.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

# Maximum number of response-body characters kept on an API error.
BODY_PREVIEW_LIMIT = 500


class ErrorCode(str, Enum):
    """Machine-readable error codes for every error the SDK can raise."""

    API_ERROR = "API_ERROR"
    NETWORK_ERROR = "NETWORK_ERROR"


# ---------------------------------------------------------------------------
# Base error
# ---------------------------------------------------------------------------

class SubstackifyError(Exception):
    """Base exception for all substackify errors.

    Parameters
    ----------
    code:
        A value from :class:`ErrorCode` (or any string) identifying the
        error category.
    message:
        A developer-friendly description of what went wrong.
    context:
        Arbitrary structured data providing extra diagnostic detail.
    cause:
        The underlying exception, if this error wraps another.
    """

    def __init__(
        self,
        code: str,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.code: str = code
        self.message: str = message
        self.context: dict[str, Any] = context or {}
        self.cause: Exception | None = cause
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        ctx = f", context={self.context!r}" if self.context else ""
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r}{ctx})"


# ---------------------------------------------------------------------------
# Transport errors
# ---------------------------------------------------------------------------

class SubstackifyAPIError(SubstackifyError):
    """The Substack API answered with a non-2xx status.

    Context keys: ``method``, ``path``, ``status_code``, ``body``.
    """

    def __init__(
        self,
        method: str,
        path: str,
        status_code: int,
        body: str,
        cause: Exception | None = None,
    ) -> None:
        self.method = method
        self.path = path
        self.status_code = status_code
        self.body = body[:BODY_PREVIEW_LIMIT]
        super().__init__(
            code=ErrorCode.API_ERROR,
            message=f"Substack API {method} {path} -> {status_code}: {self.body}",
            context={
                "method": method,
                "path": path,
                "status_code": status_code,
                "body": self.body,
            },
            cause=cause,
        )


class SubstackifyNetworkError(SubstackifyError):
    """A transport-level failure occurred (timeout, DNS, connection reset).

    Context keys: ``method``, ``path``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.NETWORK_ERROR,
            message=message,
            context=context,
            cause=cause,
        )
