"""Payload redaction for safe debug output.

Before any request or response is written to *stderr* the :func:`redact`
function is applied.  It enforces the following rules:

* Values under **sensitive keys** (``Cookie``, ``session_token``,
  ``secret``, ...) are masked.
* Session cookies (``substack.sid=...``, ``connect.sid=...``) are masked
  wherever they appear in a string.
* The full **session token is never present** in the output.
"""

from __future__ import annotations

import copy
import re
from typing import Any

# Substrings: if any of these appear in a key name (case-insensitive), the
# value is redacted.
_SENSITIVE_KEY_PATTERNS: frozenset[str] = frozenset({
    "token",
    "secret",
    "password",
    "credential",
    "authorization",
    "cookie",
    "sid",
    "api_key",
})

_SESSION_COOKIE_RE = re.compile(r"(\b[\w.-]*sid=)[^;\s]+")


def _mask_token(value: str, token: str | None) -> str:
    """Replace session tokens inside *value* with a safe placeholder."""
    if token and token in value:
        suffix = token[-4:] if len(token) >= 4 else "****"
        placeholder = f"<redacted:...{suffix}>"
        if token in placeholder:
            placeholder = "<redacted>"
        value = value.replace(token, placeholder)
    return _SESSION_COOKIE_RE.sub(r"\1<redacted>", value)


def _redact_value(value: Any, token: str | None) -> Any:
    if isinstance(value, dict):
        return _redact_dict(value, token)
    if isinstance(value, list):
        return [_redact_value(item, token) for item in value]
    if isinstance(value, str):
        return _mask_token(value, token)
    return value


def _redact_dict(d: dict, token: str | None) -> dict:
    result: dict = {}
    for key, value in d.items():
        key_lower = key.lower() if isinstance(key, str) else ""
        if any(pat in key_lower for pat in _SENSITIVE_KEY_PATTERNS):
            result[key] = "<redacted>"
        else:
            result[key] = _redact_value(value, token)
    return result


def redact(payload: dict, token: str | None = None) -> dict:
    """Return a deep copy of *payload* with sensitive data redacted.

    Parameters
    ----------
    payload:
        The dictionary to sanitize (a request body, a response body or a
        set of headers).
    token:
        The session token.  If supplied, any occurrence of this exact
        string anywhere in the payload is replaced.

    Returns
    -------
    dict
        A new dictionary; the original *payload* is never mutated.

    Examples
    --------
    >>> redact({"Cookie": "substack.sid=abc; connect.sid=abc;"})
    {'Cookie': '<redacted>'}
    """
    safe = copy.deepcopy(payload)
    return _redact_dict(safe, token)
