"""SDK configuration for substackify.

:class:`SubstackifyConfig` is a dataclass that captures every tuneable knob
exposed by the SDK.  Instances are passed to :class:`SubstackifyClient`,
:class:`SubstackTransport` and :class:`MarkdownToDocConverter`.
"""

from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass
from typing import Any

from substackify.observability.logger import resolve_level

DEFAULT_USER_AGENT = "substackify/0.1.0"


@dataclass
class SubstackifyConfig:
    """Complete configuration for a substackify client.

    Parameters
    ----------
    publication_url:
        Root URL of the publication, e.g. ``https://example.substack.com``.
        A trailing slash is stripped.
    session_token:
        Value of the ``substack.sid`` session cookie.  Never logged.
    user_id:
        Numeric author id placed in the ``draft_bylines`` of new drafts.
    user_agent:
        Value of the ``User-Agent`` header sent with every request.
    timeout_seconds:
        HTTP request timeout in seconds.  ``None`` disables the timeout.
    http_proxy:
        Optional HTTP/HTTPS proxy URL.
    metrics:
        Optional :class:`~substackify.observability.MetricsHook` backend.
    log_level:
        Level of the ``substackify`` loggers, as an ``int`` or a name such
        as ``"INFO"``.  Applied when a client is built.
    debug_dump_doc:
        Write the converted document JSON to *stderr* on each conversion.
    debug_dump_payload:
        Write the (redacted) request/response pair to *stderr*.
    """

    # ── Core ────────────────────────────────────────────────────────────
    publication_url: str = ""

    session_token: str = ""

    user_id: int | None = None

    user_agent: str = DEFAULT_USER_AGENT

    # ── HTTP ────────────────────────────────────────────────────────────
    timeout_seconds: float | None = None

    http_proxy: str | None = None

    # ── Observability ──────────────────────────────────────────────────
    metrics: Any | None = None

    log_level: int | str = logging.WARNING

    # ── Debug ───────────────────────────────────────────────────────────
    debug_dump_doc: bool = False

    debug_dump_payload: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        from urllib.parse import urlparse

        self.publication_url = self.publication_url.rstrip("/")

        parsed = urlparse(self.publication_url)
        if parsed.scheme == "http" and parsed.hostname not in (
            "localhost",
            "127.0.0.1",
            "::1",
        ):
            raise ValueError(
                f"publication_url uses insecure HTTP for non-local host '{parsed.hostname}'. "
                "Use HTTPS to protect your session cookie, or target localhost for testing."
            )

        if self.user_id is not None and (
            isinstance(self.user_id, bool) or not isinstance(self.user_id, int) or self.user_id <= 0
        ):
            raise ValueError(f"user_id must be a positive int, got {self.user_id!r}")
        if self.timeout_seconds is not None and self.timeout_seconds <= 0:
            raise ValueError(f"timeout_seconds must be > 0, got {self.timeout_seconds}")
        resolve_level(self.log_level)

    @classmethod
    def from_env(cls, **overrides: Any) -> SubstackifyConfig:
        """Build a config from ``SUBSTACK_*`` environment variables.

        Reads ``SUBSTACK_PUBLICATION_URL``, ``SUBSTACK_SESSION_TOKEN``,
        ``SUBSTACK_USER_ID`` and ``SUBSTACK_LOG_LEVEL``.  Keyword *overrides*
        win over the environment.
        """
        raw_user_id = os.environ.get("SUBSTACK_USER_ID", "").strip()
        values: dict[str, Any] = {
            "publication_url": os.environ.get("SUBSTACK_PUBLICATION_URL", ""),
            "session_token": os.environ.get("SUBSTACK_SESSION_TOKEN", ""),
            "user_id": int(raw_user_id) if raw_user_id else None,
        }
        log_level = os.environ.get("SUBSTACK_LOG_LEVEL", "").strip()
        if log_level:
            values["log_level"] = log_level
        values.update(overrides)
        return cls(**values)

    @property
    def api_base(self) -> str:
        """Base URL of the publication's v1 API."""
        return f"{self.publication_url}/api/v1"

    @property
    def auth_cookie(self) -> str:
        """Cookie header value carrying the session token."""
        return f"substack.sid={self.session_token}; connect.sid={self.session_token};"

    def __repr__(self) -> str:
        """Mask the session token to prevent accidental credential leakage."""
        parts: list[str] = []
        for f in dataclasses.fields(self):
            val = getattr(self, f.name)
            if f.name == "session_token":
                masked = f"...{val[-4:]}" if len(val) >= 4 else "****"
                parts.append(f"session_token='{masked}'")
            else:
                parts.append(f"{f.name}={val!r}")
        return f"SubstackifyConfig({', '.join(parts)})"
