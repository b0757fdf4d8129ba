"""Synchronous HTTP transport for the Substack publication API.

Request lifecycle:

1. Send the HTTP request with the session cookie and JSON headers,
   following redirects (custom domains answer with a 301).
2. On ``2xx`` -- return the parsed JSON body, or the raw text when the
   body is empty or not JSON.
3. On any other status -- raise :class:`SubstackifyAPIError`.
4. On a transport failure -- raise :class:`SubstackifyNetworkError`.

There is no retry and, unless configured, no timeout.
"""

from __future__ import annotations

import json as _json
import re
import sys
import time
from typing import Any
from urllib.parse import urlsplit

import httpx

from substackify.config import SubstackifyConfig
from substackify.errors import SubstackifyAPIError, SubstackifyNetworkError
from substackify.observability import get_logger, resolve_metrics
from substackify.observability.metrics import (
    REQUEST_DURATION_MS,
    REQUESTS_TOTAL,
)

log = get_logger("substackify.transport")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _parse_body(response: httpx.Response) -> Any:
    """Decode *response* as JSON, falling back to its raw text."""
    text = response.text
    try:
        return _json.loads(text)
    except ValueError:
        return text


_ID_SEGMENT_RE = re.compile(r"/\d+(?=/|$)")


def _route(path: str) -> str:
    """Collapse *path* to a low-cardinality metrics tag.

    The host and query string are dropped and numeric id segments become
    ``{id}``: ``/drafts/123/publish`` -> ``/drafts/{id}/publish``.
    """
    return _ID_SEGMENT_RE.sub("/{id}", urlsplit(path).path) or "/"


def _raise_for_status(response: httpx.Response, method: str, path: str) -> None:
    """Raise :class:`SubstackifyAPIError` for every non-2xx status."""
    if 200 <= response.status_code < 300:
        return
    raise SubstackifyAPIError(
        method=method,
        path=path,
        status_code=response.status_code,
        body=response.text,
    )


def _dump_payload(
    method: str,
    url: str,
    payload: Any,
    response_status: int | None,
    response_body: Any,
    token: str | None = None,
) -> None:
    """Write a redacted debug dump of the request/response to stderr."""
    from substackify.utils.redact import redact

    dump: dict[str, Any] = {
        "method": method,
        "url": url,
    }
    if payload is not None:
        dump["request_body"] = payload
    if response_status is not None:
        dump["response_status"] = response_status
    if response_body is not None:
        dump["response_body"] = response_body
    safe_dump = redact(dump, token)
    print(
        _json.dumps(safe_dump, indent=2, default=str),
        file=sys.stderr,
    )


# ---------------------------------------------------------------------------
# Transport
# ---------------------------------------------------------------------------

class SubstackTransport:
    """Synchronous HTTP transport with cookie authentication.

    Parameters
    ----------
    config:
        A :class:`SubstackifyConfig` with at least ``publication_url`` set.
    client:
        Optional pre-built :class:`httpx.Client`; mostly useful in tests
        with :class:`httpx.MockTransport`.
    """

    def __init__(
        self,
        config: SubstackifyConfig,
        client: httpx.Client | None = None,
    ) -> None:
        if not config.publication_url:
            raise ValueError("publication_url is required to talk to the Substack API")
        self._config = config
        self._metrics = resolve_metrics(config.metrics)
        self._client = client or httpx.Client(
            proxy=config.http_proxy,
            timeout=httpx.Timeout(config.timeout_seconds),
        )
        self._client.follow_redirects = True
        self._client.base_url = config.api_base
        self._client.headers.update(self.default_headers())

    def default_headers(self) -> dict[str, str]:
        """Headers attached to every request."""
        return {
            "Cookie": self._config.auth_cookie,
            "Content-Type": "application/json",
            "Referer": f"{self._config.publication_url}/publish/post",
            "User-Agent": self._config.user_agent,
        }

    # -- public API --------------------------------------------------------

    def send(
        self,
        method: str,
        path: str,
        body: Any = None,
        *,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Execute one request against the Substack API.

        Parameters
        ----------
        method:
            HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
        path:
            Path relative to ``<publication_url>/api/v1`` (e.g.
            ``/drafts``), or an absolute ``http(s)://`` URL.
        body:
            Optional JSON-serialisable request body.
        params:
            Optional query-string parameters.

        Returns
        -------
        Any
            The decoded JSON body, or the raw text when the body is not
            JSON (empty bodies yield ``""``).

        Raises
        ------
        SubstackifyAPIError
            On any non-2xx response.
        SubstackifyNetworkError
            On transport-level failures.
        """
        kwargs: dict[str, Any] = {}
        if body is not None:
            kwargs["content"] = _json.dumps(body)
        if params:
            kwargs["params"] = params

        t0 = time.monotonic()
        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.TransportError as exc:
            self._metrics.increment(
                REQUESTS_TOTAL,
                tags={"method": method, "route": _route(path), "status": "error"},
            )
            log.warning(
                "Request network error",
                extra={
                    "extra_fields": {
                        "op": "request",
                        "method": method,
                        "path": path,
                        "error": str(exc),
                    }
                },
            )
            raise SubstackifyNetworkError(
                message=f"Network error on {method} {path}: {exc}",
                context={"method": method, "path": path},
                cause=exc,
            ) from exc
        elapsed_ms = (time.monotonic() - t0) * 1000

        tags = {"method": method, "route": _route(path), "status": str(response.status_code)}
        self._metrics.increment(REQUESTS_TOTAL, tags=tags)
        self._metrics.timing(REQUEST_DURATION_MS, elapsed_ms, tags=tags)

        if self._config.debug_dump_payload:
            _dump_payload(
                method, str(response.url), body,
                response.status_code, response.text[:1000],
                token=self._config.session_token,
            )

        if not 200 <= response.status_code < 300:
            log.warning(
                "Substack API error",
                extra={
                    "extra_fields": {
                        "op": "request",
                        "method": method,
                        "path": path,
                        "status_code": response.status_code,
                    }
                },
            )
            _raise_for_status(response, method, path)

        return _parse_body(response)

    def close(self) -> None:
        """Close the underlying HTTP client and release resources."""
        self._client.close()

    def __enter__(self) -> SubstackTransport:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
