"""Published post API wrappers for the Substack publication API."""

from __future__ import annotations

from typing import Any

from .transport import SubstackTransport

# Substack rejects larger page sizes on ``/posts``.
MAX_POSTS_PAGE_SIZE = 50


class PostAPI:
    """Synchronous wrapper for the Substack Posts API.

    Parameters
    ----------
    transport:
        A configured :class:`SubstackTransport` instance.
    """

    def __init__(self, transport: SubstackTransport) -> None:
        self._transport = transport

    def list(self, limit: int = 10, offset: int = 0) -> Any:
        """List published posts; *limit* is capped at 50."""
        return self._transport.send(
            "GET",
            "/posts",
            params={
                "limit": str(min(limit, MAX_POSTS_PAGE_SIZE)),
                "offset": str(offset),
            },
        )

    def retrieve(self, post_id: int | str) -> Any:
        return self._transport.send("GET", f"/posts/{post_id}")
