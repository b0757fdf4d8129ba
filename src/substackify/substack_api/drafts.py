"""Draft API wrappers for the Substack publication API.

:class:`DraftAPI` is a thin wrapper around the ``/drafts`` and
``/post_management/drafts`` endpoints.  All HTTP concerns (auth, error
mapping) are delegated to the underlying transport.
"""

from __future__ import annotations

from typing import Any

from .transport import SubstackTransport


class DraftAPI:
    """Synchronous wrapper for the Substack Drafts API.

    Parameters
    ----------
    transport:
        A configured :class:`SubstackTransport` instance.
    """

    def __init__(self, transport: SubstackTransport) -> None:
        self._transport = transport

    def create(self, payload: dict[str, Any]) -> Any:
        """Create a new draft.

        Parameters
        ----------
        payload:
            The draft object.  ``draft_body`` must be the document tree
            serialised as a JSON *string*.

        Returns
        -------
        Any
            The created draft as returned by Substack.
        """
        return self._transport.send("POST", "/drafts", payload)

    def publish(self, draft_id: int | str, send: bool = True) -> Any:
        """Publish a draft, optionally emailing it to subscribers."""
        return self._transport.send(
            "POST", f"/drafts/{draft_id}/publish", {"send": send},
        )

    def list(self, limit: int = 25, offset: int = 0) -> Any:
        """List drafts, most recently updated first."""
        return self._transport.send(
            "GET",
            "/post_management/drafts",
            params={
                "limit": str(limit),
                "offset": str(offset),
                "order_by": "draft_updated_at",
                "order_direction": "desc",
            },
        )

    def retrieve(self, draft_id: int | str) -> Any:
        return self._transport.send("GET", f"/drafts/{draft_id}")

    def delete(self, draft_id: int | str) -> Any:
        return self._transport.send("DELETE", f"/drafts/{draft_id}")
