"""Synchronous Substack SDK client.

:class:`SubstackifyClient` converts Markdown-ish text to Substack's
document JSON and drives the draft/post endpoints of one publication.

Usage::

    from substackify import SubstackifyClient

    with SubstackifyClient(
        publication_url="https://example.substack.com",
        session_token="s%3A...",
        user_id=12345,
    ) as client:
        draft = client.create_draft_post(title="Hello", body="# Hi\\n\\n**bold**")
        client.publish_draft(draft.id, send_email=False)
"""

from __future__ import annotations

import dataclasses
from typing import Any

from substackify.config import SubstackifyConfig
from substackify.converter.md_to_doc import MarkdownToDocConverter
from substackify.errors import SubstackifyAPIError
from substackify.models import (
    Audience,
    DraftResult,
    DraftSummary,
    PostDetail,
    PostSummary,
    PublishResult,
)
from substackify.observability import configure_logging, get_logger
from substackify.substack_api.drafts import DraftAPI
from substackify.substack_api.posts import PostAPI
from substackify.substack_api.transport import SubstackTransport

log = get_logger("substackify.client")

_HEART = "❤"


def _likes(record: dict[str, Any]) -> int:
    reactions = record.get("reactions")
    hearts = reactions.get(_HEART) if isinstance(reactions, dict) else None
    return hearts or record.get("like_count") or 0


def _records(result: Any, *keys: str) -> list[dict[str, Any]]:
    """Pull the record list out of a listing response of any known shape."""
    if isinstance(result, list):
        return result
    if isinstance(result, dict):
        for key in keys:
            if result.get(key):
                return result[key]
    return []


class SubstackifyClient:
    """Synchronous Substack SDK client.

    Parameters
    ----------
    publication_url:
        Root URL of the publication.  **Required.**
    session_token:
        Value of the ``substack.sid`` cookie.  **Required.**
    **kwargs:
        All remaining keyword arguments are forwarded to
        :class:`SubstackifyConfig`.  Its ``log_level`` is applied to every
        ``substackify`` logger.
    """

    def __init__(self, publication_url: str, session_token: str, **kwargs: Any) -> None:
        self._config = SubstackifyConfig(
            publication_url=publication_url,
            session_token=session_token,
            **kwargs,
        )
        configure_logging(self._config.log_level)
        self._transport = SubstackTransport(self._config)
        self._drafts = DraftAPI(self._transport)
        self._posts = PostAPI(self._transport)
        self._converter = MarkdownToDocConverter(self._config)

    @classmethod
    def from_env(cls, **overrides: Any) -> SubstackifyClient:
        """Create a client configured from ``SUBSTACK_*`` environment variables."""
        config = SubstackifyConfig.from_env(**overrides)
        kwargs = {
            f.name: getattr(config, f.name)
            for f in dataclasses.fields(config)
            if f.name not in ("publication_url", "session_token")
        }
        return cls(config.publication_url, config.session_token, **kwargs)

    def _edit_url(self, draft_id: Any) -> str:
        return f"{self._config.publication_url}/publish/post/{draft_id}"

    def _post_url(self, slug: str) -> str:
        return f"{self._config.publication_url}/p/{slug}"

    # ------------------------------------------------------------------
    # Drafts
    # ------------------------------------------------------------------

    def create_draft_post(
        self,
        title: str,
        body: str,
        subtitle: str = "",
        audience: Audience | str = Audience.EVERYONE,
    ) -> DraftResult:
        """Create a new draft from Markdown-ish *body* text.

        Parameters
        ----------
        title:
            Post title.
        body:
            Post body: ``#`` headings, ``**bold**``, ``*italic*``,
            ``[links](url)``, ``-`` bullets, ``1.`` numbered items and
            ``---`` rules.
        subtitle:
            Optional post subtitle.
        audience:
            Who can see the post once published.

        Returns
        -------
        DraftResult

        Raises
        ------
        ValueError
            If *audience* is unknown or no ``user_id`` is configured.
        """
        audience = Audience(audience)
        if self._config.user_id is None:
            raise ValueError("user_id must be configured to create drafts")

        doc = self._converter.convert(body)
        payload = {
            "draft_title": title,
            "draft_subtitle": subtitle or "",
            "draft_body": doc.to_json(),
            "draft_bylines": [{"id": self._config.user_id, "is_guest": False}],
            "audience": audience.value,
            "section_chosen": False,
            "draft_section_id": None,
            "write_comment_permissions": "everyone",
        }
        result = self._drafts.create(payload)
        if not isinstance(result, dict):
            result = {}

        draft_id = result.get("id")
        log.info(
            "draft created",
            extra={
                "extra_fields": {
                    "op": "create_draft_post",
                    "draft_id": draft_id,
                    "blocks": len(doc.content),
                }
            },
        )
        return DraftResult(
            id=draft_id,
            title=result.get("draft_title"),
            edit_url=self._edit_url(draft_id),
        )

    def publish_draft(self, draft_id: int | str, send_email: bool = True) -> PublishResult:
        """Publish an existing draft, making it live."""
        result = self._drafts.publish(draft_id, send=send_email)
        if not isinstance(result, dict):
            result = {}
        url = result.get("canonical_url") or result.get("url") or f"Published draft {draft_id}"
        log.info(
            "draft published",
            extra={
                "extra_fields": {
                    "op": "publish_draft",
                    "draft_id": draft_id,
                    "email_sent": send_email,
                }
            },
        )
        return PublishResult(id=draft_id, url=url, email_sent=send_email)

    def list_drafts(self, limit: int = 25, offset: int = 0) -> list[DraftSummary]:
        """List drafts in the publication, most recently updated first."""
        result = self._drafts.list(limit=limit or 25, offset=offset or 0)
        return [
            DraftSummary(
                id=d.get("id"),
                title=d.get("draft_title") or d.get("title"),
                subtitle=d.get("draft_subtitle") or d.get("subtitle") or "",
                updated_at=d.get("draft_updated_at") or d.get("updated_at"),
                audience=d.get("audience"),
                edit_url=self._edit_url(d.get("id")),
            )
            for d in _records(result, "posts", "drafts")
        ]

    def delete_draft(self, draft_id: int | str) -> None:
        """Permanently delete a draft."""
        self._drafts.delete(draft_id)
        log.info(
            "draft deleted",
            extra={"extra_fields": {"op": "delete_draft", "draft_id": draft_id}},
        )

    # ------------------------------------------------------------------
    # Posts
    # ------------------------------------------------------------------

    def list_posts(self, limit: int = 10, offset: int = 0) -> list[PostSummary]:
        """List published posts (at most 50 per call)."""
        result = self._posts.list(limit=limit or 10, offset=offset or 0)
        return [
            PostSummary(
                id=p.get("id"),
                title=p.get("title"),
                subtitle=p.get("subtitle") or "",
                slug=p.get("slug"),
                url=p.get("canonical_url") or self._post_url(p.get("slug")),
                publish_date=p.get("post_date") or p.get("publish_date"),
                audience=p.get("audience"),
                likes=_likes(p),
                comments=p.get("comment_count") or 0,
            )
            for p in _records(result, "posts")
        ]

    def get_post(self, post_id: int | str) -> PostDetail:
        """Fetch a draft or published post by id.

        The draft endpoint is tried first; on any API error the published
        post endpoint is used instead.
        """
        try:
            result = self._drafts.retrieve(post_id)
        except SubstackifyAPIError as exc:
            log.debug(
                "draft lookup failed, trying published posts",
                extra={
                    "extra_fields": {
                        "op": "get_post",
                        "post_id": post_id,
                        "status_code": exc.status_code,
                    }
                },
            )
            result = self._posts.retrieve(post_id)
        if not isinstance(result, dict):
            result = {}

        if result.get("canonical_url"):
            url = result["canonical_url"]
        elif result.get("slug"):
            url = self._post_url(result["slug"])
        else:
            url = self._edit_url(result.get("id"))

        return PostDetail(
            id=result.get("id"),
            title=result.get("draft_title") or result.get("title"),
            subtitle=result.get("draft_subtitle") or result.get("subtitle") or "",
            audience=result.get("audience"),
            status="draft" if result.get("draft_title") else "published",
            url=url,
            created_at=result.get("draft_created_at") or result.get("post_date"),
            updated_at=result.get("draft_updated_at") or result.get("updated_at"),
            word_count=result.get("word_count"),
            likes=_likes(result),
            comments=result.get("comment_count") or 0,
            raw=result,
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Close the underlying HTTP transport."""
        self._transport.close()

    def __enter__(self) -> SubstackifyClient:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
