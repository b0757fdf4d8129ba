"""substackify.substack_api -- Substack API transport and endpoint wrappers.

This sub-package provides:

* :mod:`.transport` -- HTTP transport with cookie auth and error mapping.
* :mod:`.drafts` -- Draft API wrappers.
* :mod:`.posts` -- Published post API wrappers.
"""

from __future__ import annotations

from .drafts import DraftAPI
from .posts import PostAPI
from .transport import SubstackTransport

__all__ = [
    "DraftAPI",
    "PostAPI",
    "SubstackTransport",
]
