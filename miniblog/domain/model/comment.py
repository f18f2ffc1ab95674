"""Comment entity.

Comments belong to exactly one post and are persisted with it as part of
the post aggregate.
"""

from typing import Optional

from pydantic import Field

from miniblog.domain.model.common import DomainModel, UtcDatetime, utc_now
from miniblog.domain.value import CommentId


class Comment(DomainModel):
    """Comment entity.

    A comment without an ``id`` is a fresh submission that has not been
    reconciled yet. Once a key is assigned it never changes.
    """

    id: Optional[CommentId] = None
    author: str = ""
    email: str = ""
    content: str = ""
    is_admin: bool = False  # Authored by the blog operator
    pub_date: UtcDatetime = Field(default_factory=utc_now)
