"""Caller-facing post representation.

This is the shape callers read and submit. Keys travel as strings; an
empty or unparsable key means "not assigned yet".
"""

from datetime import datetime

from pydantic import BaseModel, Field

from miniblog.domain.model.common import UtcDatetime, utc_now


class CommentRepresentation(BaseModel):
    """Comment as exposed to callers."""

    id: str = ""
    author: str = ""
    email: str = ""
    content: str = ""
    is_admin: bool = False
    pub_date: UtcDatetime = Field(default_factory=utc_now)


class PostRepresentation(BaseModel):
    """Post as exposed to callers.

    ``last_modified`` is informational only: saves always overwrite it with
    the time of the save.
    """

    id: str = ""
    title: str = ""
    slug: str = ""
    content: str = ""
    excerpt: str = ""
    is_published: bool = True
    pub_date: UtcDatetime = Field(default_factory=utc_now)
    last_modified: datetime | None = None
    comments: list[CommentRepresentation] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)
