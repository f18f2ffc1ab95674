"""Post aggregate root.

A post owns its comments, tags and categories; the aggregate is read and
written as one unit.
"""

from typing import Optional

from pydantic import Field, field_validator

from miniblog.domain.model.comment import Comment
from miniblog.domain.model.common import DomainModel, UtcDatetime, utc_now
from miniblog.domain.value import CategoryName, PostId, TagName


class Post(DomainModel):
    """Post aggregate root.

    ``id`` is None until the post is saved for the first time. Tag and
    category names are kept distinct; comments keep their insertion order.
    """

    id: Optional[PostId] = None
    title: str = ""
    slug: str = ""
    content: str = ""
    excerpt: str = ""
    is_published: bool = True
    pub_date: UtcDatetime = Field(default_factory=utc_now)
    last_modified: UtcDatetime = Field(default_factory=utc_now)
    comments: list[Comment] = Field(default_factory=list)
    tags: list[TagName] = Field(default_factory=list)
    categories: list[CategoryName] = Field(default_factory=list)

    @field_validator("tags", "categories")
    @classmethod
    def validate_distinct_names(cls, v: list) -> list:
        """Reject duplicate tag or category names."""
        names = [name.root for name in v]
        if len(names) != len(set(names)):
            raise ValueError("Tag and category names must be distinct")
        return v

    @property
    def tag_names(self) -> list[str]:
        """Plain tag names."""
        return [tag.root for tag in self.tags]

    @property
    def category_names(self) -> list[str]:
        """Plain category names."""
        return [category.root for category in self.categories]
