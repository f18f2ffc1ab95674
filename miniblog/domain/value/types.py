"""Domain value objects for the blog.

Value objects are immutable and defined by their values, not identity.
"""

from pydantic import field_validator

from miniblog.domain.value.common import RootValueObject


class NormalizedName(RootValueObject[str]):
    """Case-normalized name shared by tags and categories.

    The stored form is stripped and lower-cased, so two names that differ
    only by case compare equal.
    """

    @field_validator("root")
    @classmethod
    def normalize_name(cls, v: str) -> str:
        """Normalize and validate the name."""
        v = v.strip().lower()
        if not v:
            raise ValueError("Name must not be empty")
        return v


class TagName(NormalizedName):
    """Tag attached to a post.

    Examples: 'python', 'asyncio', 'release-notes'
    """


class CategoryName(NormalizedName):
    """Category a post is filed under.

    Examples: 'engineering', 'announcements'
    """
