"""Strongly typed identifiers for blog domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)


def parse_key(value: str | UUID | None) -> UUID | None:
    """Parse an opaque key from its external string form.

    Empty or unparsable values are treated as an unassigned key rather
    than an error.

    Args:
        value: Key as received from a caller

    Returns:
        Parsed UUID, or None if the value does not hold a valid key
    """
    if value is None:
        return None
    if isinstance(value, UUID):
        return value
    try:
        return UUID(value.strip())
    except ValueError:
        return None
