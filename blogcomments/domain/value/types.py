"""Domain value objects for blog comments."""

from enum import IntEnum


class CommentStatus(IntEnum):
    """Public visibility of a comment.

    Stored as 0/1 in the ``estado`` column, so the integer values are part of
    the persisted and wire format.
    """

    PENDING = 0
    APPROVED = 1

    def toggled(self) -> "CommentStatus":
        """Return the opposite status."""
        return CommentStatus(1 - self.value)
