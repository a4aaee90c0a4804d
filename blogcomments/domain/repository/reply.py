"""Reply repository interface."""

from abc import ABC, abstractmethod
from typing import List, Sequence

from blogcomments.domain.model import Reply
from blogcomments.domain.value import CommentId, ReplyId


class ReplyRepository(ABC):
    """Repository for Reply entity."""

    @abstractmethod
    async def find_by_comment_ids(
        self, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, List[Reply]]:
        """Find the replies of several comments in one query.

        Args:
            comment_ids: Owning comment IDs

        Returns:
            Mapping of comment ID to its replies ordered by created_at
            ascending. Comments without replies map to an empty list.
        """
        pass

    @abstractmethod
    async def save(self, reply: Reply) -> Reply:
        """Insert a new reply.

        Args:
            reply: The reply to insert (``id`` is ignored)

        Returns:
            The stored reply with its assigned id
        """
        pass

    @abstractmethod
    async def delete(self, reply_id: ReplyId) -> int:
        """Delete a reply.

        Returns:
            Number of deleted rows (0 or 1)
        """
        pass

    @abstractmethod
    async def delete_by_comment(self, comment_id: CommentId) -> int:
        """Delete every reply owned by a comment.

        Returns:
            Number of deleted rows
        """
        pass
