"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from blogcomments.domain.model import Comment
from blogcomments.domain.value import BlogId, CommentId, CommentStatus


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer and raise
    ``StorageError`` when the data store fails.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_blog(
        self,
        blog_id: BlogId,
        status: Optional[CommentStatus] = None,
    ) -> List[Comment]:
        """Find comments of a blog post, oldest first.

        Args:
            blog_id: The blog post ID
            status: Only return comments in this status (all when None)

        Returns:
            Comments ordered by created_at ascending, then id
        """
        pass

    @abstractmethod
    async def find_all_with_blog_title(self) -> List[tuple[Comment, Optional[str]]]:
        """Find every comment with the title of its blog, newest first.

        The title is None when the blog row does not exist.

        Returns:
            (comment, blog title) pairs ordered by created_at descending, then id
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to insert (``id`` is ignored)

        Returns:
            The stored comment with its assigned id
        """
        pass

    @abstractmethod
    async def toggle_status(self, comment_id: CommentId) -> Optional[CommentStatus]:
        """Flip the status of a comment in a single conditional update.

        Args:
            comment_id: The comment ID

        Returns:
            The new status, or None if no comment has this ID
        """
        pass

    @abstractmethod
    async def update_body(self, comment_id: CommentId, body: str) -> Optional[Comment]:
        """Overwrite the body of a comment.

        Status and created_at are left untouched.

        Args:
            comment_id: The comment ID
            body: New body text

        Returns:
            The updated comment, or None if no comment has this ID
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> int:
        """Delete a comment (hard delete).

        Replies are not touched; callers cascade explicitly.

        Args:
            comment_id: The comment ID to delete

        Returns:
            Number of deleted rows (0 or 1)
        """
        pass
