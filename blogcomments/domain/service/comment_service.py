"""Comment moderation domain service."""

from datetime import datetime
from typing import Any, Optional

import logfire

from blogcomments.domain.error import NotFoundError, ValidationError
from blogcomments.domain.model import AdminCommentThread, Comment, CommentThread, Reply
from blogcomments.domain.repository import (
    CommentRepository,
    ReplyRepository,
    TransactionManager,
)
from blogcomments.domain.value import BlogId, CommentId, CommentStatus, ReplyId

from .base import Service


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, int):
        # Storage ids start at 1
        return value <= 0
    return False


def _require(**fields: Any) -> None:
    """Raise ValidationError naming every missing or empty field."""
    missing = [name for name, value in fields.items() if _is_blank(value)]
    if missing:
        raise ValidationError(
            f"Missing required fields: {', '.join(missing)}", fields=missing
        )


class CommentService(Service):
    """Domain service for comment moderation.

    Comments are created pending and become public only through
    ``toggle_status``. Replies belong to one comment and are removed with it.
    Storage failures surface as ``StorageError`` from the repositories and
    are not caught here.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        reply_repository: ReplyRepository,
        transaction_manager: TransactionManager,
        require_existing_comment_for_reply: bool = False,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            reply_repository: Reply repository
            transaction_manager: Transaction scope shared with the repositories
            require_existing_comment_for_reply: Reject replies to unknown comments
        """
        self.comment_repository = comment_repository
        self.reply_repository = reply_repository
        self.transaction_manager = transaction_manager
        self.require_existing_comment_for_reply = require_existing_comment_for_reply

    async def list_approved(self, blog_id: BlogId) -> list[CommentThread]:
        """Get the public comments of a blog post with their replies.

        Args:
            blog_id: Blog post ID

        Returns:
            Approved comments, oldest first, each with replies oldest first
        """
        with logfire.span("comment_service.list_approved", blog_id=blog_id):
            comments = await self.comment_repository.find_by_blog(
                blog_id, status=CommentStatus.APPROVED
            )
            replies = await self.reply_repository.find_by_comment_ids(
                [c.id for c in comments]
            )
            threads = [
                CommentThread(comment=c, replies=replies.get(c.id, []))
                for c in comments
            ]
            logfire.info(
                "Approved comments retrieved", blog_id=blog_id, count=len(threads)
            )
            return threads

    async def create_comment(
        self,
        blog_id: Optional[BlogId],
        author: Optional[str],
        email: Optional[str],
        body: Optional[str],
        parent_id: Optional[int] = None,
    ) -> Comment:
        """Submit a new comment for moderation.

        The comment is always stored as pending; callers cannot choose its
        status.

        Args:
            blog_id: Blog post ID
            author: Author display name
            email: Author email
            body: Comment text
            parent_id: Stored as given, not interpreted

        Returns:
            The stored comment with its assigned id

        Raises:
            ValidationError: If blog_id, author, email or body is missing or empty
        """
        with logfire.span(
            "comment_service.create_comment", blog_id=blog_id, parent_id=parent_id
        ):
            try:
                _require(blog_id=blog_id, author=author, email=email, body=body)
            except ValidationError as e:
                logfire.warn("Comment rejected", blog_id=blog_id, missing=e.fields)
                raise

            comment = Comment(
                blog_id=blog_id,
                parent_id=parent_id,
                author=author,
                email=email,
                body=body,
                status=CommentStatus.PENDING,
                created_at=datetime.now(),
            )
            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created pending approval",
                comment_id=saved.id,
                blog_id=blog_id,
            )
            return saved

    async def list_all_for_admin(self) -> list[AdminCommentThread]:
        """Get every comment for the moderation screen.

        Returns:
            All comments regardless of status, newest first, each with its
            blog title and all of its replies
        """
        with logfire.span("comment_service.list_all_for_admin"):
            rows = await self.comment_repository.find_all_with_blog_title()
            replies = await self.reply_repository.find_by_comment_ids(
                [comment.id for comment, _ in rows]
            )
            threads = [
                AdminCommentThread(
                    comment=comment,
                    blog_title=blog_title,
                    replies=replies.get(comment.id, []),
                )
                for comment, blog_title in rows
            ]
            logfire.info("Admin comments retrieved", count=len(threads))
            return threads

    async def get_comment(self, comment_id: CommentId) -> Optional[Comment]:
        """Get a comment by ID.

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span("comment_service.get_comment", comment_id=comment_id):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                logfire.warn("Comment not found", comment_id=comment_id)
            return comment

    async def toggle_status(self, comment_id: CommentId) -> CommentStatus:
        """Approve a pending comment or un-approve an approved one.

        The flip happens in one atomic update, so concurrent toggles never
        lose an update.

        Args:
            comment_id: Comment ID

        Returns:
            The new status

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span("comment_service.toggle_status", comment_id=comment_id):
            new_status = await self.comment_repository.toggle_status(comment_id)
            if new_status is None:
                logfire.warn("Comment not found for toggle", comment_id=comment_id)
                raise NotFoundError("Comment", str(comment_id))

            logfire.info(
                "Comment status toggled",
                comment_id=comment_id,
                status=new_status.name,
            )
            return new_status

    async def update_body(self, comment_id: CommentId, body: Optional[str]) -> Comment:
        """Edit the text of a comment.

        Args:
            comment_id: Comment ID
            body: New text

        Returns:
            The updated comment

        Raises:
            ValidationError: If body is missing or empty
            NotFoundError: If the comment does not exist
        """
        with logfire.span("comment_service.update_body", comment_id=comment_id):
            _require(body=body)

            updated = await self.comment_repository.update_body(comment_id, body)
            if updated is None:
                logfire.warn("Comment not found for update", comment_id=comment_id)
                raise NotFoundError("Comment", str(comment_id))

            logfire.info(
                "Comment body updated", comment_id=comment_id, body_length=len(body)
            )
            return updated

    async def delete_comment(self, comment_id: CommentId) -> int:
        """Delete a comment together with its replies.

        Both deletes run in one transaction: if the comment does not exist or
        the second step fails, the replies are restored.

        Args:
            comment_id: Comment ID

        Returns:
            Number of replies deleted along with the comment

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span("comment_service.delete_comment", comment_id=comment_id):
            async with self.transaction_manager.transaction():
                deleted_replies = await self.reply_repository.delete_by_comment(
                    comment_id
                )
                deleted = await self.comment_repository.delete(comment_id)
                if deleted == 0:
                    logfire.warn("Comment not found for delete", comment_id=comment_id)
                    raise NotFoundError("Comment", str(comment_id))

            logfire.info(
                "Comment deleted",
                comment_id=comment_id,
                deleted_replies=deleted_replies,
            )
            return deleted_replies

    async def add_reply(
        self,
        comment_id: Optional[CommentId],
        author: Optional[str],
        body: Optional[str],
    ) -> Reply:
        """Attach a reply to a comment.

        Args:
            comment_id: Owning comment ID
            author: Reply author
            body: Reply text

        Returns:
            The stored reply with its assigned id

        Raises:
            ValidationError: If any field is missing or empty
            NotFoundError: If existence checks are enabled and the comment is missing
        """
        with logfire.span("comment_service.add_reply", comment_id=comment_id):
            _require(comment_id=comment_id, author=author, body=body)

            if self.require_existing_comment_for_reply:
                if await self.get_comment(comment_id) is None:
                    raise NotFoundError("Comment", str(comment_id))

            reply = Reply(
                comment_id=comment_id,
                author=author,
                body=body,
                created_at=datetime.now(),
            )
            saved = await self.reply_repository.save(reply)
            logfire.info("Reply added", reply_id=saved.id, comment_id=comment_id)
            return saved

    async def delete_reply(self, reply_id: ReplyId) -> None:
        """Delete a reply. Deleting a missing reply is a no-op."""
        with logfire.span("comment_service.delete_reply", reply_id=reply_id):
            deleted = await self.reply_repository.delete(reply_id)
            logfire.info("Reply deleted", reply_id=reply_id, existed=bool(deleted))
