"""In-memory comment repository for testing."""

from typing import Optional

from blogcomments.domain.model import Comment
from blogcomments.domain.repository import CommentRepository
from blogcomments.domain.value import BlogId, CommentId, CommentStatus

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._store.comments.get(comment_id)

    async def find_by_blog(
        self,
        blog_id: BlogId,
        status: Optional[CommentStatus] = None,
    ) -> list[Comment]:
        """Find comments of a blog post, oldest first."""
        comments = [c for c in self._store.comments.values() if c.blog_id == blog_id]

        if status is not None:
            comments = [c for c in comments if c.status == status]

        comments.sort(key=lambda c: (c.created_at, c.id))
        return comments

    async def find_all_with_blog_title(self) -> list[tuple[Comment, Optional[str]]]:
        """Find every comment with its blog title, newest first."""
        comments = sorted(
            self._store.comments.values(),
            key=lambda c: (c.created_at, c.id),
            reverse=True,
        )
        return [(c, self._store.blogs.get(c.blog_id)) for c in comments]

    async def save(self, comment: Comment) -> Comment:
        """Insert a comment with the next id."""
        saved = comment.model_copy(update={"id": self._store.next_comment_id()})
        self._store.comments[saved.id] = saved
        return saved

    async def toggle_status(self, comment_id: CommentId) -> Optional[CommentStatus]:
        """Flip the status of a comment."""
        comment = self._store.comments.get(comment_id)
        if comment is None:
            return None

        # Comments are immutable, replace with an updated copy
        updated = comment.model_copy(update={"status": comment.status.toggled()})
        self._store.comments[comment_id] = updated
        return updated.status

    async def update_body(self, comment_id: CommentId, body: str) -> Optional[Comment]:
        """Overwrite the body of a comment."""
        comment = self._store.comments.get(comment_id)
        if comment is None:
            return None

        updated = comment.model_copy(update={"body": body})
        self._store.comments[comment_id] = updated
        return updated

    async def delete(self, comment_id: CommentId) -> int:
        """Delete a comment."""
        return 1 if self._store.comments.pop(comment_id, None) else 0
