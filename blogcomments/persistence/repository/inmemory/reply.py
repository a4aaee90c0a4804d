"""In-memory reply repository for testing."""

from typing import Sequence

from blogcomments.domain.model import Reply
from blogcomments.domain.repository import ReplyRepository
from blogcomments.domain.value import CommentId, ReplyId

from .store import InMemoryStore


class InMemoryReplyRepository(ReplyRepository):
    """In-memory implementation of ReplyRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_comment_ids(
        self, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, list[Reply]]:
        """Find replies of several comments, oldest first."""
        grouped: dict[CommentId, list[Reply]] = {cid: [] for cid in comment_ids}
        replies = sorted(
            self._store.replies.values(), key=lambda r: (r.created_at, r.id)
        )
        for reply in replies:
            if reply.comment_id in grouped:
                grouped[reply.comment_id].append(reply)
        return grouped

    async def find_by_comment(self, comment_id: CommentId) -> list[Reply]:
        """Find the replies of a single comment."""
        grouped = await self.find_by_comment_ids([comment_id])
        return grouped[comment_id]

    async def save(self, reply: Reply) -> Reply:
        """Insert a reply with the next id."""
        saved = reply.model_copy(update={"id": self._store.next_reply_id()})
        self._store.replies[saved.id] = saved
        return saved

    async def delete(self, reply_id: ReplyId) -> int:
        """Delete a reply."""
        return 1 if self._store.replies.pop(reply_id, None) else 0

    async def delete_by_comment(self, comment_id: CommentId) -> int:
        """Delete every reply owned by a comment."""
        owned = [r.id for r in self._store.replies.values() if r.comment_id == comment_id]
        for reply_id in owned:
            del self._store.replies[reply_id]
        return len(owned)
