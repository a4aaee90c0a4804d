"""Shared state for the in-memory repositories."""

from dataclasses import dataclass, field
from itertools import count
from typing import Iterator

from blogcomments.domain.model import Comment, Reply
from blogcomments.domain.value import BlogId, CommentId, ReplyId


@dataclass
class InMemoryStore:
    """Tables of the in-memory backend.

    One store is shared by the comment and reply repositories so that a
    transaction can snapshot and restore both together.
    """

    comments: dict[CommentId, Comment] = field(default_factory=dict)
    replies: dict[ReplyId, Reply] = field(default_factory=dict)
    blogs: dict[BlogId, str] = field(default_factory=dict)  # id -> titulo
    _comment_ids: Iterator[int] = field(default_factory=lambda: count(1))
    _reply_ids: Iterator[int] = field(default_factory=lambda: count(1))

    def next_comment_id(self) -> CommentId:
        return CommentId(next(self._comment_ids))

    def next_reply_id(self) -> ReplyId:
        return ReplyId(next(self._reply_ids))

    def snapshot(self) -> tuple[dict, dict]:
        """Copy the mutable tables (entities are immutable)."""
        return dict(self.comments), dict(self.replies)

    def restore(self, snapshot: tuple[dict, dict]) -> None:
        self.comments, self.replies = dict(snapshot[0]), dict(snapshot[1])
