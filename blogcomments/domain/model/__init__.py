"""Domain model entities for blog comments."""

from blogcomments.domain.model.comment import Comment
from blogcomments.domain.model.reply import Reply
from blogcomments.domain.model.thread import AdminCommentThread, CommentThread

__all__ = [
    "Comment",
    "Reply",
    "CommentThread",
    "AdminCommentThread",
]
