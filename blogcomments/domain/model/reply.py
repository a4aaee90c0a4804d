"""Reply entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from blogcomments.domain.model.common import DomainModel
from blogcomments.domain.value import CommentId, ReplyId


class Reply(DomainModel):
    """Administrator reply attached to exactly one comment.

    Replies have no visibility state of their own: they are shown whenever
    their comment is shown, and deleted together with it.
    """

    id: Optional[ReplyId] = None  # Assigned by storage on insert
    comment_id: CommentId
    author: str
    body: str = Field(min_length=1)
    created_at: datetime = Field(default_factory=datetime.now)
