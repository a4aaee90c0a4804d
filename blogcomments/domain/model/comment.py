"""Comment entity.

Comments are top-level visitor submissions on a blog post. They start out
pending and only become publicly visible once an administrator approves them.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from blogcomments.domain.model.common import DomainModel
from blogcomments.domain.value import BlogId, CommentId, CommentStatus


class Comment(DomainModel):
    """Comment entity.

    ``id`` is None until the comment has been stored. ``parent_id`` is kept
    for compatibility with existing rows and is never used to build threads;
    replies live in their own entity.
    """

    id: Optional[CommentId] = None  # Assigned by storage on insert
    blog_id: BlogId
    parent_id: Optional[int] = None
    author: str
    email: str
    body: str = Field(min_length=1)
    status: CommentStatus = CommentStatus.PENDING
    created_at: datetime = Field(default_factory=datetime.now)
