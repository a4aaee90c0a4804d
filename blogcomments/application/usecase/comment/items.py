"""Response items shared by the comment listing use cases.

Attribute names are English; the JSON keys are the Spanish column names the
blog frontend already consumes (``autor``, ``comentario``, ``estado`` ...).
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from blogcomments.domain.model import AdminCommentThread, CommentThread, Reply
from blogcomments.domain.value import CommentStatus


class ReplyItem(BaseModel):
    """Reply item in response."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    comment_id: int = Field(alias="comentario_id")
    body: str = Field(alias="respuesta")
    author: str = Field(alias="autor")
    created_at: datetime = Field(alias="fecha_creacion")

    @classmethod
    def from_domain(cls, reply: Reply) -> "ReplyItem":
        return cls(
            id=reply.id,
            comment_id=reply.comment_id,
            body=reply.body,
            author=reply.author,
            created_at=reply.created_at,
        )


class CommentItem(BaseModel):
    """Comment item in response, with its replies."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    blog_id: int
    parent_id: int | None = None
    author: str = Field(alias="autor")
    email: str
    body: str = Field(alias="comentario")
    status: CommentStatus = Field(alias="estado")
    created_at: datetime = Field(alias="fecha_creacion")
    replies: list[ReplyItem] = Field(default=[], alias="respuestas")

    @classmethod
    def from_thread(cls, thread: CommentThread) -> "CommentItem":
        comment = thread.comment
        return cls(
            id=comment.id,
            blog_id=comment.blog_id,
            parent_id=comment.parent_id,
            author=comment.author,
            email=comment.email,
            body=comment.body,
            status=comment.status,
            created_at=comment.created_at,
            replies=[ReplyItem.from_domain(r) for r in thread.replies],
        )


class AdminCommentItem(CommentItem):
    """Comment item for moderators, with the blog title (None if deleted)."""

    blog_title: str | None = Field(default=None, alias="blog_titulo")

    @classmethod
    def from_admin_thread(cls, thread: AdminCommentThread) -> "AdminCommentItem":
        item = CommentItem.from_thread(thread)
        return cls(**item.model_dump(), blog_title=thread.blog_title)
