"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's ORM. Column names are the Spanish ones from the
database; domain field names are English.
"""

from typing import Any, Dict

from blogcomments.domain.model import Comment, Reply
from blogcomments.domain.value import BlogId, CommentId, CommentStatus, ReplyId


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(row["id"]),
        blog_id=BlogId(row["blog_id"]),
        parent_id=row.get("parent_id"),
        author=row["autor"],
        email=row["email"],
        body=row["comentario"],
        status=CommentStatus(row["estado"]),
        created_at=row["fecha_creacion"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    The id is left out so the database assigns it.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "blog_id": comment.blog_id,
        "parent_id": comment.parent_id,
        "autor": comment.author,
        "email": comment.email,
        "comentario": comment.body,
        "estado": int(comment.status),
        "fecha_creacion": comment.created_at,
    }


def row_to_reply(row: Dict[str, Any]) -> Reply:
    """Convert database row to Reply domain model.

    Args:
        row: Database row as dict

    Returns:
        Reply domain model
    """
    return Reply(
        id=ReplyId(row["id"]),
        comment_id=CommentId(row["comentario_id"]),
        author=row["autor"],
        body=row["respuesta"],
        created_at=row["fecha_creacion"],
    )


def reply_to_dict(reply: Reply) -> Dict[str, Any]:
    """Convert Reply domain model to database dict (without id)."""
    return {
        "comentario_id": reply.comment_id,
        "autor": reply.author,
        "respuesta": reply.body,
        "fecha_creacion": reply.created_at,
    }
