"""Public comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from blogcomments.application.usecase.comment import (
    CommentItem,
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    ListApprovedCommentsRequest,
    ListApprovedCommentsUseCase,
)
from blogcomments.domain.error import StorageError, ValidationError
from blogcomments.interface.api.errors import storage_failure

router = APIRouter(prefix="/api/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for submitting a comment.

    Every field is optional at this layer; missing ones are rejected with 400
    by the domain validation.
    """

    blog_id: int | None = None
    parent_id: int | None = None
    autor: str | None = None
    email: str | None = None
    comentario: str | None = None


@router.get("/{blog_id}", response_model=list[CommentItem])
async def list_approved_comments(
    blog_id: int,
    list_approved_use_case: FromDishka[ListApprovedCommentsUseCase],
) -> list[CommentItem]:
    """Get the approved comments of a blog post.

    Comments are returned oldest first, each with its replies.

    Args:
        blog_id: Blog post ID
        list_approved_use_case: List approved comments use case from DI

    Returns:
        Approved comments with replies
    """
    try:
        return await list_approved_use_case.execute(
            ListApprovedCommentsRequest(blog_id=blog_id)
        )
    except StorageError as e:
        raise storage_failure(e, "Error al obtener los comentarios")


@router.post("", response_model=CreateCommentResponse)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CreateCommentResponse:
    """Submit a comment on a blog post.

    The comment is stored pending and is not listed until an administrator
    approves it.

    Args:
        request: Comment data
        create_comment_use_case: Create comment use case from DI

    Returns:
        Confirmation message and the new comment id

    Raises:
        HTTPException: 400 if a field is missing, 500 on storage failure
    """
    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                blog_id=request.blog_id,
                parent_id=request.parent_id,
                author=request.autor,
                email=request.email,
                body=request.comentario,
            )
        )
    except ValidationError as e:
        logfire.warn("Comment submission rejected", missing=e.fields)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Todos los campos son obligatorios",
        )
    except StorageError as e:
        raise storage_failure(e, "Error al agregar el comentario")
