"""Moderation routes.

These routes carry no authentication of their own; deployments must put
them behind their own auth layer.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from blogcomments.application.usecase.base import MessageResponse
from blogcomments.application.usecase.comment import (
    AdminCommentItem,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    ListAdminCommentsUseCase,
    ToggleCommentStatusRequest,
    ToggleCommentStatusResponse,
    ToggleCommentStatusUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from blogcomments.application.usecase.reply import (
    AddReplyRequest,
    AddReplyUseCase,
    DeleteReplyRequest,
    DeleteReplyUseCase,
)
from blogcomments.domain.error import NotFoundError, StorageError, ValidationError
from blogcomments.interface.api.errors import storage_failure

router = APIRouter(prefix="/api/admin", tags=["admin"], route_class=DishkaRoute)

COMMENT_NOT_FOUND = "Comentario no encontrado"


class ToggleStatusAPIRequest(BaseModel):
    """API request for toggling a comment's status."""

    id: int | None = None


class UpdateCommentAPIRequest(BaseModel):
    """API request for editing a comment."""

    comentario: str | None = None


class AddReplyAPIRequest(BaseModel):
    """API request for replying to a comment."""

    comentario_id: int | None = None
    respuesta: str | None = None
    autor: str | None = None


@router.get("/comments", response_model=list[AdminCommentItem])
async def list_admin_comments(
    list_admin_use_case: FromDishka[ListAdminCommentsUseCase],
) -> list[AdminCommentItem]:
    """Get every comment, newest first, with blog titles and replies."""
    try:
        return await list_admin_use_case.execute()
    except StorageError as e:
        raise storage_failure(e, "Error al obtener los comentarios")


@router.post("/comments/toggle-status", response_model=ToggleCommentStatusResponse)
async def toggle_comment_status(
    request: ToggleStatusAPIRequest,
    toggle_status_use_case: FromDishka[ToggleCommentStatusUseCase],
) -> ToggleCommentStatusResponse:
    """Approve a pending comment or send an approved one back to pending.

    Args:
        request: Comment id
        toggle_status_use_case: Toggle status use case from DI

    Returns:
        Confirmation message and the new status (0 pending, 1 approved)

    Raises:
        HTTPException: 400 without id, 404 if the comment does not exist
    """
    if request.id is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="El id del comentario es obligatorio",
        )

    try:
        return await toggle_status_use_case.execute(
            ToggleCommentStatusRequest(comment_id=request.id)
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=COMMENT_NOT_FOUND,
        )
    except StorageError as e:
        raise storage_failure(e, "Error al actualizar el estado del comentario")


@router.post(
    "/responses",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_reply(
    request: AddReplyAPIRequest,
    add_reply_use_case: FromDishka[AddReplyUseCase],
) -> MessageResponse:
    """Reply to a comment.

    Raises:
        HTTPException: 400 if a field is missing, 404 if the comment is
            required to exist and does not
    """
    try:
        return await add_reply_use_case.execute(
            AddReplyRequest(
                comment_id=request.comentario_id,
                author=request.autor,
                body=request.respuesta,
            )
        )
    except ValidationError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Todos los campos son obligatorios",
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=COMMENT_NOT_FOUND,
        )
    except StorageError as e:
        raise storage_failure(e, "Error al agregar la respuesta")


@router.put("/comments/{comment_id}", response_model=MessageResponse)
async def update_comment(
    comment_id: int,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
) -> MessageResponse:
    """Edit the text of a comment. Status and date are unchanged.

    Raises:
        HTTPException: 400 if the text is empty, 404 if the comment does not exist
    """
    try:
        return await update_comment_use_case.execute(
            UpdateCommentRequest(comment_id=comment_id, body=request.comentario)
        )
    except ValidationError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="El comentario no puede estar vacío",
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=COMMENT_NOT_FOUND,
        )
    except StorageError as e:
        raise storage_failure(e, "Error al actualizar el comentario")


@router.delete("/responses/{reply_id}", response_model=MessageResponse)
async def delete_reply(
    reply_id: int,
    delete_reply_use_case: FromDishka[DeleteReplyUseCase],
) -> MessageResponse:
    """Delete a reply. Succeeds even if the reply is already gone."""
    try:
        return await delete_reply_use_case.execute(DeleteReplyRequest(reply_id=reply_id))
    except StorageError as e:
        raise storage_failure(e, "Error al eliminar la respuesta")


@router.delete("/comments/{comment_id}", response_model=MessageResponse)
async def delete_comment(
    comment_id: int,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
) -> MessageResponse:
    """Delete a comment together with all of its replies.

    Raises:
        HTTPException: 404 if the comment does not exist
    """
    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=comment_id)
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=COMMENT_NOT_FOUND,
        )
    except StorageError as e:
        raise storage_failure(e, "Error al eliminar el comentario")
