"""Toggle comment status use case."""

from pydantic import BaseModel, ConfigDict, Field

from blogcomments.domain.service import CommentService
from blogcomments.domain.value import CommentId, CommentStatus

from ..base import BaseUseCase


class ToggleCommentStatusRequest(BaseModel):
    """Toggle comment status request."""

    comment_id: int


class ToggleCommentStatusResponse(BaseModel):
    """Toggle comment status response."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    new_status: CommentStatus = Field(alias="nuevoEstado")


class ToggleCommentStatusUseCase(BaseUseCase):
    """Use case for approving or un-approving a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(
        self, request: ToggleCommentStatusRequest
    ) -> ToggleCommentStatusResponse:
        """Flip the comment status.

        Raises:
            NotFoundError: If the comment does not exist
        """
        new_status = await self.comment_service.toggle_status(
            CommentId(request.comment_id)
        )
        message = (
            "Comentario aprobado"
            if new_status == CommentStatus.APPROVED
            else "Comentario marcado como pendiente"
        )
        return ToggleCommentStatusResponse(message=message, new_status=new_status)
