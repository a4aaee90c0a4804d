"""Update comment use case."""

from pydantic import BaseModel

from blogcomments.domain.service import CommentService
from blogcomments.domain.value import CommentId

from ..base import BaseUseCase, MessageResponse


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: int
    body: str | None = None  # Required, checked by the domain service


class UpdateCommentUseCase(BaseUseCase):
    """Use case for a moderator editing the text of a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> MessageResponse:
        """Overwrite the comment body; status and creation date are kept.

        Raises:
            ValidationError: If the new body is empty
            NotFoundError: If the comment does not exist
        """
        await self.comment_service.update_body(
            CommentId(request.comment_id), request.body
        )
        return MessageResponse(message="Comentario actualizado con éxito")
