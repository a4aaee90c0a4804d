"""Delete comment use case."""

from pydantic import BaseModel

from blogcomments.domain.service import CommentService
from blogcomments.domain.value import CommentId

from ..base import BaseUseCase, MessageResponse


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: int


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting a comment and its replies."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> MessageResponse:
        """Delete the comment with all of its replies, all-or-nothing.

        Raises:
            NotFoundError: If the comment does not exist
        """
        await self.comment_service.delete_comment(CommentId(request.comment_id))
        return MessageResponse(message="Comentario y sus respuestas eliminados")
