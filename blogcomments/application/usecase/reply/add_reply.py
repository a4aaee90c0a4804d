"""Add reply use case."""

from pydantic import BaseModel

from blogcomments.domain.service import CommentService
from blogcomments.domain.value import CommentId

from ..base import BaseUseCase, MessageResponse


class AddReplyRequest(BaseModel):
    """Add reply request."""

    comment_id: int | None = None
    author: str | None = None
    body: str | None = None


class AddReplyUseCase(BaseUseCase):
    """Use case for a moderator replying to a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: AddReplyRequest) -> MessageResponse:
        """Store the reply.

        Raises:
            ValidationError: If a required field is missing or empty
            NotFoundError: If the comment is missing and existence checks are on
        """
        await self.comment_service.add_reply(
            comment_id=(
                CommentId(request.comment_id) if request.comment_id is not None else None
            ),
            author=request.author,
            body=request.body,
        )
        return MessageResponse(message="Respuesta agregada con éxito")
