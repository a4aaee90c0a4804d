"""Delete reply use case."""

from pydantic import BaseModel

from blogcomments.domain.service import CommentService
from blogcomments.domain.value import ReplyId

from ..base import BaseUseCase, MessageResponse


class DeleteReplyRequest(BaseModel):
    """Delete reply request."""

    reply_id: int


class DeleteReplyUseCase(BaseUseCase):
    """Use case for deleting a single reply. Missing replies are ignored."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteReplyRequest) -> MessageResponse:
        await self.comment_service.delete_reply(ReplyId(request.reply_id))
        return MessageResponse(message="Respuesta eliminada con éxito")
