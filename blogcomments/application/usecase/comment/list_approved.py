"""List approved comments use case."""

from pydantic import BaseModel

from blogcomments.domain.service import CommentService
from blogcomments.domain.value import BlogId

from ..base import BaseUseCase
from .items import CommentItem


class ListApprovedCommentsRequest(BaseModel):
    """List approved comments request."""

    blog_id: int


class ListApprovedCommentsUseCase(BaseUseCase):
    """Use case for the public comment list of a blog post."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: ListApprovedCommentsRequest) -> list[CommentItem]:
        """Return approved comments, oldest first, with their replies."""
        threads = await self.comment_service.list_approved(BlogId(request.blog_id))
        return [CommentItem.from_thread(thread) for thread in threads]
