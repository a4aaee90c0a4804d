"""Create comment use case."""

from pydantic import BaseModel

from blogcomments.domain.service import CommentService
from blogcomments.domain.value import BlogId

from ..base import BaseUseCase


class CreateCommentRequest(BaseModel):
    """Create comment request.

    Fields are optional here so that missing values reach the domain
    validation and are reported as a ValidationError.
    """

    blog_id: int | None = None
    parent_id: int | None = None
    author: str | None = None
    email: str | None = None
    body: str | None = None


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    message: str
    id: int


class CreateCommentUseCase(BaseUseCase):
    """Use case for a visitor submitting a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        The comment is stored pending and stays hidden until approved.

        Raises:
            ValidationError: If a required field is missing or empty
        """
        comment = await self.comment_service.create_comment(
            blog_id=BlogId(request.blog_id) if request.blog_id is not None else None,
            author=request.author,
            email=request.email,
            body=request.body,
            parent_id=request.parent_id,
        )
        return CreateCommentResponse(
            message="Comentario agregado con éxito, pendiente de aprobación",
            id=comment.id,
        )
