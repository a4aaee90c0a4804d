"""Unit tests for UpdateCommentUseCase."""

import pytest

from blogcomments.application.usecase.comment import (
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from blogcomments.domain.error import NotFoundError, ValidationError
from blogcomments.domain.repository import CommentRepository
from tests.factories import make_comment
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestUpdateCommentUseCase:
    """Tests for UpdateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_update_comment_text_success(self, unit_env):
        # Arrange
        use_case = await unit_env.get(UpdateCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(make_comment(body="Con erratas"))

        # Act
        response = await use_case.execute(
            UpdateCommentRequest(comment_id=comment.id, body="Sin erratas")
        )

        # Assert
        assert response.message == "Comentario actualizado con éxito"
        assert (await comment_repo.find_by_id(comment.id)).body == "Sin erratas"

    @pytest.mark.asyncio
    async def test_update_without_body_fails(self, unit_env):
        use_case = await unit_env.get(UpdateCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(make_comment(body="Original"))

        with pytest.raises(ValidationError):
            await use_case.execute(UpdateCommentRequest(comment_id=comment.id))

        assert (await comment_repo.find_by_id(comment.id)).body == "Original"

    @pytest.mark.asyncio
    async def test_update_unknown_comment_fails(self, unit_env):
        use_case = await unit_env.get(UpdateCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(UpdateCommentRequest(comment_id=404, body="Texto"))
