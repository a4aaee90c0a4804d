"""Unit tests for the reply use cases."""

import pytest

from blogcomments.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from blogcomments.application.usecase.reply import (
    AddReplyRequest,
    AddReplyUseCase,
    DeleteReplyRequest,
    DeleteReplyUseCase,
)
from blogcomments.domain.error import NotFoundError, ValidationError
from blogcomments.domain.repository import CommentRepository, ReplyRepository
from tests.factories import make_comment
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestAddReplyUseCase:
    """Tests for AddReplyUseCase."""

    @pytest.mark.asyncio
    async def test_add_reply_success(self, unit_env):
        # Arrange
        use_case = await unit_env.get(AddReplyUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        reply_repo = await unit_env.get(ReplyRepository)
        comment = await comment_repo.save(make_comment())

        # Act
        response = await use_case.execute(
            AddReplyRequest(comment_id=comment.id, author="Admin", body="Gracias")
        )

        # Assert
        assert response.message == "Respuesta agregada con éxito"
        replies = await reply_repo.find_by_comment(comment.id)
        assert [r.body for r in replies] == ["Gracias"]

    @pytest.mark.asyncio
    async def test_add_reply_without_author_fails(self, unit_env):
        use_case = await unit_env.get(AddReplyUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(AddReplyRequest(comment_id=1, body="Gracias"))


class TestDeleteUseCases:
    """Tests for DeleteReplyUseCase and DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_delete_reply_twice_succeeds(self, unit_env):
        use_case = await unit_env.get(DeleteReplyUseCase)

        first = await use_case.execute(DeleteReplyRequest(reply_id=1))
        second = await use_case.execute(DeleteReplyRequest(reply_id=1))

        assert first.message == second.message == "Respuesta eliminada con éxito"

    @pytest.mark.asyncio
    async def test_delete_comment_cascades(self, unit_env):
        # Arrange
        add_reply = await unit_env.get(AddReplyUseCase)
        delete_comment = await unit_env.get(DeleteCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        reply_repo = await unit_env.get(ReplyRepository)
        comment = await comment_repo.save(make_comment())
        for body in ("Uno", "Dos"):
            await add_reply.execute(
                AddReplyRequest(comment_id=comment.id, author="Admin", body=body)
            )

        # Act
        response = await delete_comment.execute(
            DeleteCommentRequest(comment_id=comment.id)
        )

        # Assert
        assert response.message == "Comentario y sus respuestas eliminados"
        assert await comment_repo.find_by_id(comment.id) is None
        assert await reply_repo.find_by_comment(comment.id) == []

    @pytest.mark.asyncio
    async def test_delete_unknown_comment_fails(self, unit_env):
        use_case = await unit_env.get(DeleteCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(DeleteCommentRequest(comment_id=123))
