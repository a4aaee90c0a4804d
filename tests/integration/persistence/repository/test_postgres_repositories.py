"""Integration tests for the PostgreSQL repositories.

Assumes the schema has been migrated. Each test works on a random blog id
so runs do not interfere with each other.
"""

import random
from datetime import datetime

import pytest

from blogcomments.domain.error import NotFoundError
from blogcomments.domain.model import Comment
from blogcomments.domain.repository import CommentRepository, ReplyRepository
from blogcomments.domain.service import CommentService
from blogcomments.domain.value import BlogId, CommentId, CommentStatus
from tests.harness import create_env_fixture

# Integration test fixture - real persistence, assumes postgres running
integration_env = create_env_fixture(unmock={"persistence"})


def _blog_id() -> BlogId:
    return BlogId(random.randint(1_000_000, 2_000_000_000))


class TestPostgresCommentRepository:
    """Integration tests for PostgresCommentRepository."""

    @pytest.mark.asyncio
    async def test_save_and_find(self, integration_env):
        # Arrange
        comment_repo = await integration_env.get(CommentRepository)
        blog_id = _blog_id()

        # Act
        saved = await comment_repo.save(
            Comment(
                blog_id=blog_id,
                author="Ana",
                email="ana@example.com",
                body="Hola",
                created_at=datetime.now(),
            )
        )
        found = await comment_repo.find_by_id(saved.id)

        # Assert
        assert saved.id is not None
        assert found is not None
        assert found.status == CommentStatus.PENDING
        assert found.blog_id == blog_id

    @pytest.mark.asyncio
    async def test_toggle_is_atomic_flip(self, integration_env):
        comment_repo = await integration_env.get(CommentRepository)
        saved = await comment_repo.save(
            Comment(blog_id=_blog_id(), author="Ana", email="a@b.c", body="Hola")
        )

        assert await comment_repo.toggle_status(saved.id) == CommentStatus.APPROVED
        assert await comment_repo.toggle_status(saved.id) == CommentStatus.PENDING
        assert await comment_repo.toggle_status(CommentId(-1)) is None

    @pytest.mark.asyncio
    async def test_find_by_blog_orders_oldest_first(self, integration_env):
        comment_repo = await integration_env.get(CommentRepository)
        blog_id = _blog_id()
        later = await comment_repo.save(
            Comment(
                blog_id=blog_id,
                author="B",
                email="b@b.c",
                body="Segundo",
                created_at=datetime(2024, 5, 2),
            )
        )
        earlier = await comment_repo.save(
            Comment(
                blog_id=blog_id,
                author="A",
                email="a@b.c",
                body="Primero",
                created_at=datetime(2024, 5, 1),
            )
        )

        comments = await comment_repo.find_by_blog(blog_id)

        assert [c.id for c in comments] == [earlier.id, later.id]


class TestPostgresCascadeDelete:
    """Integration tests for deleting a comment with its replies."""

    @pytest.mark.asyncio
    async def test_delete_comment_removes_replies(self, integration_env):
        # Arrange
        service = await integration_env.get(CommentService)
        reply_repo = await integration_env.get(ReplyRepository)
        comment = await service.create_comment(
            blog_id=_blog_id(), author="Ana", email="a@b.c", body="Hola"
        )
        await service.add_reply(comment.id, "Admin", "Uno")
        await service.add_reply(comment.id, "Admin", "Dos")

        # Act
        deleted = await service.delete_comment(comment.id)

        # Assert
        assert deleted == 2
        assert await reply_repo.find_by_comment(comment.id) == []
        with pytest.raises(NotFoundError):
            await service.delete_comment(comment.id)

    @pytest.mark.asyncio
    async def test_missing_comment_delete_rolls_back_replies(self, integration_env):
        service = await integration_env.get(CommentService)
        reply_repo = await integration_env.get(ReplyRepository)
        orphan_owner = CommentId(random.randint(1_500_000_000, 2_000_000_000))
        await service.add_reply(orphan_owner, "Admin", "Huérfana")

        with pytest.raises(NotFoundError):
            await service.delete_comment(orphan_owner)

        assert len(await reply_repo.find_by_comment(orphan_owner)) == 1
