"""Unit tests for CommentService."""

import pytest

from blogcomments.domain.error import NotFoundError, ValidationError
from blogcomments.domain.repository import (
    CommentRepository,
    ReplyRepository,
    TransactionManager,
)
from blogcomments.domain.service import CommentService
from blogcomments.domain.value import BlogId, CommentId, CommentStatus, ReplyId
from blogcomments.persistence.repository.inmemory import InMemoryStore
from tests.factories import make_comment, make_reply
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


async def _create(service: CommentService, blog_id: int = 1, body: str = "Hola"):
    return await service.create_comment(
        blog_id=BlogId(blog_id),
        author="Ana",
        email="ana@example.com",
        body=body,
    )


class TestCreateComment:
    """Tests for create_comment method."""

    @pytest.mark.asyncio
    async def test_create_comment_is_pending(self, unit_env):
        """New comments are always stored pending."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)

        # Act
        result = await comment_service.create_comment(
            blog_id=BlogId(7),
            author="Ana",
            email="ana@example.com",
            body="Muy buen post",
            parent_id=3,
        )

        # Assert
        assert result.id is not None
        assert result.status == CommentStatus.PENDING
        assert result.parent_id == 3

        saved = await comment_repo.find_by_id(result.id)
        assert saved is not None
        assert saved.body == "Muy buen post"
        assert saved.status == CommentStatus.PENDING

    @pytest.mark.asyncio
    async def test_created_comment_not_publicly_listed(self, unit_env):
        """A pending comment does not appear in the public listing."""
        comment_service = await unit_env.get(CommentService)

        await _create(comment_service, blog_id=7)

        assert await comment_service.list_approved(BlogId(7)) == []

    @pytest.mark.asyncio
    async def test_ids_are_unique(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        first = await _create(comment_service)
        second = await _create(comment_service)

        assert first.id != second.id

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "field,value",
        [
            ("blog_id", None),
            ("blog_id", 0),
            ("author", None),
            ("author", ""),
            ("email", ""),
            ("body", None),
            ("body", "   "),
        ],
    )
    async def test_create_comment_missing_field_rejected(self, unit_env, field, value):
        """Missing or empty fields raise ValidationError and store nothing."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        store = await unit_env.get(InMemoryStore)
        kwargs = {
            "blog_id": BlogId(1),
            "author": "Ana",
            "email": "ana@example.com",
            "body": "Hola",
        }
        kwargs[field] = value

        # Act & Assert
        with pytest.raises(ValidationError) as exc_info:
            await comment_service.create_comment(**kwargs)

        assert field in exc_info.value.fields
        assert store.comments == {}

    @pytest.mark.asyncio
    async def test_create_comment_reports_every_missing_field(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(ValidationError) as exc_info:
            await comment_service.create_comment(
                blog_id=None, author=None, email=None, body=None
            )

        assert exc_info.value.fields == ["blog_id", "author", "email", "body"]


class TestListApproved:
    """Tests for list_approved method."""

    @pytest.mark.asyncio
    async def test_only_approved_comments_of_blog(self, unit_env):
        """Pending comments and other blogs are excluded."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)

        approved = await comment_repo.save(
            make_comment(blog_id=1, status=CommentStatus.APPROVED)
        )
        await comment_repo.save(make_comment(blog_id=1, status=CommentStatus.PENDING))
        await comment_repo.save(make_comment(blog_id=2, status=CommentStatus.APPROVED))

        # Act
        threads = await comment_service.list_approved(BlogId(1))

        # Assert
        assert [t.comment.id for t in threads] == [approved.id]

    @pytest.mark.asyncio
    async def test_oldest_first_with_replies_oldest_first(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        reply_repo = await unit_env.get(ReplyRepository)

        newer = await comment_repo.save(
            make_comment(status=CommentStatus.APPROVED, minutes=10)
        )
        older = await comment_repo.save(
            make_comment(status=CommentStatus.APPROVED, minutes=1)
        )
        late_reply = await reply_repo.save(make_reply(older.id, minutes=30))
        early_reply = await reply_repo.save(make_reply(older.id, minutes=20))

        # Act
        threads = await comment_service.list_approved(BlogId(1))

        # Assert
        assert [t.comment.id for t in threads] == [older.id, newer.id]
        assert [r.id for r in threads[0].replies] == [early_reply.id, late_reply.id]
        assert threads[1].replies == []

    @pytest.mark.asyncio
    async def test_same_timestamp_ordered_by_id(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)

        first = await comment_repo.save(make_comment(status=CommentStatus.APPROVED))
        second = await comment_repo.save(make_comment(status=CommentStatus.APPROVED))

        threads = await comment_service.list_approved(BlogId(1))

        assert [t.comment.id for t in threads] == [first.id, second.id]

    @pytest.mark.asyncio
    async def test_unknown_blog_returns_empty(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        assert await comment_service.list_approved(BlogId(999)) == []


class TestListAllForAdmin:
    """Tests for list_all_for_admin method."""

    @pytest.mark.asyncio
    async def test_all_statuses_newest_first_with_titles(self, unit_env):
        """Admin listing includes pending comments and the blog title."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        store = await unit_env.get(InMemoryStore)
        store.blogs[BlogId(1)] = "Primer post"

        old = await comment_repo.save(
            make_comment(blog_id=1, status=CommentStatus.APPROVED, minutes=1)
        )
        new = await comment_repo.save(make_comment(blog_id=2, minutes=5))

        # Act
        threads = await comment_service.list_all_for_admin()

        # Assert
        assert [t.comment.id for t in threads] == [new.id, old.id]
        assert threads[0].blog_title is None  # Blog 2 has no row
        assert threads[1].blog_title == "Primer post"

    @pytest.mark.asyncio
    async def test_replies_attached_to_their_comment(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        reply_repo = await unit_env.get(ReplyRepository)

        comment = await comment_repo.save(make_comment())
        other = await comment_repo.save(make_comment(minutes=1))
        reply = await reply_repo.save(make_reply(comment.id))

        threads = await comment_service.list_all_for_admin()
        by_id = {t.comment.id: t for t in threads}

        assert [r.id for r in by_id[comment.id].replies] == [reply.id]
        assert by_id[other.id].replies == []


class TestToggleStatus:
    """Tests for toggle_status method."""

    @pytest.mark.asyncio
    async def test_toggle_approves_then_reverts(self, unit_env):
        """Two toggles return the comment to its original status."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment = await _create(comment_service, blog_id=3)

        # Act
        first = await comment_service.toggle_status(comment.id)
        listed = await comment_service.list_approved(BlogId(3))
        second = await comment_service.toggle_status(comment.id)

        # Assert
        assert first == CommentStatus.APPROVED
        assert [t.comment.id for t in listed] == [comment.id]
        assert second == CommentStatus.PENDING
        assert await comment_service.list_approved(BlogId(3)) == []

    @pytest.mark.asyncio
    async def test_toggle_missing_comment(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.toggle_status(CommentId(999))


class TestUpdateBody:
    """Tests for update_body method."""

    @pytest.mark.asyncio
    async def test_update_body_keeps_status_and_date(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment = await _create(comment_service)
        await comment_service.toggle_status(comment.id)

        # Act
        updated = await comment_service.update_body(comment.id, "Texto corregido")

        # Assert
        assert updated.body == "Texto corregido"
        assert updated.status == CommentStatus.APPROVED
        assert updated.created_at == comment.created_at

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [None, "", "  "])
    async def test_update_empty_body_rejected(self, unit_env, body):
        """Empty text is rejected and the stored text is unchanged."""
        comment_service = await unit_env.get(CommentService)
        comment = await _create(comment_service, body="Original")

        with pytest.raises(ValidationError):
            await comment_service.update_body(comment.id, body)

        stored = await comment_service.get_comment(comment.id)
        assert stored.body == "Original"

    @pytest.mark.asyncio
    async def test_update_missing_comment(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.update_body(CommentId(999), "Texto")


class TestDeleteComment:
    """Tests for delete_comment method."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("reply_count", [0, 1, 3])
    async def test_delete_removes_comment_and_replies(self, unit_env, reply_count):
        """Deleting a comment removes exactly its replies."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        reply_repo = await unit_env.get(ReplyRepository)

        comment = await _create(comment_service)
        other = await _create(comment_service)
        for i in range(reply_count):
            await reply_repo.save(make_reply(comment.id, minutes=i))
        kept = await reply_repo.save(make_reply(other.id))

        # Act
        deleted_replies = await comment_service.delete_comment(comment.id)

        # Assert
        assert deleted_replies == reply_count
        assert await comment_service.get_comment(comment.id) is None
        assert await reply_repo.find_by_comment(comment.id) == []
        assert [r.id for r in await reply_repo.find_by_comment(other.id)] == [kept.id]

    @pytest.mark.asyncio
    async def test_second_delete_not_found(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment = await _create(comment_service)

        await comment_service.delete_comment(comment.id)

        with pytest.raises(NotFoundError):
            await comment_service.delete_comment(comment.id)

    @pytest.mark.asyncio
    async def test_delete_missing_comment_keeps_orphan_replies(self, unit_env):
        """A failed delete rolls back the reply removal."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        reply_repo = await unit_env.get(ReplyRepository)
        orphan = await reply_repo.save(make_reply(CommentId(42)))

        # Act
        with pytest.raises(NotFoundError):
            await comment_service.delete_comment(CommentId(42))

        # Assert
        assert [r.id for r in await reply_repo.find_by_comment(CommentId(42))] == [
            orphan.id
        ]


class TestAddReply:
    """Tests for add_reply method."""

    @pytest.mark.asyncio
    async def test_add_reply_listed_under_comment(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment = await _create(comment_service, blog_id=4)
        await comment_service.toggle_status(comment.id)

        # Act
        reply = await comment_service.add_reply(comment.id, "Admin", "¡Gracias!")

        # Assert
        assert reply.id is not None
        threads = await comment_service.list_approved(BlogId(4))
        assert [r.id for r in threads[0].replies] == [reply.id]

    @pytest.mark.asyncio
    async def test_add_reply_to_unknown_comment_allowed_by_default(self, unit_env):
        """Without the existence check, the comment id is stored as given."""
        comment_service = await unit_env.get(CommentService)

        reply = await comment_service.add_reply(CommentId(999), "Admin", "Hola")

        assert reply.comment_id == 999

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "comment_id,author,body,missing",
        [
            (None, "Admin", "Hola", "comment_id"),
            (CommentId(0), "Admin", "Hola", "comment_id"),
            (CommentId(1), "", "Hola", "author"),
            (CommentId(1), "Admin", None, "body"),
        ],
    )
    async def test_add_reply_missing_field_rejected(
        self, unit_env, comment_id, author, body, missing
    ):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(ValidationError) as exc_info:
            await comment_service.add_reply(comment_id, author, body)

        assert exc_info.value.fields == [missing]

    @pytest.mark.asyncio
    async def test_existence_check_rejects_unknown_comment(self, unit_env):
        """With the check enabled, replies need an existing comment."""
        # Arrange
        store = await unit_env.get(InMemoryStore)
        comment_service = CommentService(
            comment_repository=await unit_env.get(CommentRepository),
            reply_repository=await unit_env.get(ReplyRepository),
            transaction_manager=await unit_env.get(TransactionManager),
            require_existing_comment_for_reply=True,
        )

        # Act & Assert
        with pytest.raises(NotFoundError):
            await comment_service.add_reply(CommentId(999), "Admin", "Hola")
        assert store.replies == {}

        comment = await _create(comment_service)
        reply = await comment_service.add_reply(comment.id, "Admin", "Hola")
        assert reply.comment_id == comment.id


class TestDeleteReply:
    """Tests for delete_reply method."""

    @pytest.mark.asyncio
    async def test_delete_reply_is_idempotent(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        reply_repo = await unit_env.get(ReplyRepository)
        comment = await _create(comment_service)
        reply = await comment_service.add_reply(comment.id, "Admin", "Hola")

        # Act
        await comment_service.delete_reply(reply.id)
        await comment_service.delete_reply(reply.id)
        await comment_service.delete_reply(ReplyId(12345))

        # Assert
        assert await reply_repo.find_by_comment(comment.id) == []
