"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import delete, desc, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blogcomments.domain.model import Comment
from blogcomments.domain.repository import CommentRepository
from blogcomments.domain.value import BlogId, CommentId, CommentStatus
from blogcomments.persistence.database import storage_errors
from blogcomments.persistence.mappers import comment_to_dict, row_to_comment
from blogcomments.persistence.tables import blogs_table, comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        with storage_errors("find_comment"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_blog(
        self,
        blog_id: BlogId,
        status: Optional[CommentStatus] = None,
    ) -> List[Comment]:
        """Find comments of a blog post, oldest first."""
        stmt = select(comments_table).where(comments_table.c.blog_id == blog_id)

        if status is not None:
            stmt = stmt.where(comments_table.c.estado == int(status))

        stmt = stmt.order_by(comments_table.c.fecha_creacion, comments_table.c.id)

        with storage_errors("find_comments_by_blog"):
            result = await self.session.execute(stmt)
            rows = result.fetchall()
        return [row_to_comment(row._asdict()) for row in rows]

    async def find_all_with_blog_title(self) -> List[tuple[Comment, Optional[str]]]:
        """Find every comment with its blog title, newest first."""
        stmt = (
            select(comments_table, blogs_table.c.titulo.label("blog_titulo"))
            .select_from(
                comments_table.outerjoin(
                    blogs_table, comments_table.c.blog_id == blogs_table.c.id
                )
            )
            .order_by(
                desc(comments_table.c.fecha_creacion), desc(comments_table.c.id)
            )
        )

        with storage_errors("find_all_comments"):
            result = await self.session.execute(stmt)
            rows = result.fetchall()

        pairs = []
        for row in rows:
            data = row._asdict()
            pairs.append((row_to_comment(data), data.get("blog_titulo")))
        return pairs

    async def save(self, comment: Comment) -> Comment:
        """Insert a comment and return it with the generated id."""
        stmt = (
            comments_table.insert()
            .values(**comment_to_dict(comment))
            .returning(comments_table)
        )
        with storage_errors("insert_comment"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
        return row_to_comment(row._asdict())

    async def toggle_status(self, comment_id: CommentId) -> Optional[CommentStatus]:
        """Flip estado between 0 and 1 in one statement."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(estado=1 - comments_table.c.estado)
            .returning(comments_table.c.estado)
        )
        with storage_errors("toggle_comment_status"):
            result = await self.session.execute(stmt)
            new_status = result.scalar_one_or_none()
            await self.session.flush()

        if new_status is None:
            return None
        return CommentStatus(new_status)

    async def update_body(self, comment_id: CommentId, body: str) -> Optional[Comment]:
        """Overwrite the comentario column."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(comentario=body)
            .returning(comments_table)
        )
        with storage_errors("update_comment"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()

        if row is None:
            return None
        return row_to_comment(row._asdict())

    async def delete(self, comment_id: CommentId) -> int:
        """Delete a comment (hard delete)."""
        stmt = delete(comments_table).where(comments_table.c.id == comment_id)
        with storage_errors("delete_comment"):
            result = await self.session.execute(stmt)
            await self.session.flush()
        return result.rowcount
