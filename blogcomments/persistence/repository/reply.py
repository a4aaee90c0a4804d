"""PostgreSQL implementation of Reply repository."""

from typing import List, Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from blogcomments.domain.model import Reply
from blogcomments.domain.repository import ReplyRepository
from blogcomments.domain.value import CommentId, ReplyId
from blogcomments.persistence.database import storage_errors
from blogcomments.persistence.mappers import reply_to_dict, row_to_reply
from blogcomments.persistence.tables import replies_table


class PostgresReplyRepository(ReplyRepository):
    """PostgreSQL implementation of ReplyRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_comment_ids(
        self, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, List[Reply]]:
        """Load replies for many comments with a single IN query."""
        grouped: dict[CommentId, List[Reply]] = {cid: [] for cid in comment_ids}
        if not comment_ids:
            return grouped

        stmt = (
            select(replies_table)
            .where(replies_table.c.comentario_id.in_(list(comment_ids)))
            .order_by(replies_table.c.fecha_creacion, replies_table.c.id)
        )
        with storage_errors("find_replies"):
            result = await self.session.execute(stmt)
            rows = result.fetchall()

        for row in rows:
            reply = row_to_reply(row._asdict())
            grouped.setdefault(reply.comment_id, []).append(reply)
        return grouped

    async def find_by_comment(self, comment_id: CommentId) -> List[Reply]:
        """Find the replies of a single comment, oldest first."""
        grouped = await self.find_by_comment_ids([comment_id])
        return grouped[comment_id]

    async def save(self, reply: Reply) -> Reply:
        """Insert a reply and return it with the generated id."""
        stmt = (
            replies_table.insert()
            .values(**reply_to_dict(reply))
            .returning(replies_table)
        )
        with storage_errors("insert_reply"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
        return row_to_reply(row._asdict())

    async def delete(self, reply_id: ReplyId) -> int:
        """Delete a reply (hard delete)."""
        stmt = delete(replies_table).where(replies_table.c.id == reply_id)
        with storage_errors("delete_reply"):
            result = await self.session.execute(stmt)
            await self.session.flush()
        return result.rowcount

    async def delete_by_comment(self, comment_id: CommentId) -> int:
        """Delete all replies owned by a comment."""
        stmt = delete(replies_table).where(replies_table.c.comentario_id == comment_id)
        with storage_errors("delete_replies_by_comment"):
            result = await self.session.execute(stmt)
            await self.session.flush()
        return result.rowcount
