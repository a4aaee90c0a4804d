"""initial_schema

Create the comment moderation schema:
- Comentarios (visitor comments, pending until approved)
- Respuestas (administrator replies, one comment each)

The blogs table belongs to the blog platform. It is only created here when
missing so that a fresh database can serve the admin listing.

Revision ID: 3c1f9a2b7d4e
Revises:
Create Date: 2026-10-19 10:12:44.512301

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c1f9a2b7d4e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # BLOGS table (owned by the blog platform)
    # ========================================================================
    op.execute("""
        CREATE TABLE IF NOT EXISTS blogs (
            id SERIAL PRIMARY KEY,
            titulo VARCHAR(255) NOT NULL
        )
    """)

    # ========================================================================
    # COMENTARIOS table
    # ========================================================================
    op.create_table(
        "comentarios",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("blog_id", sa.Integer(), nullable=False),
        sa.Column("parent_id", sa.Integer(), nullable=True),
        sa.Column("autor", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("comentario", sa.Text(), nullable=False),
        sa.Column(
            "estado",
            sa.SmallInteger(),
            nullable=False,
            server_default=sa.text("0"),
        ),
        sa.Column(
            "fecha_creacion",
            sa.DateTime(),
            nullable=False,
            server_default=sa.text("now()"),
        ),
        sa.CheckConstraint("estado IN (0, 1)", name="comentarios_estado_check"),
    )
    op.create_index(
        "idx_comentarios_blog_estado", "comentarios", ["blog_id", "estado"]
    )
    op.create_index(
        "idx_comentarios_fecha_creacion", "comentarios", ["fecha_creacion"]
    )

    # ========================================================================
    # RESPUESTAS table
    # ========================================================================
    op.create_table(
        "respuestas",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("comentario_id", sa.Integer(), nullable=False),
        sa.Column("respuesta", sa.Text(), nullable=False),
        sa.Column("autor", sa.String(255), nullable=False),
        sa.Column(
            "fecha_creacion",
            sa.DateTime(),
            nullable=False,
            server_default=sa.text("now()"),
        ),
    )
    op.create_index("idx_respuestas_comentario_id", "respuestas", ["comentario_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_respuestas_comentario_id", table_name="respuestas")
    op.drop_table("respuestas")

    op.drop_index("idx_comentarios_fecha_creacion", table_name="comentarios")
    op.drop_index("idx_comentarios_blog_estado", table_name="comentarios")
    op.drop_table("comentarios")
    # blogs is left in place, it may hold platform data
