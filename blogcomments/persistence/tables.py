"""SQLAlchemy table definitions for blog comments.

These table definitions are used with SQLAlchemy Core statements.
They match the schema defined in Alembic migrations. Table and column names
keep the Spanish names of the existing blog database.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    Index,
    Integer,
    MetaData,
    SmallInteger,
    String,
    Table,
    Text,
    text,
)

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# BLOGS TABLE (owned by the blog platform, read-only here)
# ============================================================================
blogs_table = Table(
    "blogs",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("titulo", String(255), nullable=False),
)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comentarios",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    # No foreign key: blogs belong to another system
    Column("blog_id", Integer, nullable=False),
    Column("parent_id", Integer, nullable=True),  # Legacy column, never read
    Column("autor", String(255), nullable=False),
    Column("email", String(255), nullable=False),
    Column("comentario", Text, nullable=False),
    Column("estado", SmallInteger, nullable=False, server_default="0"),
    Column(
        "fecha_creacion", DateTime, nullable=False, server_default=text("now()")
    ),
    CheckConstraint("estado IN (0, 1)", name="comentarios_estado_check"),
)

Index(
    "idx_comentarios_blog_estado",
    comments_table.c.blog_id,
    comments_table.c.estado,
)
Index("idx_comentarios_fecha_creacion", comments_table.c.fecha_creacion)

# ============================================================================
# REPLIES TABLE
# ============================================================================
replies_table = Table(
    "respuestas",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    # Cascade is done by the service inside a transaction
    Column("comentario_id", Integer, nullable=False),
    Column("respuesta", Text, nullable=False),
    Column("autor", String(255), nullable=False),
    Column(
        "fecha_creacion", DateTime, nullable=False, server_default=text("now()")
    ),
)

Index("idx_respuestas_comentario_id", replies_table.c.comentario_id)
