"""Document table with version lineage and tombstone columns.

Revision ID: 001
Revises:
Create Date: 2026-10-16

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "document",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("root_id", sa.UUID(), sa.ForeignKey("document.id"), nullable=True),
        sa.Column("version", sa.Integer(), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("document_type", sa.String(50), nullable=False),
        sa.Column("file_reference", sa.Text(), nullable=True),
        sa.Column("file_size", sa.BigInteger(), nullable=True),
        sa.Column("file_hash", sa.String(64), nullable=True),
        sa.Column("mime_type", sa.String(100), nullable=True),
        sa.Column("household_id", sa.UUID(), nullable=True),
        sa.Column("account_id", sa.UUID(), nullable=True),
        sa.Column("created_by", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("retention_date", sa.Date(), nullable=True),
        sa.Column("supersession_reason", sa.Text(), nullable=True),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("deleted_by", sa.String(255), nullable=True),
        sa.Column("deletion_reason", sa.Text(), nullable=True),
        sa.CheckConstraint("version >= 1", name="ck_document_version_positive"),
        sa.CheckConstraint(
            "status IN ('active', 'superseded', 'archived')",
            name="ck_document_status",
        ),
        sa.CheckConstraint(
            "(root_id IS NULL AND version = 1) OR "
            "(root_id IS NOT NULL AND version > 1 AND length(trim(supersession_reason)) > 0)",
            name="ck_document_lineage_shape",
        ),
        sa.CheckConstraint(
            "deleted_at IS NULL OR (deleted_by IS NOT NULL AND deletion_reason IS NOT NULL)",
            name="ck_document_tombstone",
        ),
    )
    op.create_index("ix_document_root_id", "document", ["root_id"])
    op.create_index(
        "ix_document_active_created_at",
        "document",
        ["created_at"],
        postgresql_where=sa.text("status = 'active' AND deleted_at IS NULL"),
    )
    op.execute(
        "CREATE UNIQUE INDEX ux_document_lineage_version "
        "ON document ((COALESCE(root_id, id)), version)"
    )


def downgrade() -> None:
    op.drop_table("document")
