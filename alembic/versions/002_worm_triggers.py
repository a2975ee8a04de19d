"""Database-level write-once guards on the document table.

Rejects DELETE outright and any UPDATE that touches a write-once column,
so the policy holds even for writes that bypass the application.

Revision ID: 002
Revises: 001
Create Date: 2026-10-16

"""

from collections.abc import Sequence

from alembic import op

revision: str = "002"
down_revision: str | None = "001"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.execute("""
        CREATE FUNCTION document_reject_delete() RETURNS trigger AS $$
        BEGIN
            RAISE EXCEPTION 'document rows are never deleted; use soft delete'
                USING ERRCODE = 'insufficient_privilege';
        END;
        $$ LANGUAGE plpgsql
    """)
    op.execute("""
        CREATE FUNCTION document_guard_update() RETURNS trigger AS $$
        BEGIN
            IF (NEW.id, NEW.root_id, NEW.version, NEW.title, NEW.description,
                NEW.document_type, NEW.file_reference, NEW.file_size, NEW.file_hash,
                NEW.mime_type, NEW.household_id, NEW.account_id, NEW.created_by,
                NEW.created_at, NEW.retention_date, NEW.supersession_reason)
               IS DISTINCT FROM
               (OLD.id, OLD.root_id, OLD.version, OLD.title, OLD.description,
                OLD.document_type, OLD.file_reference, OLD.file_size, OLD.file_hash,
                OLD.mime_type, OLD.household_id, OLD.account_id, OLD.created_by,
                OLD.created_at, OLD.retention_date, OLD.supersession_reason) THEN
                RAISE EXCEPTION 'document % is immutable once written', OLD.id
                    USING ERRCODE = 'insufficient_privilege';
            END IF;
            IF OLD.deleted_at IS NOT NULL AND
               (NEW.deleted_at, NEW.deleted_by, NEW.deletion_reason)
               IS DISTINCT FROM (OLD.deleted_at, OLD.deleted_by, OLD.deletion_reason) THEN
                RAISE EXCEPTION 'tombstone of document % is immutable', OLD.id
                    USING ERRCODE = 'insufficient_privilege';
            END IF;
            IF OLD.status = 'superseded' AND NEW.status <> 'superseded' THEN
                RAISE EXCEPTION 'document % is superseded', OLD.id
                    USING ERRCODE = 'insufficient_privilege';
            END IF;
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql
    """)
    op.execute("""
        CREATE TRIGGER document_no_delete BEFORE DELETE ON document
        FOR EACH ROW EXECUTE FUNCTION document_reject_delete()
    """)
    op.execute("""
        CREATE TRIGGER document_write_once BEFORE UPDATE ON document
        FOR EACH ROW EXECUTE FUNCTION document_guard_update()
    """)


def downgrade() -> None:
    op.execute("DROP TRIGGER IF EXISTS document_write_once ON document")
    op.execute("DROP TRIGGER IF EXISTS document_no_delete ON document")
    op.execute("DROP FUNCTION IF EXISTS document_guard_update()")
    op.execute("DROP FUNCTION IF EXISTS document_reject_delete()")
