"""Badge store baseline schema

Revision ID: 20261019_01
Revises:
Create Date: 2026-10-19
"""
# pylint: disable=no-member,invalid-name,wrong-import-order

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "20261019_01"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""

    op.create_table(
        "application_status",
        sa.Column("application_name", sa.Text(), primary_key=True),
        sa.Column("project_name", sa.Text(), nullable=False),
        sa.Column("health_status", sa.Text(), nullable=False, server_default=sa.text("'Unknown'")),
        sa.Column("sync_status", sa.Text(), nullable=False, server_default=sa.text("'Unknown'")),
        sa.Column("operation_sync_revision", sa.Text(), nullable=True),
        sa.Column("updated_at_utc", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint(
            "health_status IN ('Healthy', 'Degraded', 'Progressing', 'Suspended', 'Missing', 'Unknown')",
            name="ck_application_status_health_status",
        ),
        sa.CheckConstraint(
            "sync_status IN ('Synced', 'OutOfSync', 'Unknown')",
            name="ck_application_status_sync_status",
        ),
    )
    op.create_index("ix_application_status_project_name", "application_status", ["project_name"])

    op.create_table(
        "feature_setting",
        sa.Column("namespace", sa.Text(), nullable=False),
        sa.Column("setting_key", sa.Text(), nullable=False),
        sa.Column("setting_value", sa.Text(), nullable=False),
        sa.Column("updated_at_utc", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint("namespace", "setting_key", name="pk_feature_setting"),
    )


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_table("feature_setting")
    op.drop_index("ix_application_status_project_name", table_name="application_status")
    op.drop_table("application_status")
