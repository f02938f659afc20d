"""publish_gate_tables

Revision ID: 3f1c2a9b7d40
Revises:
Create Date: 2026-09-14 10:02:11.418207

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f1c2a9b7d40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # EVENTS
    op.create_table(
        "events",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("end_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("visibility", sa.String(32), nullable=True),
        sa.Column("mode", sa.String(32), nullable=False, server_default=sa.text("'OFFLINE'")),
        sa.Column("capacity", sa.Integer(), nullable=True),
        sa.Column("branding", sa.JSON(), nullable=True),
        sa.Column("landing_page_data", sa.JSON(), nullable=True),
        sa.Column("landing_page_slug", sa.String(255), nullable=True),
        sa.Column("organization_id", sa.String(), nullable=True),
        sa.Column("status", sa.String(32), nullable=False, server_default=sa.text("'DRAFT'")),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    # WORKSPACES
    op.create_table(
        "workspaces",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("event_id", sa.String(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("workspace_type", sa.String(32), nullable=False),
        sa.Column("settings", sa.JSON(), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["event_id"], ["events.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_workspaces_event_type", "workspaces", ["event_id", "workspace_type"])

    # TICKET TIERS
    op.create_table(
        "ticket_tiers",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("event_id", sa.String(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["event_id"], ["events.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_ticket_tiers_event_id", "ticket_tiers", ["event_id"])

    # PROMO CODES
    op.create_table(
        "promo_codes",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("event_id", sa.String(), nullable=False),
        sa.Column("code", sa.String(64), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["event_id"], ["events.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_promo_codes_event_id", "promo_codes", ["event_id"])

    # EVENT PUBLISH REQUESTS
    op.create_table(
        "event_publish_requests",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("event_id", sa.String(), nullable=False),
        sa.Column("workspace_id", sa.String(), nullable=False),
        sa.Column("requested_by", sa.String(), nullable=False),
        sa.Column("status", sa.String(16), nullable=False),
        sa.Column("priority", sa.String(16), nullable=False),
        sa.Column("reviewer_id", sa.String(), nullable=True),
        sa.Column("review_notes", sa.Text(), nullable=True),
        sa.Column("checklist_snapshot", sa.JSON(), nullable=False),
        sa.Column("requested_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("reviewed_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["event_id"], ["events.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["workspace_id"], ["workspaces.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "uq_publish_requests_pending_event",
        "event_publish_requests",
        ["event_id"],
        unique=True,
        postgresql_where=sa.text("status = 'pending'"),
        sqlite_where=sa.text("status = 'pending'"),
    )
    op.create_index(
        "idx_publish_requests_event_requested",
        "event_publish_requests",
        ["event_id", sa.text("requested_at DESC")],
    )
    op.create_index(
        "idx_publish_requests_workspace_status",
        "event_publish_requests",
        ["workspace_id", "status"],
    )

    # EVENT STATUS HISTORY
    op.create_table(
        "event_status_history",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("event_id", sa.String(), nullable=False),
        sa.Column("previous_status", sa.String(32), nullable=False),
        sa.Column("new_status", sa.String(32), nullable=False),
        sa.Column("changed_by", sa.String(), nullable=True),
        sa.Column("reason", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["event_id"], ["events.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_status_history_event_created",
        "event_status_history",
        ["event_id", sa.text("created_at DESC")],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_status_history_event_created", table_name="event_status_history")
    op.drop_table("event_status_history")
    op.drop_index("idx_publish_requests_workspace_status", table_name="event_publish_requests")
    op.drop_index("idx_publish_requests_event_requested", table_name="event_publish_requests")
    op.drop_index("uq_publish_requests_pending_event", table_name="event_publish_requests")
    op.drop_table("event_publish_requests")
    op.drop_index("idx_promo_codes_event_id", table_name="promo_codes")
    op.drop_table("promo_codes")
    op.drop_index("idx_ticket_tiers_event_id", table_name="ticket_tiers")
    op.drop_table("ticket_tiers")
    op.drop_index("idx_workspaces_event_type", table_name="workspaces")
    op.drop_table("workspaces")
    op.drop_table("events")
