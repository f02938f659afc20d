"""SQLAlchemy table definitions - dialect-agnostic (works with SQLite and PostgreSQL)."""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    text,
)
from sqlalchemy.types import JSON

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# EVENTS TABLE (owned by the event editor; this service updates status only)
# ============================================================================
events_table = Table(
    "events",
    metadata,
    Column("id", String, primary_key=True),  # UUID as string
    Column("name", String(255), nullable=False),
    Column("description", Text, nullable=True),
    Column("start_date", DateTime(timezone=True), nullable=True),
    Column("end_date", DateTime(timezone=True), nullable=True),
    Column("visibility", String(32), nullable=True),
    Column("mode", String(32), nullable=False, server_default=text("'OFFLINE'")),
    Column("capacity", Integer, nullable=True),
    Column("branding", JSON, nullable=True),
    Column("landing_page_data", JSON, nullable=True),
    Column("landing_page_slug", String(255), nullable=True),
    Column("organization_id", String, nullable=True),
    Column("status", String(32), nullable=False, server_default=text("'DRAFT'")),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)


# ============================================================================
# WORKSPACES TABLE
# ============================================================================
workspaces_table = Table(
    "workspaces",
    metadata,
    Column("id", String, primary_key=True),
    Column("event_id", String, ForeignKey("events.id", ondelete="CASCADE"), nullable=False),
    Column("name", String(255), nullable=False),
    Column("workspace_type", String(32), nullable=False),
    Column("settings", JSON, nullable=True),  # Shared with other workspace tools
    Column("updated_at", DateTime(timezone=True), nullable=False),
)

Index("idx_workspaces_event_type", workspaces_table.c.event_id, workspaces_table.c.workspace_type)


# ============================================================================
# TICKET TIERS / PROMO CODES (read-only here)
# ============================================================================
ticket_tiers_table = Table(
    "ticket_tiers",
    metadata,
    Column("id", String, primary_key=True),
    Column("event_id", String, ForeignKey("events.id", ondelete="CASCADE"), nullable=False),
    Column("name", String(255), nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
)

Index("idx_ticket_tiers_event_id", ticket_tiers_table.c.event_id)

promo_codes_table = Table(
    "promo_codes",
    metadata,
    Column("id", String, primary_key=True),
    Column("event_id", String, ForeignKey("events.id", ondelete="CASCADE"), nullable=False),
    Column("code", String(64), nullable=False),
    Column("is_active", Boolean, nullable=False, server_default=text("true")),
    Column("created_at", DateTime(timezone=True), nullable=False),
)

Index("idx_promo_codes_event_id", promo_codes_table.c.event_id)


# ============================================================================
# EVENT PUBLISH REQUESTS TABLE
# ============================================================================
publish_requests_table = Table(
    "event_publish_requests",
    metadata,
    Column("id", String, primary_key=True),
    Column("event_id", String, ForeignKey("events.id", ondelete="CASCADE"), nullable=False),
    Column(
        "workspace_id",
        String,
        ForeignKey("workspaces.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("requested_by", String, nullable=False),
    Column("status", String(16), nullable=False),  # PublishRequestStatus as string
    Column("priority", String(16), nullable=False),
    Column("reviewer_id", String, nullable=True),
    Column("review_notes", Text, nullable=True),
    Column("checklist_snapshot", JSON, nullable=False),
    Column("requested_at", DateTime(timezone=True), nullable=False),
    Column("reviewed_at", DateTime(timezone=True), nullable=True),
)

# At most one pending request per event
Index(
    "uq_publish_requests_pending_event",
    publish_requests_table.c.event_id,
    unique=True,
    postgresql_where=text("status = 'pending'"),
    sqlite_where=text("status = 'pending'"),
)

Index(
    "idx_publish_requests_event_requested",
    publish_requests_table.c.event_id,
    publish_requests_table.c.requested_at.desc(),
)

# Reviewer queue
Index(
    "idx_publish_requests_workspace_status",
    publish_requests_table.c.workspace_id,
    publish_requests_table.c.status,
)


# ============================================================================
# EVENT STATUS HISTORY TABLE (append-only)
# ============================================================================
status_history_table = Table(
    "event_status_history",
    metadata,
    Column("id", String, primary_key=True),
    Column("event_id", String, ForeignKey("events.id", ondelete="CASCADE"), nullable=False),
    Column("previous_status", String(32), nullable=False),
    Column("new_status", String(32), nullable=False),
    Column("changed_by", String, nullable=True),
    Column("reason", Text, nullable=True),
    Column("created_at", DateTime(timezone=True), nullable=False),
)

Index(
    "idx_status_history_event_created",
    status_history_table.c.event_id,
    status_history_table.c.created_at.desc(),
)
