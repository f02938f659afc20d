from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from pydantic import Field

from pubgate.domain.event.model.branding import EventBranding
from pubgate.domain.event.model.value import EventId, EventMode, EventStatus, EventVisibility
from pubgate.domain.shared.model.aggregate import Aggregate


class Event(Aggregate):
    id: EventId
    name: str = ""
    description: str | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    visibility: EventVisibility | None = None
    mode: EventMode = EventMode.OFFLINE
    capacity: int | None = None
    branding: EventBranding = Field(default_factory=EventBranding)
    landing_page_data: dict[str, Any] | None = None
    landing_page_slug: str | None = None
    organization_id: UUID | None = None
    status: EventStatus = EventStatus.DRAFT
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @property
    def has_landing_page(self) -> bool:
        """The page builder always saves {html, css, meta}; only the html counts."""
        data = self.landing_page_data
        if not isinstance(data, dict):
            return False
        html = data.get("html")
        return isinstance(html, str) and bool(html.strip())

    def transition_to(self, new_status: EventStatus) -> EventStatus:
        """Set the status and return the one it replaced."""
        previous = self.status
        self.status = new_status
        self.updated_at = datetime.now(UTC)
        return previous
