import logging
from typing import Any
from uuid import UUID

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from pubgate.domain.event.model.aggregate import Event
from pubgate.domain.event.model.branding import (
    AccessibilityConfig,
    EventBranding,
    SeoConfig,
    TicketingConfig,
)
from pubgate.domain.event.model.value import EventId, EventMode, EventStatus, EventVisibility
from pubgate.infrastructure.persistence.mappers.util import as_utc

logger = logging.getLogger(__name__)

_BRANDING_SECTIONS: dict[str, type[BaseModel]] = {
    "ticketing": TicketingConfig,
    "seo": SeoConfig,
    "accessibility": AccessibilityConfig,
}


def branding_from_json(data: Any) -> EventBranding:
    """Parse the stored branding blob section by section.

    A section that does not match its schema is treated as absent, which the
    readiness checks report as unconfigured. The column is shared with other
    tools, so a blob that is not an object at all is ignored too.
    """
    if data is None:
        return EventBranding()
    if not isinstance(data, dict):
        logger.warning("Ignoring branding stored as %s, expected an object", type(data).__name__)
        return EventBranding()

    sections: dict[str, Any] = {}
    for key, model in _BRANDING_SECTIONS.items():
        raw = data.get(key)
        if raw is None:
            continue
        try:
            sections[key] = model.model_validate(raw)
        except PydanticValidationError as e:
            logger.warning("Ignoring malformed branding section %r: %s", key, e)
    return EventBranding(**sections)


def row_to_event(row: dict[str, Any]) -> Event:
    """Convert database row to Event aggregate."""
    visibility = row.get("visibility")
    org_id = row.get("organization_id")
    page = row.get("landing_page_data")
    return Event(
        id=EventId(UUID(row["id"])),
        name=row.get("name") or "",
        description=row.get("description"),
        start_date=as_utc(row.get("start_date")),
        end_date=as_utc(row.get("end_date")),
        visibility=EventVisibility(visibility) if visibility else None,
        mode=EventMode(row.get("mode") or EventMode.OFFLINE),
        capacity=row.get("capacity"),
        branding=branding_from_json(row.get("branding")),
        landing_page_data=page if isinstance(page, dict) else None,
        landing_page_slug=row.get("landing_page_slug"),
        organization_id=UUID(org_id) if org_id else None,
        status=EventStatus(row["status"]),
        created_at=as_utc(row["created_at"]),
        updated_at=as_utc(row["updated_at"]),
    )


def event_to_dict(event: Event) -> dict[str, Any]:
    """Convert Event aggregate to database dict."""
    return {
        "id": str(event.id),
        "name": event.name,
        "description": event.description,
        "start_date": event.start_date,
        "end_date": event.end_date,
        "visibility": event.visibility,
        "mode": event.mode,
        "capacity": event.capacity,
        "branding": event.branding.model_dump(mode="json", exclude_none=True),
        "landing_page_data": event.landing_page_data,
        "landing_page_slug": event.landing_page_slug,
        "organization_id": str(event.organization_id) if event.organization_id else None,
        "status": event.status,
        "created_at": event.created_at,
        "updated_at": event.updated_at,
    }
