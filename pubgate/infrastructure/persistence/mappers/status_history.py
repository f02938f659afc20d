from typing import Any
from uuid import UUID

from pubgate.domain.auth.model.value import UserId
from pubgate.domain.event.model.value import EventId, EventStatus
from pubgate.domain.status.model.value import HistoryEntryId, StatusHistoryEntry
from pubgate.infrastructure.persistence.mappers.util import as_utc


def row_to_history_entry(row: dict[str, Any]) -> StatusHistoryEntry:
    changed_by = row.get("changed_by")
    return StatusHistoryEntry(
        id=HistoryEntryId(UUID(row["id"])),
        event_id=EventId(UUID(row["event_id"])),
        previous_status=EventStatus(row["previous_status"]),
        new_status=EventStatus(row["new_status"]),
        changed_by=UserId(UUID(changed_by)) if changed_by else None,
        reason=row.get("reason"),
        created_at=as_utc(row["created_at"]),
    )


def history_entry_to_dict(entry: StatusHistoryEntry) -> dict[str, Any]:
    return {
        "id": str(entry.id),
        "event_id": str(entry.event_id),
        "previous_status": entry.previous_status,
        "new_status": entry.new_status,
        "changed_by": str(entry.changed_by) if entry.changed_by else None,
        "reason": entry.reason,
        "created_at": entry.created_at,
    }
