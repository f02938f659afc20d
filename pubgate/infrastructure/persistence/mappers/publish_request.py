from typing import Any
from uuid import UUID

from pubgate.domain.auth.model.value import UserId
from pubgate.domain.event.model.value import EventId
from pubgate.domain.publish.model.aggregate import PublishRequest
from pubgate.domain.publish.model.value import (
    ChecklistSnapshot,
    PublishPriority,
    PublishRequestId,
    PublishRequestStatus,
)
from pubgate.domain.workspace.model.value import WorkspaceId
from pubgate.infrastructure.persistence.mappers.util import as_utc


def row_to_publish_request(row: dict[str, Any]) -> PublishRequest:
    reviewer_id = row.get("reviewer_id")
    return PublishRequest(
        id=PublishRequestId(UUID(row["id"])),
        event_id=EventId(UUID(row["event_id"])),
        workspace_id=WorkspaceId(UUID(row["workspace_id"])),
        requested_by=UserId(UUID(row["requested_by"])),
        status=PublishRequestStatus(row["status"]),
        priority=PublishPriority(row.get("priority") or PublishPriority.MEDIUM),
        reviewer_id=UserId(UUID(reviewer_id)) if reviewer_id else None,
        review_notes=row.get("review_notes"),
        checklist_snapshot=ChecklistSnapshot.model_validate(row["checklist_snapshot"]),
        requested_at=as_utc(row["requested_at"]),
        reviewed_at=as_utc(row.get("reviewed_at")),
    )


def publish_request_to_dict(request: PublishRequest) -> dict[str, Any]:
    return {
        "id": str(request.id),
        "event_id": str(request.event_id),
        "workspace_id": str(request.workspace_id),
        "requested_by": str(request.requested_by),
        "status": request.status,
        "priority": request.priority,
        "reviewer_id": str(request.reviewer_id) if request.reviewer_id else None,
        "review_notes": request.review_notes,
        "checklist_snapshot": request.checklist_snapshot.model_dump(mode="json"),
        "requested_at": request.requested_at,
        "reviewed_at": request.reviewed_at,
    }
