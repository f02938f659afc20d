from datetime import UTC, datetime

from pydantic import Field

from pubgate.domain.auth.model.value import UserId
from pubgate.domain.event.model.value import EventId
from pubgate.domain.publish.model.value import (
    ChecklistSnapshot,
    PublishPriority,
    PublishRequestId,
    PublishRequestStatus,
)
from pubgate.domain.shared.error import ConflictError, ValidationError
from pubgate.domain.shared.model.aggregate import Aggregate
from pubgate.domain.workspace.model.value import WorkspaceId


class PublishRequest(Aggregate):
    """A request to publish an event, awaiting a reviewer's decision.

    pending -> approved | rejected. Both outcomes are terminal. A pending
    request can also be cancelled, which deletes it.
    """

    id: PublishRequestId
    event_id: EventId
    workspace_id: WorkspaceId
    requested_by: UserId
    status: PublishRequestStatus = PublishRequestStatus.PENDING
    priority: PublishPriority = PublishPriority.MEDIUM
    reviewer_id: UserId | None = None
    review_notes: str | None = None
    checklist_snapshot: ChecklistSnapshot
    requested_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    reviewed_at: datetime | None = None

    @classmethod
    def create(
        cls,
        event_id: EventId,
        workspace_id: WorkspaceId,
        requested_by: UserId,
        snapshot: ChecklistSnapshot,
        priority: PublishPriority = PublishPriority.MEDIUM,
    ) -> "PublishRequest":
        return cls(
            id=PublishRequestId.generate(),
            event_id=event_id,
            workspace_id=workspace_id,
            requested_by=requested_by,
            priority=priority,
            checklist_snapshot=snapshot,
        )

    @property
    def is_pending(self) -> bool:
        return self.status == PublishRequestStatus.PENDING

    def require_pending(self) -> None:
        if not self.is_pending:
            raise ConflictError(
                f"Publish request {self.id} is already resolved ({self.status})",
                code="already_resolved",
            )

    def approve(self, reviewer_id: UserId, notes: str | None = None) -> None:
        self.require_pending()
        self._resolve(PublishRequestStatus.APPROVED, reviewer_id, notes)

    def reject(self, reviewer_id: UserId, notes: str) -> None:
        if not notes or not notes.strip():
            raise ValidationError("A reason is required to reject a request", field="notes")
        self.require_pending()
        self._resolve(PublishRequestStatus.REJECTED, reviewer_id, notes.strip())

    def _resolve(
        self, status: PublishRequestStatus, reviewer_id: UserId, notes: str | None
    ) -> None:
        self.status = status
        self.reviewer_id = reviewer_id
        self.review_notes = notes or None
        self.reviewed_at = datetime.now(UTC)
