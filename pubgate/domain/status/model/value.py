from datetime import UTC, datetime
from uuid import UUID, uuid4

from pydantic import Field, RootModel

from pubgate.domain.auth.model.value import UserId
from pubgate.domain.event.model.value import EventId, EventStatus
from pubgate.domain.shared.model.value import ValueObject


class HistoryEntryId(RootModel[UUID]):
    @classmethod
    def generate(cls) -> "HistoryEntryId":
        return cls(uuid4())

    def __str__(self) -> str:
        return str(self.root)

    def __hash__(self) -> int:
        return hash(self.root)


class StatusHistoryEntry(ValueObject):
    """One event status transition. Written once, never edited."""

    id: HistoryEntryId = Field(default_factory=HistoryEntryId.generate)
    event_id: EventId
    previous_status: EventStatus
    new_status: EventStatus
    changed_by: UserId | None = None
    reason: str | None = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
