from datetime import UTC, datetime
from enum import StrEnum
from uuid import UUID, uuid4

from pydantic import Field, RootModel

from pubgate.domain.readiness.model.value import ChecklistItem, ChecklistResult
from pubgate.domain.shared.model.value import ValueObject


class PublishRequestId(RootModel[UUID]):
    """Unique identifier for a PublishRequest."""

    @classmethod
    def generate(cls) -> "PublishRequestId":
        return cls(uuid4())

    def __str__(self) -> str:
        return str(self.root)

    def __hash__(self) -> int:
        return hash(self.root)


class PublishRequestStatus(StrEnum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class PublishPriority(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class ChecklistSnapshot(ValueObject):
    """Checklist as it stood when a publish request was submitted.

    ``can_publish`` is the value computed at submission and is never
    re-derived from the live event.
    """

    items: tuple[ChecklistItem, ...]
    can_publish: bool
    completion_percentage: int
    notes: str | None = None
    captured_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def capture(cls, checklist: ChecklistResult, notes: str | None = None) -> "ChecklistSnapshot":
        return cls(
            items=tuple(checklist.items),
            can_publish=checklist.can_publish,
            completion_percentage=checklist.completion_percentage,
            notes=notes,
        )
