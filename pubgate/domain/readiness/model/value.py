from enum import StrEnum
from uuid import UUID

from pydantic import computed_field

from pubgate.domain.shared.model.value import ValueObject


class CheckStatus(StrEnum):
    PASS = "pass"
    WARNING = "warning"
    FAIL = "fail"


class CheckCategory(StrEnum):
    BASIC = "basic"
    EVENT_SPACE = "event-space"


class ChecklistItem(ValueObject):
    id: str
    label: str
    description: str
    category: CheckCategory
    required: bool
    status: CheckStatus


class ChecklistResult(ValueObject):
    items: list[ChecklistItem]
    can_publish: bool
    completion_percentage: int

    @computed_field  # type: ignore[prop-decorator]
    @property
    def fail_count(self) -> int:
        return sum(1 for i in self.items if i.status == CheckStatus.FAIL)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def warning_count(self) -> int:
        return sum(1 for i in self.items if i.status == CheckStatus.WARNING)

    def item(self, item_id: str) -> ChecklistItem | None:
        return next((i for i in self.items if i.id == item_id), None)


class PromoCode(ValueObject):
    id: UUID
    is_active: bool
