from __future__ import annotations

from abc import abstractmethod
from typing import Protocol

from pubgate.domain.event.model.value import EventId
from pubgate.domain.status.model.value import StatusHistoryEntry
from pubgate.domain.shared.port import Port


class StatusHistoryRepository(Port, Protocol):
    """Append-only: no update or delete."""

    @abstractmethod
    async def append(self, entry: StatusHistoryEntry) -> None: ...

    @abstractmethod
    async def list_for_event(
        self, event_id: EventId, *, limit: int | None = None
    ) -> list[StatusHistoryEntry]: ...
