from __future__ import annotations

from abc import abstractmethod
from typing import Protocol

from pubgate.domain.event.model.aggregate import Event
from pubgate.domain.event.model.value import EventId, EventStatus
from pubgate.domain.shared.port import Port


class EventRepository(Port, Protocol):
    @abstractmethod
    async def get(self, event_id: EventId) -> Event | None: ...

    @abstractmethod
    async def update_status(self, event_id: EventId, status: EventStatus) -> None: ...
