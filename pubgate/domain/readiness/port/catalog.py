from __future__ import annotations

from abc import abstractmethod
from typing import Protocol

from pubgate.domain.event.model.value import EventId
from pubgate.domain.readiness.model.value import PromoCode
from pubgate.domain.shared.port import Port


class TicketingCatalog(Port, Protocol):
    """Read-only view of an event's ticket tiers and promo codes."""

    @abstractmethod
    async def count_ticket_tiers(self, event_id: EventId) -> int: ...

    @abstractmethod
    async def list_promo_codes(self, event_id: EventId) -> list[PromoCode]: ...
