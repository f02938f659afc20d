from datetime import datetime

from pubgate.domain.event.model.aggregate import Event
from pubgate.domain.event.model.value import EventId
from pubgate.domain.event.port.repository import EventRepository
from pubgate.domain.readiness import engine
from pubgate.domain.readiness.model.value import ChecklistResult
from pubgate.domain.readiness.port.catalog import TicketingCatalog
from pubgate.domain.shared.error import NotFoundError
from pubgate.domain.shared.service import Service
from pubgate.domain.workspace.model.aggregate import Workspace
from pubgate.domain.workspace.service.workspace import WorkspaceService


class ReadinessService(Service):
    """Loads what the rule engine needs and evaluates it. Never writes."""

    event_repo: EventRepository
    workspace_service: WorkspaceService
    catalog: TicketingCatalog

    async def get_event(self, event_id: EventId) -> Event:
        event = await self.event_repo.get(event_id)
        if event is None:
            raise NotFoundError(f"Event not found: {event_id}")
        return event

    async def evaluate_event(
        self,
        event: Event,
        root_workspace: Workspace | None,
        *,
        now: datetime | None = None,
    ) -> ChecklistResult:
        tier_count = await self.catalog.count_ticket_tiers(event.id)
        promo_codes = await self.catalog.list_promo_codes(event.id)
        return engine.evaluate(
            event,
            self.workspace_service.configuration_of(root_workspace),
            tier_count,
            promo_codes,
            has_root_workspace=root_workspace is not None,
            now=now,
        )

    async def evaluate(self, event_id: EventId, *, now: datetime | None = None) -> ChecklistResult:
        event = await self.get_event(event_id)
        root = await self.workspace_service.get_root_for_event(event_id)
        return await self.evaluate_event(event, root, now=now)
