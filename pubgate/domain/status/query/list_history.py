from pubgate.domain.auth.model.principal import Principal
from pubgate.domain.auth.model.role import Role
from pubgate.domain.event.model.value import EventId
from pubgate.domain.shared.authorization.gate import at_least
from pubgate.domain.shared.query import Query, QueryHandler, Result
from pubgate.domain.status.model.value import StatusHistoryEntry
from pubgate.domain.status.service.status import EventStatusService


class ListStatusHistory(Query):
    event_id: EventId
    limit: int | None = None


class StatusHistory(Result):
    event_id: EventId
    entries: list[StatusHistoryEntry]


class ListStatusHistoryHandler(QueryHandler[ListStatusHistory, StatusHistory]):
    __auth__ = at_least(Role.ORGANIZER)
    principal: Principal
    status_service: EventStatusService

    async def run(self, query: ListStatusHistory) -> StatusHistory:
        entries = await self.status_service.list_history(query.event_id, limit=query.limit)
        return StatusHistory(event_id=query.event_id, entries=entries)
