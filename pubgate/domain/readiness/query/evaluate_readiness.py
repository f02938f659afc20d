from pubgate.domain.auth.model.principal import Principal
from pubgate.domain.auth.model.role import Role
from pubgate.domain.event.model.value import EventId
from pubgate.domain.readiness.model.value import ChecklistItem
from pubgate.domain.readiness.service.readiness import ReadinessService
from pubgate.domain.shared.authorization.gate import at_least
from pubgate.domain.shared.query import Query, QueryHandler, Result


class EvaluateReadiness(Query):
    event_id: EventId


class ReadinessReport(Result):
    event_id: EventId
    items: list[ChecklistItem]
    can_publish: bool
    completion_percentage: int
    fail_count: int
    warning_count: int


class EvaluateReadinessHandler(QueryHandler[EvaluateReadiness, ReadinessReport]):
    __auth__ = at_least(Role.ORGANIZER)
    principal: Principal
    readiness_service: ReadinessService

    async def run(self, query: EvaluateReadiness) -> ReadinessReport:
        result = await self.readiness_service.evaluate(query.event_id)
        return ReadinessReport(
            event_id=query.event_id,
            items=result.items,
            can_publish=result.can_publish,
            completion_percentage=result.completion_percentage,
            fail_count=result.fail_count,
            warning_count=result.warning_count,
        )
