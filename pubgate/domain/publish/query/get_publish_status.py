from pubgate.domain.auth.model.principal import Principal
from pubgate.domain.auth.model.role import Role
from pubgate.domain.event.model.value import EventId, EventStatus
from pubgate.domain.publish.model.aggregate import PublishRequest
from pubgate.domain.publish.service.publish import PublishRequestService
from pubgate.domain.readiness.model.value import ChecklistResult
from pubgate.domain.readiness.service.readiness import ReadinessService
from pubgate.domain.shared.authorization.gate import at_least
from pubgate.domain.shared.query import Query, QueryHandler, Result
from pubgate.domain.workspace.model.value import WorkspaceId
from pubgate.domain.workspace.service.workspace import WorkspaceService


class GetPublishStatus(Query):
    event_id: EventId


class PublishStatus(Result):
    event_id: EventId
    event_status: EventStatus
    root_workspace_id: WorkspaceId | None
    requires_approval: bool
    latest_request: PublishRequest | None
    checklist: ChecklistResult


class GetPublishStatusHandler(QueryHandler[GetPublishStatus, PublishStatus]):
    """Everything the organizer's publish panel shows for one event."""

    __auth__ = at_least(Role.ORGANIZER)
    principal: Principal
    readiness_service: ReadinessService
    workspace_service: WorkspaceService
    publish_service: PublishRequestService

    async def run(self, query: GetPublishStatus) -> PublishStatus:
        event = await self.readiness_service.get_event(query.event_id)
        root = await self.workspace_service.get_root_for_event(query.event_id)
        checklist = await self.readiness_service.evaluate_event(event, root)
        latest = await self.publish_service.get_latest_for_event(query.event_id)

        return PublishStatus(
            event_id=event.id,
            event_status=event.status,
            root_workspace_id=root.id if root else None,
            requires_approval=self.workspace_service.configuration_of(root).requires_approval,
            latest_request=latest,
            checklist=checklist,
        )
