from pubgate.domain.auth.model.principal import Principal
from pubgate.domain.auth.model.role import Role
from pubgate.domain.publish.model.aggregate import PublishRequest
from pubgate.domain.publish.service.publish import PublishRequestService
from pubgate.domain.shared.authorization.gate import at_least
from pubgate.domain.shared.query import Query, QueryHandler, Result
from pubgate.domain.workspace.model.value import WorkspaceId


class ListPendingRequests(Query):
    workspace_id: WorkspaceId
    limit: int | None = None
    offset: int | None = None


class PendingRequestList(Result):
    items: list[PublishRequest]


class ListPendingRequestsHandler(QueryHandler[ListPendingRequests, PendingRequestList]):
    __auth__ = at_least(Role.REVIEWER)
    principal: Principal
    publish_service: PublishRequestService

    async def run(self, query: ListPendingRequests) -> PendingRequestList:
        items = await self.publish_service.list_pending(
            query.workspace_id, limit=query.limit, offset=query.offset
        )
        return PendingRequestList(items=items)
