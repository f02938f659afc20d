from pubgate.domain.auth.model.principal import Principal
from pubgate.domain.auth.model.role import Role
from pubgate.domain.shared.authorization.gate import at_least
from pubgate.domain.shared.query import Query, QueryHandler, Result
from pubgate.domain.workspace.model.value import (
    PublishRequirements,
    WorkspaceId,
    WorkspaceRole,
)
from pubgate.domain.workspace.service.workspace import WorkspaceService


class GetPublishSettings(Query):
    workspace_id: WorkspaceId


class PublishSettings(Result):
    workspace_id: WorkspaceId
    requires_approval: bool
    approval_roles: list[WorkspaceRole]
    requirements: PublishRequirements


class GetPublishSettingsHandler(QueryHandler[GetPublishSettings, PublishSettings]):
    __auth__ = at_least(Role.ORGANIZER)
    principal: Principal
    workspace_service: WorkspaceService

    async def run(self, query: GetPublishSettings) -> PublishSettings:
        configuration = await self.workspace_service.get_publish_configuration(
            query.workspace_id
        )
        return PublishSettings(
            workspace_id=query.workspace_id,
            requires_approval=configuration.requires_approval,
            approval_roles=configuration.approval_roles,
            requirements=configuration.requirements,
        )
