import logfire

from pubgate.domain.auth.model.principal import Principal
from pubgate.domain.auth.model.role import Role
from pubgate.domain.shared.authorization.gate import at_least
from pubgate.domain.shared.command import Command, CommandHandler, Result
from pubgate.domain.workspace.model.value import (
    PublishRequirements,
    WorkspaceId,
    WorkspaceRole,
)
from pubgate.domain.workspace.service.workspace import WorkspaceService


class UpdatePublishSettings(Command):
    workspace_id: WorkspaceId
    requires_approval: bool
    approval_roles: list[WorkspaceRole]
    requirements: PublishRequirements


class PublishSettingsUpdated(Result):
    workspace_id: WorkspaceId
    requires_approval: bool
    approval_roles: list[WorkspaceRole]
    requirements: PublishRequirements


class UpdatePublishSettingsHandler(
    CommandHandler[UpdatePublishSettings, PublishSettingsUpdated]
):
    __auth__ = at_least(Role.ADMIN)
    principal: Principal
    workspace_service: WorkspaceService

    async def run(self, cmd: UpdatePublishSettings) -> PublishSettingsUpdated:
        with logfire.span("UpdatePublishSettings", workspace_id=str(cmd.workspace_id)):
            configuration = await self.workspace_service.update_publish_configuration(
                cmd.workspace_id,
                requires_approval=cmd.requires_approval,
                approval_roles=cmd.approval_roles,
                requirements=cmd.requirements,
            )
            return PublishSettingsUpdated(
                workspace_id=cmd.workspace_id,
                requires_approval=configuration.requires_approval,
                approval_roles=configuration.approval_roles,
                requirements=configuration.requirements,
            )
