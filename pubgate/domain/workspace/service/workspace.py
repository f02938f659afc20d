import logging

from pubgate.domain.event.model.value import EventId
from pubgate.domain.shared.error import NotFoundError, ValidationError
from pubgate.domain.shared.service import Service
from pubgate.domain.workspace.model.aggregate import Workspace
from pubgate.domain.workspace.model.value import (
    PublishRequirements,
    WorkspaceId,
    WorkspacePublishConfiguration,
    WorkspaceRole,
)
from pubgate.domain.workspace.port.repository import WorkspaceRepository

logger = logging.getLogger(__name__)


class WorkspaceService(Service):
    workspace_repo: WorkspaceRepository
    defaults: WorkspacePublishConfiguration

    async def get(self, workspace_id: WorkspaceId) -> Workspace:
        workspace = await self.workspace_repo.get(workspace_id)
        if workspace is None:
            raise NotFoundError(f"Workspace not found: {workspace_id}")
        return workspace

    async def get_root_for_event(self, event_id: EventId) -> Workspace | None:
        return await self.workspace_repo.get_root_for_event(event_id)

    def configuration_of(self, workspace: Workspace | None) -> WorkspacePublishConfiguration:
        """Stored configuration of a workspace, or the node defaults."""
        if workspace is None or workspace.publish_configuration is None:
            return self.defaults
        return workspace.publish_configuration

    async def get_publish_configuration(
        self, workspace_id: WorkspaceId
    ) -> WorkspacePublishConfiguration:
        return self.configuration_of(await self.get(workspace_id))

    async def update_publish_configuration(
        self,
        workspace_id: WorkspaceId,
        *,
        requires_approval: bool,
        approval_roles: list[WorkspaceRole],
        requirements: PublishRequirements,
    ) -> WorkspacePublishConfiguration:
        if not approval_roles:
            raise ValidationError(
                "At least one approval role is required", field="approval_roles"
            )

        workspace = await self.get(workspace_id)
        configuration = WorkspacePublishConfiguration(
            requires_approval=requires_approval,
            approval_roles=approval_roles,
            requirements=requirements,
        )
        workspace.configure_publishing(configuration)
        await self.workspace_repo.save_publish_configuration(workspace)

        logger.info(
            "Publish settings updated: workspace=%s requires_approval=%s",
            workspace_id,
            requires_approval,
        )
        return configuration
