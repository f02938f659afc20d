from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from pubgate.domain.event.model.value import EventId
from pubgate.domain.shared.error import NotFoundError
from pubgate.domain.workspace.model.aggregate import Workspace
from pubgate.domain.workspace.model.value import WorkspaceId, WorkspaceType
from pubgate.domain.workspace.port.repository import WorkspaceRepository
from pubgate.infrastructure.persistence.mappers.workspace import (
    configuration_to_settings,
    row_to_workspace,
)
from pubgate.infrastructure.persistence.tables import workspaces_table


class PostgresWorkspaceRepository(WorkspaceRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, workspace_id: WorkspaceId) -> Workspace | None:
        stmt = select(workspaces_table).where(workspaces_table.c.id == str(workspace_id))
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_workspace(dict(row)) if row else None

    async def get_root_for_event(self, event_id: EventId) -> Workspace | None:
        stmt = (
            select(workspaces_table)
            .where(workspaces_table.c.event_id == str(event_id))
            .where(workspaces_table.c.workspace_type == WorkspaceType.ROOT)
            .order_by(workspaces_table.c.updated_at.asc())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_workspace(dict(row)) if row else None

    async def save_publish_configuration(self, workspace: Workspace) -> None:
        if workspace.publish_configuration is None:
            return

        # Read the current blob so keys written by other tools survive
        stmt = select(workspaces_table.c.settings).where(
            workspaces_table.c.id == str(workspace.id)
        )
        result = await self.session.execute(stmt)
        row = result.first()
        if row is None:
            raise NotFoundError(f"Workspace not found: {workspace.id}")

        settings = configuration_to_settings(workspace.publish_configuration, row.settings)
        await self.session.execute(
            update(workspaces_table)
            .where(workspaces_table.c.id == str(workspace.id))
            .values(settings=settings, updated_at=workspace.updated_at)
        )
        await self.session.flush()
