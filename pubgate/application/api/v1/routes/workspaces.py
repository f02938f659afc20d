"""Workspace publish settings and the reviewer queue."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query
from pydantic import BaseModel

from pubgate.domain.publish.query.list_pending_requests import (
    ListPendingRequests,
    ListPendingRequestsHandler,
    PendingRequestList,
)
from pubgate.domain.workspace.command.update_publish_settings import (
    PublishSettingsUpdated,
    UpdatePublishSettings,
    UpdatePublishSettingsHandler,
)
from pubgate.domain.workspace.model.value import (
    PublishRequirements,
    WorkspaceId,
    WorkspaceRole,
)
from pubgate.domain.workspace.query.get_publish_settings import (
    GetPublishSettings,
    GetPublishSettingsHandler,
    PublishSettings,
)

router = APIRouter(prefix="/workspaces", tags=["Workspaces"], route_class=DishkaRoute)


class PublishSettingsBody(BaseModel):
    requires_approval: bool
    approval_roles: list[WorkspaceRole] = [WorkspaceRole.WORKSPACE_OWNER]
    requirements: PublishRequirements = PublishRequirements()


@router.get("/{workspace_id}/publish-requests", response_model=PendingRequestList)
async def list_pending_requests(
    workspace_id: UUID,
    handler: FromDishka[ListPendingRequestsHandler],
    limit: int | None = Query(default=None, ge=1, le=200),
    offset: int | None = Query(default=None, ge=0),
) -> PendingRequestList:
    return await handler.run(
        ListPendingRequests(workspace_id=WorkspaceId(workspace_id), limit=limit, offset=offset)
    )


@router.get("/{workspace_id}/publish-settings", response_model=PublishSettings)
async def get_publish_settings(
    workspace_id: UUID,
    handler: FromDishka[GetPublishSettingsHandler],
) -> PublishSettings:
    return await handler.run(GetPublishSettings(workspace_id=WorkspaceId(workspace_id)))


@router.put("/{workspace_id}/publish-settings", response_model=PublishSettingsUpdated)
async def update_publish_settings(
    workspace_id: UUID,
    body: PublishSettingsBody,
    handler: FromDishka[UpdatePublishSettingsHandler],
) -> PublishSettingsUpdated:
    return await handler.run(
        UpdatePublishSettings(
            workspace_id=WorkspaceId(workspace_id),
            requires_approval=body.requires_approval,
            approval_roles=body.approval_roles,
            requirements=body.requirements,
        )
    )
