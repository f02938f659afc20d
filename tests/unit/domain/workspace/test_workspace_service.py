"""Unit tests for WorkspaceService publish configuration."""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from factories import make_principal, make_workspace
from pubgate.domain.auth.model.role import Role
from pubgate.domain.event.model.value import EventId
from pubgate.domain.shared.error import (
    AuthorizationError,
    InvalidStateError,
    NotFoundError,
    ValidationError,
)
from pubgate.domain.workspace.command.update_publish_settings import (
    UpdatePublishSettings,
    UpdatePublishSettingsHandler,
)
from pubgate.domain.workspace.model.value import (
    PublishRequirements,
    WorkspacePublishConfiguration,
    WorkspaceRole,
    WorkspaceType,
)
from pubgate.domain.workspace.query.get_publish_settings import (
    GetPublishSettings,
    GetPublishSettingsHandler,
)
from pubgate.domain.workspace.service.workspace import WorkspaceService

DEFAULTS = WorkspacePublishConfiguration(
    requirements=PublishRequirements(require_landing_page=True)
)


def _make_service(workspace=None) -> tuple[WorkspaceService, AsyncMock]:
    repo = AsyncMock()
    repo.get.return_value = workspace
    return WorkspaceService(workspace_repo=repo, defaults=DEFAULTS), repo


class TestConfiguration:
    @pytest.mark.asyncio
    async def test_falls_back_to_defaults(self):
        workspace = make_workspace(EventId(uuid4()))
        service, _ = _make_service(workspace)

        config = await service.get_publish_configuration(workspace.id)

        assert config == DEFAULTS

    def test_no_workspace_uses_defaults(self):
        service, _ = _make_service()

        assert service.configuration_of(None) == DEFAULTS

    @pytest.mark.asyncio
    async def test_stored_configuration_wins(self):
        stored = WorkspacePublishConfiguration(requires_approval=True)
        workspace = make_workspace(EventId(uuid4()), publish_configuration=stored)
        service, _ = _make_service(workspace)

        assert await service.get_publish_configuration(workspace.id) == stored

    @pytest.mark.asyncio
    async def test_unknown_workspace(self):
        service, _ = _make_service(None)

        with pytest.raises(NotFoundError):
            await service.get_publish_configuration(uuid4())


class TestUpdate:
    @pytest.mark.asyncio
    async def test_update_saves_configuration(self):
        workspace = make_workspace(EventId(uuid4()))
        service, repo = _make_service(workspace)

        config = await service.update_publish_configuration(
            workspace.id,
            requires_approval=True,
            approval_roles=[WorkspaceRole.WORKSPACE_OWNER, WorkspaceRole.OPERATIONS_MANAGER],
            requirements=PublishRequirements(require_seo=True),
        )

        assert config.requires_approval is True
        saved = repo.save_publish_configuration.await_args.args[0]
        assert saved.publish_configuration == config

    @pytest.mark.asyncio
    async def test_empty_approval_roles_rejected(self):
        workspace = make_workspace(EventId(uuid4()))
        service, repo = _make_service(workspace)

        with pytest.raises(ValidationError) as exc_info:
            await service.update_publish_configuration(
                workspace.id,
                requires_approval=True,
                approval_roles=[],
                requirements=PublishRequirements(),
            )

        assert exc_info.value.field == "approval_roles"
        repo.save_publish_configuration.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_only_root_workspaces(self):
        workspace = make_workspace(EventId(uuid4()), workspace_type=WorkspaceType.TEAM)
        service, repo = _make_service(workspace)

        with pytest.raises(InvalidStateError):
            await service.update_publish_configuration(
                workspace.id,
                requires_approval=False,
                approval_roles=[WorkspaceRole.WORKSPACE_OWNER],
                requirements=PublishRequirements(),
            )

        repo.save_publish_configuration.assert_not_awaited()

    def test_duplicate_roles_collapse(self):
        config = WorkspacePublishConfiguration(
            approval_roles=[WorkspaceRole.GROWTH_MANAGER, WorkspaceRole.GROWTH_MANAGER]
        )

        assert config.approval_roles == [WorkspaceRole.GROWTH_MANAGER]


class TestHandlers:
    @pytest.mark.asyncio
    async def test_update_requires_admin(self):
        workspace_service = AsyncMock()
        handler = UpdatePublishSettingsHandler(
            principal=make_principal(Role.REVIEWER), workspace_service=workspace_service
        )

        with pytest.raises(AuthorizationError):
            await handler.run(
                UpdatePublishSettings(
                    workspace_id=uuid4(),
                    requires_approval=True,
                    approval_roles=[WorkspaceRole.WORKSPACE_OWNER],
                    requirements=PublishRequirements(),
                )
            )

        workspace_service.update_publish_configuration.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_get_settings(self):
        workspace = make_workspace(EventId(uuid4()))
        service, _ = _make_service(workspace)
        handler = GetPublishSettingsHandler(
            principal=make_principal(Role.ORGANIZER), workspace_service=service
        )

        result = await handler.run(GetPublishSettings(workspace_id=workspace.id))

        assert result.workspace_id == workspace.id
        assert result.requires_approval is False
        assert result.requirements.require_landing_page is True
