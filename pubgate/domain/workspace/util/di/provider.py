from dishka import provide

from pubgate.config import Config
from pubgate.domain.workspace.command.update_publish_settings import UpdatePublishSettingsHandler
from pubgate.domain.workspace.model.value import WorkspacePublishConfiguration
from pubgate.domain.workspace.port.repository import WorkspaceRepository
from pubgate.domain.workspace.query.get_publish_settings import GetPublishSettingsHandler
from pubgate.domain.workspace.service.workspace import WorkspaceService
from pubgate.util.di.base import Provider
from pubgate.util.di.scope import Scope


class WorkspaceProvider(Provider):
    @provide(scope=Scope.APP)
    def get_default_configuration(self, config: Config) -> WorkspacePublishConfiguration:
        return config.publish.default_configuration()

    @provide(scope=Scope.UOW)
    def get_workspace_service(
        self,
        workspace_repo: WorkspaceRepository,
        defaults: WorkspacePublishConfiguration,
    ) -> WorkspaceService:
        return WorkspaceService(workspace_repo=workspace_repo, defaults=defaults)

    # Command Handlers
    update_publish_settings_handler = provide(UpdatePublishSettingsHandler, scope=Scope.UOW)

    # Query Handlers
    get_publish_settings_handler = provide(GetPublishSettingsHandler, scope=Scope.UOW)
