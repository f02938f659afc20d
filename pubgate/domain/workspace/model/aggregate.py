from datetime import UTC, datetime

from pydantic import Field

from pubgate.domain.event.model.value import EventId
from pubgate.domain.shared.error import InvalidStateError
from pubgate.domain.shared.model.aggregate import Aggregate
from pubgate.domain.workspace.model.value import (
    WorkspaceId,
    WorkspacePublishConfiguration,
    WorkspaceType,
)


class Workspace(Aggregate):
    id: WorkspaceId
    event_id: EventId
    name: str
    workspace_type: WorkspaceType = WorkspaceType.ROOT
    # None until an administrator saves publish settings for this workspace
    publish_configuration: WorkspacePublishConfiguration | None = None
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @property
    def is_root(self) -> bool:
        return self.workspace_type == WorkspaceType.ROOT

    def configure_publishing(self, configuration: WorkspacePublishConfiguration) -> None:
        if not self.is_root:
            raise InvalidStateError(
                f"Publish settings can only be configured on ROOT workspaces, "
                f"not {self.workspace_type}"
            )
        self.publish_configuration = configuration
        self.updated_at = datetime.now(UTC)
