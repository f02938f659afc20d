from __future__ import annotations

from abc import abstractmethod
from typing import Protocol

from pubgate.domain.event.model.value import EventId
from pubgate.domain.shared.port import Port
from pubgate.domain.workspace.model.aggregate import Workspace
from pubgate.domain.workspace.model.value import WorkspaceId


class WorkspaceRepository(Port, Protocol):
    @abstractmethod
    async def get(self, workspace_id: WorkspaceId) -> Workspace | None: ...

    @abstractmethod
    async def get_root_for_event(self, event_id: EventId) -> Workspace | None: ...

    @abstractmethod
    async def save_publish_configuration(self, workspace: Workspace) -> None: ...
