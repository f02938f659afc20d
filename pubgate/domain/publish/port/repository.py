from __future__ import annotations

from abc import abstractmethod
from typing import Protocol

from pubgate.domain.event.model.value import EventId
from pubgate.domain.publish.model.aggregate import PublishRequest
from pubgate.domain.publish.model.value import PublishRequestId
from pubgate.domain.shared.port import Port
from pubgate.domain.workspace.model.value import WorkspaceId


class PublishRequestRepository(Port, Protocol):
    @abstractmethod
    async def get(self, request_id: PublishRequestId) -> PublishRequest | None: ...

    @abstractmethod
    async def get_latest_for_event(self, event_id: EventId) -> PublishRequest | None: ...

    @abstractmethod
    async def get_pending_for_event(self, event_id: EventId) -> PublishRequest | None: ...

    @abstractmethod
    async def add(self, request: PublishRequest) -> None:
        """Insert a new pending request.

        Raises:
            ConflictError: another request for the same event is still pending.
        """
        ...

    @abstractmethod
    async def resolve(self, request: PublishRequest) -> bool:
        """Persist a resolution, only if the stored row is still pending.

        Returns False when the row was no longer pending (or no longer exists).
        """
        ...

    @abstractmethod
    async def delete_pending(self, request_id: PublishRequestId) -> bool:
        """Delete the request if it is still pending. Returns whether a row was deleted."""
        ...

    @abstractmethod
    async def list_pending_for_workspace(
        self,
        workspace_id: WorkspaceId,
        *,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[PublishRequest]: ...
