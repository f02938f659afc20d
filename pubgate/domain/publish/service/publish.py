import logging

from pubgate.domain.auth.model.value import UserId
from pubgate.domain.event.model.value import EventId, EventStatus
from pubgate.domain.publish.model.aggregate import PublishRequest
from pubgate.domain.publish.model.value import (
    ChecklistSnapshot,
    PublishPriority,
    PublishRequestId,
)
from pubgate.domain.publish.port.repository import PublishRequestRepository
from pubgate.domain.readiness.service.readiness import ReadinessService
from pubgate.domain.shared.error import ConflictError, NotFoundError, ValidationError
from pubgate.domain.shared.service import Service
from pubgate.domain.shared.uow import UnitOfWork
from pubgate.domain.status.service.status import EventStatusService
from pubgate.domain.workspace.model.value import WorkspaceId
from pubgate.domain.workspace.service.workspace import WorkspaceService

logger = logging.getLogger(__name__)


class PublishRequestService(Service):
    """Lifecycle of publish approval requests.

    At most one request per event is pending at a time. The repository backs
    this with a unique index, and resolutions/cancellations only touch rows
    that are still pending, so concurrent callers get ConflictError rather
    than a double transition.
    """

    request_repo: PublishRequestRepository
    readiness_service: ReadinessService
    workspace_service: WorkspaceService
    status_service: EventStatusService
    uow: UnitOfWork

    async def get(self, request_id: PublishRequestId) -> PublishRequest:
        request = await self.request_repo.get(request_id)
        if request is None:
            raise NotFoundError(f"Publish request not found: {request_id}")
        return request

    async def get_latest_for_event(self, event_id: EventId) -> PublishRequest | None:
        return await self.request_repo.get_latest_for_event(event_id)

    async def submit(
        self,
        event_id: EventId,
        requested_by: UserId,
        priority: PublishPriority = PublishPriority.MEDIUM,
        notes: str | None = None,
    ) -> PublishRequest:
        event = await self.readiness_service.get_event(event_id)
        root = await self.workspace_service.get_root_for_event(event_id)
        if root is None:
            raise NotFoundError(f"No ROOT workspace found for event {event_id}")

        pending = await self.request_repo.get_pending_for_event(event_id)
        if pending is not None:
            raise ConflictError(
                f"Event {event_id} already has a pending publish request ({pending.id})",
                code="request_pending",
            )

        checklist = await self.readiness_service.evaluate_event(event, root)
        request = PublishRequest.create(
            event_id=event_id,
            workspace_id=root.id,
            requested_by=requested_by,
            snapshot=ChecklistSnapshot.capture(checklist, notes=notes),
            priority=priority,
        )

        async with self.uow:
            await self.request_repo.add(request)

        logger.info(
            "Publish request %s submitted for event %s (priority=%s, can_publish=%s)",
            request.id,
            event_id,
            priority,
            checklist.can_publish,
        )
        return request

    async def approve(
        self,
        request_id: PublishRequestId,
        reviewer_id: UserId,
        notes: str | None = None,
    ) -> PublishRequest:
        """Approve a pending request and publish its event in one transaction.

        The submission snapshot is trusted; readiness is not re-evaluated.
        """
        async with self.uow:
            request = await self.get(request_id)
            request.approve(reviewer_id, notes.strip() if notes else None)
            if not await self.request_repo.resolve(request):
                raise self._lost_race(request_id)

            event = await self.status_service.get_event(request.event_id)
            await self.status_service.apply_transition(
                event,
                EventStatus.PUBLISHED,
                reviewer_id,
                reason=f"Publish request {request_id} approved",
            )

        logger.info("Publish request %s approved by %s", request_id, reviewer_id)
        return request

    async def reject(
        self,
        request_id: PublishRequestId,
        reviewer_id: UserId,
        notes: str,
    ) -> PublishRequest:
        if not notes or not notes.strip():
            raise ValidationError("A reason is required to reject a request", field="notes")

        async with self.uow:
            request = await self.get(request_id)
            request.reject(reviewer_id, notes)
            if not await self.request_repo.resolve(request):
                raise self._lost_race(request_id)

        logger.info("Publish request %s rejected by %s", request_id, reviewer_id)
        return request

    async def cancel(self, request_id: PublishRequestId) -> PublishRequest:
        async with self.uow:
            request = await self.get(request_id)
            request.require_pending()
            if not await self.request_repo.delete_pending(request_id):
                raise self._lost_race(request_id)

        logger.info("Publish request %s cancelled", request_id)
        return request

    async def list_pending(
        self,
        workspace_id: WorkspaceId,
        *,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[PublishRequest]:
        await self.workspace_service.get(workspace_id)
        return await self.request_repo.list_pending_for_workspace(
            workspace_id, limit=limit, offset=offset
        )

    @staticmethod
    def _lost_race(request_id: PublishRequestId) -> ConflictError:
        return ConflictError(
            f"Publish request {request_id} was resolved or cancelled concurrently",
            code="already_resolved",
        )
