import logging

from pubgate.domain.auth.model.value import UserId
from pubgate.domain.event.model.aggregate import Event
from pubgate.domain.event.model.value import EventId, EventStatus
from pubgate.domain.event.port.repository import EventRepository
from pubgate.domain.status.model.value import StatusHistoryEntry
from pubgate.domain.status.port.repository import StatusHistoryRepository
from pubgate.domain.shared.error import NotFoundError
from pubgate.domain.shared.service import Service
from pubgate.domain.shared.uow import UnitOfWork

logger = logging.getLogger(__name__)


class EventStatusService(Service):
    """Elementary event status transitions, each recorded in the history log.

    None of these re-validate readiness; callers decide whether a transition
    is allowed.
    """

    event_repo: EventRepository
    history_repo: StatusHistoryRepository
    uow: UnitOfWork

    async def get_event(self, event_id: EventId) -> Event:
        event = await self.event_repo.get(event_id)
        if event is None:
            raise NotFoundError(f"Event not found: {event_id}")
        return event

    async def apply_transition(
        self,
        event: Event,
        new_status: EventStatus,
        changed_by: UserId | None,
        reason: str | None = None,
    ) -> StatusHistoryEntry | None:
        """Write the status and its history record without committing.

        Returns the history entry, or None when the status did not change.
        """
        previous = event.transition_to(new_status)
        if previous == new_status:
            return None

        await self.event_repo.update_status(event.id, new_status)
        entry = StatusHistoryEntry(
            event_id=event.id,
            previous_status=previous,
            new_status=new_status,
            changed_by=changed_by,
            reason=reason,
        )
        await self.history_repo.append(entry)
        logger.info(
            "Event %s status %s -> %s (by %s)", event.id, previous, new_status, changed_by
        )
        return entry

    async def publish(self, event_id: EventId, changed_by: UserId | None) -> Event:
        return await self.change_status(event_id, EventStatus.PUBLISHED, changed_by)

    async def unpublish(self, event_id: EventId, changed_by: UserId | None) -> Event:
        return await self.change_status(event_id, EventStatus.DRAFT, changed_by)

    async def change_status(
        self,
        event_id: EventId,
        new_status: EventStatus,
        changed_by: UserId | None,
        reason: str | None = None,
    ) -> Event:
        """Move an event to any status.

        A reason adds an explicit history entry carrying it, on top of the
        automatic transition record.
        """
        async with self.uow:
            event = await self.get_event(event_id)
            previous = event.status
            await self.apply_transition(event, new_status, changed_by)
            if reason:
                await self.history_repo.append(
                    StatusHistoryEntry(
                        event_id=event_id,
                        previous_status=previous,
                        new_status=new_status,
                        changed_by=changed_by,
                        reason=reason,
                    )
                )
        return event

    async def list_history(
        self, event_id: EventId, *, limit: int | None = None
    ) -> list[StatusHistoryEntry]:
        await self.get_event(event_id)
        return await self.history_repo.list_for_event(event_id, limit=limit)
