from datetime import datetime

import logfire

from pubgate.domain.auth.model.principal import Principal
from pubgate.domain.auth.model.role import Role
from pubgate.domain.event.model.value import EventId
from pubgate.domain.publish.model.value import (
    PublishPriority,
    PublishRequestId,
    PublishRequestStatus,
)
from pubgate.domain.publish.service.publish import PublishRequestService
from pubgate.domain.shared.authorization.gate import at_least
from pubgate.domain.shared.command import Command, CommandHandler, Result


class SubmitPublishRequest(Command):
    event_id: EventId
    priority: PublishPriority = PublishPriority.MEDIUM
    notes: str | None = None


class PublishRequestSubmitted(Result):
    id: PublishRequestId
    event_id: EventId
    status: PublishRequestStatus
    priority: PublishPriority
    can_publish: bool
    requested_at: datetime


class SubmitPublishRequestHandler(
    CommandHandler[SubmitPublishRequest, PublishRequestSubmitted]
):
    __auth__ = at_least(Role.ORGANIZER)
    principal: Principal
    publish_service: PublishRequestService

    async def run(self, cmd: SubmitPublishRequest) -> PublishRequestSubmitted:
        with logfire.span("SubmitPublishRequest", event_id=str(cmd.event_id)):
            request = await self.publish_service.submit(
                cmd.event_id,
                requested_by=self.principal.user_id,
                priority=cmd.priority,
                notes=cmd.notes,
            )
            return PublishRequestSubmitted(
                id=request.id,
                event_id=request.event_id,
                status=request.status,
                priority=request.priority,
                can_publish=request.checklist_snapshot.can_publish,
                requested_at=request.requested_at,
            )
