from datetime import datetime

import logfire

from pubgate.domain.auth.model.principal import Principal
from pubgate.domain.auth.model.role import Role
from pubgate.domain.auth.model.value import UserId
from pubgate.domain.event.model.value import EventId
from pubgate.domain.publish.model.value import PublishRequestId, PublishRequestStatus
from pubgate.domain.publish.service.publish import PublishRequestService
from pubgate.domain.shared.authorization.gate import at_least
from pubgate.domain.shared.command import Command, CommandHandler, Result


class ApprovePublishRequest(Command):
    request_id: PublishRequestId
    notes: str | None = None


class PublishRequestResolved(Result):
    id: PublishRequestId
    event_id: EventId
    status: PublishRequestStatus
    reviewer_id: UserId | None
    review_notes: str | None
    reviewed_at: datetime | None


class ApprovePublishRequestHandler(
    CommandHandler[ApprovePublishRequest, PublishRequestResolved]
):
    __auth__ = at_least(Role.REVIEWER)
    principal: Principal
    publish_service: PublishRequestService

    async def run(self, cmd: ApprovePublishRequest) -> PublishRequestResolved:
        with logfire.span("ApprovePublishRequest", request_id=str(cmd.request_id)):
            request = await self.publish_service.approve(
                cmd.request_id, reviewer_id=self.principal.user_id, notes=cmd.notes
            )
            logfire.info("Publish request approved", request_id=str(request.id))
            return PublishRequestResolved(
                id=request.id,
                event_id=request.event_id,
                status=request.status,
                reviewer_id=request.reviewer_id,
                review_notes=request.review_notes,
                reviewed_at=request.reviewed_at,
            )
