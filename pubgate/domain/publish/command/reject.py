import logfire

from pubgate.domain.auth.model.principal import Principal
from pubgate.domain.auth.model.role import Role
from pubgate.domain.publish.command.approve import PublishRequestResolved
from pubgate.domain.publish.model.value import PublishRequestId
from pubgate.domain.publish.service.publish import PublishRequestService
from pubgate.domain.shared.authorization.gate import at_least
from pubgate.domain.shared.command import Command, CommandHandler


class RejectPublishRequest(Command):
    request_id: PublishRequestId
    notes: str


class RejectPublishRequestHandler(CommandHandler[RejectPublishRequest, PublishRequestResolved]):
    __auth__ = at_least(Role.REVIEWER)
    principal: Principal
    publish_service: PublishRequestService

    async def run(self, cmd: RejectPublishRequest) -> PublishRequestResolved:
        with logfire.span("RejectPublishRequest", request_id=str(cmd.request_id)):
            request = await self.publish_service.reject(
                cmd.request_id, reviewer_id=self.principal.user_id, notes=cmd.notes
            )
            return PublishRequestResolved(
                id=request.id,
                event_id=request.event_id,
                status=request.status,
                reviewer_id=request.reviewer_id,
                review_notes=request.review_notes,
                reviewed_at=request.reviewed_at,
            )
