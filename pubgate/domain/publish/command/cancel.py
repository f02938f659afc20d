import logfire

from pubgate.domain.auth.model.principal import Principal
from pubgate.domain.auth.model.role import Role
from pubgate.domain.event.model.value import EventId
from pubgate.domain.publish.model.value import PublishRequestId
from pubgate.domain.publish.service.publish import PublishRequestService
from pubgate.domain.shared.authorization.gate import at_least
from pubgate.domain.shared.command import Command, CommandHandler, Result
from pubgate.domain.shared.error import AuthorizationError


class CancelPublishRequest(Command):
    request_id: PublishRequestId


class PublishRequestCancelled(Result):
    id: PublishRequestId
    event_id: EventId


class CancelPublishRequestHandler(CommandHandler[CancelPublishRequest, PublishRequestCancelled]):
    """Withdraw a pending request. Only its requester (or an admin) may do so."""

    __auth__ = at_least(Role.ORGANIZER)
    principal: Principal
    publish_service: PublishRequestService

    async def run(self, cmd: CancelPublishRequest) -> PublishRequestCancelled:
        with logfire.span("CancelPublishRequest", request_id=str(cmd.request_id)):
            request = await self.publish_service.get(cmd.request_id)
            if request.requested_by != self.principal.user_id and not self.principal.has_role(
                Role.ADMIN
            ):
                raise AuthorizationError(
                    "Only the requester can cancel a publish request",
                    code="access_denied",
                )

            await self.publish_service.cancel(cmd.request_id)
            return PublishRequestCancelled(id=request.id, event_id=request.event_id)
