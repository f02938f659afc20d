import logfire

from pubgate.domain.auth.model.principal import Principal
from pubgate.domain.auth.model.role import Role
from pubgate.domain.event.model.value import EventId
from pubgate.domain.shared.authorization.gate import at_least
from pubgate.domain.shared.command import Command, CommandHandler
from pubgate.domain.status.command.publish_event import EventStatusChanged
from pubgate.domain.status.service.status import EventStatusService


class UnpublishEvent(Command):
    event_id: EventId


class UnpublishEventHandler(CommandHandler[UnpublishEvent, EventStatusChanged]):
    __auth__ = at_least(Role.ORGANIZER)
    principal: Principal
    status_service: EventStatusService

    async def run(self, cmd: UnpublishEvent) -> EventStatusChanged:
        with logfire.span("UnpublishEvent", event_id=str(cmd.event_id)):
            event = await self.status_service.unpublish(cmd.event_id, self.principal.user_id)
            return EventStatusChanged(event_id=event.id, status=event.status)
