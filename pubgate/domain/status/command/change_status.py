import logfire

from pubgate.domain.auth.model.principal import Principal
from pubgate.domain.auth.model.role import Role
from pubgate.domain.event.model.value import EventId, EventStatus
from pubgate.domain.shared.authorization.gate import at_least
from pubgate.domain.shared.command import Command, CommandHandler
from pubgate.domain.status.command.publish_event import EventStatusChanged
from pubgate.domain.status.service.status import EventStatusService


class ChangeEventStatus(Command):
    event_id: EventId
    new_status: EventStatus
    reason: str | None = None


class ChangeEventStatusHandler(CommandHandler[ChangeEventStatus, EventStatusChanged]):
    __auth__ = at_least(Role.ORGANIZER)
    principal: Principal
    status_service: EventStatusService

    async def run(self, cmd: ChangeEventStatus) -> EventStatusChanged:
        with logfire.span("ChangeEventStatus", event_id=str(cmd.event_id)):
            event = await self.status_service.change_status(
                cmd.event_id,
                cmd.new_status,
                self.principal.user_id,
                reason=cmd.reason.strip() if cmd.reason else None,
            )
            return EventStatusChanged(event_id=event.id, status=event.status)
