import logfire

from pubgate.domain.auth.model.principal import Principal
from pubgate.domain.auth.model.role import Role
from pubgate.domain.event.model.value import EventId, EventStatus
from pubgate.domain.shared.authorization.gate import at_least
from pubgate.domain.shared.command import Command, CommandHandler, Result
from pubgate.domain.shared.error import InvalidStateError
from pubgate.domain.status.service.status import EventStatusService
from pubgate.domain.workspace.service.workspace import WorkspaceService


class PublishEvent(Command):
    event_id: EventId


class EventStatusChanged(Result):
    event_id: EventId
    status: EventStatus


class PublishEventHandler(CommandHandler[PublishEvent, EventStatusChanged]):
    """Direct publish, for workspaces that do not require approval.

    Reviewers may publish directly either way.
    """

    __auth__ = at_least(Role.ORGANIZER)
    principal: Principal
    status_service: EventStatusService
    workspace_service: WorkspaceService

    async def run(self, cmd: PublishEvent) -> EventStatusChanged:
        with logfire.span("PublishEvent", event_id=str(cmd.event_id)):
            root = await self.workspace_service.get_root_for_event(cmd.event_id)
            configuration = self.workspace_service.configuration_of(root)
            if configuration.requires_approval and not self.principal.has_role(Role.REVIEWER):
                raise InvalidStateError(
                    "This workspace requires approval before publishing; "
                    "submit a publish request instead",
                    code="approval_required",
                )

            event = await self.status_service.publish(cmd.event_id, self.principal.user_id)
            return EventStatusChanged(event_id=event.id, status=event.status)
