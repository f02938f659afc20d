from dishka import provide

from pubgate.domain.status.command.change_status import ChangeEventStatusHandler
from pubgate.domain.status.command.publish_event import PublishEventHandler
from pubgate.domain.status.command.unpublish_event import UnpublishEventHandler
from pubgate.domain.status.query.list_history import ListStatusHistoryHandler
from pubgate.domain.status.service.status import EventStatusService
from pubgate.util.di.base import Provider
from pubgate.util.di.scope import Scope


class StatusProvider(Provider):
    status_service = provide(EventStatusService, scope=Scope.UOW)

    # Command Handlers
    publish_event_handler = provide(PublishEventHandler, scope=Scope.UOW)
    unpublish_event_handler = provide(UnpublishEventHandler, scope=Scope.UOW)
    change_status_handler = provide(ChangeEventStatusHandler, scope=Scope.UOW)

    # Query Handlers
    list_history_handler = provide(ListStatusHistoryHandler, scope=Scope.UOW)
