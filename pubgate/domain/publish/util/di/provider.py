from dishka import provide

from pubgate.domain.publish.command.approve import ApprovePublishRequestHandler
from pubgate.domain.publish.command.cancel import CancelPublishRequestHandler
from pubgate.domain.publish.command.reject import RejectPublishRequestHandler
from pubgate.domain.publish.command.submit import SubmitPublishRequestHandler
from pubgate.domain.publish.query.get_publish_status import GetPublishStatusHandler
from pubgate.domain.publish.query.list_pending_requests import ListPendingRequestsHandler
from pubgate.domain.publish.service.publish import PublishRequestService
from pubgate.util.di.base import Provider
from pubgate.util.di.scope import Scope


class PublishProvider(Provider):
    publish_service = provide(PublishRequestService, scope=Scope.UOW)

    # Command Handlers
    submit_handler = provide(SubmitPublishRequestHandler, scope=Scope.UOW)
    approve_handler = provide(ApprovePublishRequestHandler, scope=Scope.UOW)
    reject_handler = provide(RejectPublishRequestHandler, scope=Scope.UOW)
    cancel_handler = provide(CancelPublishRequestHandler, scope=Scope.UOW)

    # Query Handlers
    get_publish_status_handler = provide(GetPublishStatusHandler, scope=Scope.UOW)
    list_pending_handler = provide(ListPendingRequestsHandler, scope=Scope.UOW)
