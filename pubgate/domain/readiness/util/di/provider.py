from dishka import provide

from pubgate.domain.readiness.query.evaluate_readiness import EvaluateReadinessHandler
from pubgate.domain.readiness.service.readiness import ReadinessService
from pubgate.util.di.base import Provider
from pubgate.util.di.scope import Scope


class ReadinessProvider(Provider):
    readiness_service = provide(ReadinessService, scope=Scope.UOW)

    # Query Handlers
    evaluate_readiness_handler = provide(EvaluateReadinessHandler, scope=Scope.UOW)
