from pubgate.domain.readiness.util.di.provider import ReadinessProvider

__all__ = ["ReadinessProvider"]
