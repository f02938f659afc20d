from pubgate.domain.status.util.di.provider import StatusProvider

__all__ = ["StatusProvider"]
