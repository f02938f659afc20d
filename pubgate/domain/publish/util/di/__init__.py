from pubgate.domain.publish.util.di.provider import PublishProvider

__all__ = ["PublishProvider"]
