from dishka import AsyncContainer, make_async_container

from pubgate.config import Config
from pubgate.domain.auth.util.di import AuthProvider
from pubgate.domain.publish.util.di import PublishProvider
from pubgate.domain.readiness.util.di import ReadinessProvider
from pubgate.domain.status.util.di import StatusProvider
from pubgate.domain.workspace.util.di import WorkspaceProvider
from pubgate.infrastructure.persistence import PersistenceProvider
from pubgate.util.di.scope import Scope


def create_container(config: Config | None = None) -> AsyncContainer:
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()  # type: ignore[call-arg]

    return make_async_container(
        PersistenceProvider(),
        WorkspaceProvider(),
        ReadinessProvider(),
        StatusProvider(),
        PublishProvider(),
        AuthProvider(),
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]  # Custom scope class
    )
