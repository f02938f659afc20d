from typing import AsyncIterable

from dishka import from_context, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from pubgate.config import Config
from pubgate.domain.event.port.repository import EventRepository
from pubgate.domain.publish.port.repository import PublishRequestRepository
from pubgate.domain.readiness.port.catalog import TicketingCatalog
from pubgate.domain.shared.uow import UnitOfWork
from pubgate.domain.status.port.repository import StatusHistoryRepository
from pubgate.domain.workspace.port.repository import WorkspaceRepository
from pubgate.infrastructure.persistence.database import (
    create_db_engine,
    create_session_factory,
)
from pubgate.infrastructure.persistence.repository.catalog import PostgresTicketingCatalog
from pubgate.infrastructure.persistence.repository.event import PostgresEventRepository
from pubgate.infrastructure.persistence.repository.publish_request import (
    PostgresPublishRequestRepository,
)
from pubgate.infrastructure.persistence.repository.status_history import (
    PostgresStatusHistoryRepository,
)
from pubgate.infrastructure.persistence.repository.workspace import (
    PostgresWorkspaceRepository,
)
from pubgate.infrastructure.persistence.uow import SqlAlchemyUnitOfWork
from pubgate.util.di.base import Provider
from pubgate.util.di.scope import Scope


class PersistenceProvider(Provider):
    config = from_context(provides=Config, scope=Scope.APP)

    # APP-scoped factories
    @provide(scope=Scope.APP)
    def get_engine(self, config: Config) -> AsyncEngine:
        return create_db_engine(config.database)

    @provide(scope=Scope.APP)
    def get_session_factory(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    # UOW-scoped session (one per request)
    @provide(scope=Scope.UOW)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterable[AsyncSession]:
        async with session_factory() as session:
            yield session
            await session.commit()

    uow = provide(SqlAlchemyUnitOfWork, scope=Scope.UOW, provides=UnitOfWork)

    # UOW-scoped repositories
    event_repo = provide(PostgresEventRepository, scope=Scope.UOW, provides=EventRepository)
    workspace_repo = provide(
        PostgresWorkspaceRepository, scope=Scope.UOW, provides=WorkspaceRepository
    )
    catalog = provide(PostgresTicketingCatalog, scope=Scope.UOW, provides=TicketingCatalog)
    publish_request_repo = provide(
        PostgresPublishRequestRepository,
        scope=Scope.UOW,
        provides=PublishRequestRepository,
    )
    history_repo = provide(
        PostgresStatusHistoryRepository,
        scope=Scope.UOW,
        provides=StatusHistoryRepository,
    )
