from sqlalchemy.ext.asyncio import AsyncSession

from pubgate.domain.shared.uow import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """Unit of work over the request-scoped session shared by all repositories."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def commit(self) -> None:
        await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()
