from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from pubgate.domain.event.model.value import EventId
from pubgate.domain.status.model.value import StatusHistoryEntry
from pubgate.domain.status.port.repository import StatusHistoryRepository
from pubgate.infrastructure.persistence.mappers.status_history import (
    history_entry_to_dict,
    row_to_history_entry,
)
from pubgate.infrastructure.persistence.tables import status_history_table


class PostgresStatusHistoryRepository(StatusHistoryRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def append(self, entry: StatusHistoryEntry) -> None:
        await self.session.execute(
            insert(status_history_table).values(**history_entry_to_dict(entry))
        )
        await self.session.flush()

    async def list_for_event(
        self, event_id: EventId, *, limit: int | None = None
    ) -> list[StatusHistoryEntry]:
        """Newest first."""
        stmt = (
            select(status_history_table)
            .where(status_history_table.c.event_id == str(event_id))
            .order_by(status_history_table.c.created_at.desc())
        )
        if limit is not None:
            stmt = stmt.limit(limit)

        result = await self.session.execute(stmt)
        return [row_to_history_entry(dict(r)) for r in result.mappings().all()]
