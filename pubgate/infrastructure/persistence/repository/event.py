from datetime import UTC, datetime

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from pubgate.domain.event.model.aggregate import Event
from pubgate.domain.event.model.value import EventId, EventStatus
from pubgate.domain.event.port.repository import EventRepository
from pubgate.infrastructure.persistence.mappers.event import row_to_event
from pubgate.infrastructure.persistence.tables import events_table


class PostgresEventRepository(EventRepository):
    """Reads events and writes their status column; the rest is owned by the event editor."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, event_id: EventId) -> Event | None:
        stmt = select(events_table).where(events_table.c.id == str(event_id))
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_event(dict(row)) if row else None

    async def update_status(self, event_id: EventId, status: EventStatus) -> None:
        stmt = (
            update(events_table)
            .where(events_table.c.id == str(event_id))
            .values(status=status, updated_at=datetime.now(UTC))
        )
        await self.session.execute(stmt)
        await self.session.flush()
