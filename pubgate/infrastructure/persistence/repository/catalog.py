from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from pubgate.domain.event.model.value import EventId
from pubgate.domain.readiness.model.value import PromoCode
from pubgate.domain.readiness.port.catalog import TicketingCatalog
from pubgate.infrastructure.persistence.tables import promo_codes_table, ticket_tiers_table


class PostgresTicketingCatalog(TicketingCatalog):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def count_ticket_tiers(self, event_id: EventId) -> int:
        stmt = (
            select(func.count())
            .select_from(ticket_tiers_table)
            .where(ticket_tiers_table.c.event_id == str(event_id))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def list_promo_codes(self, event_id: EventId) -> list[PromoCode]:
        stmt = (
            select(promo_codes_table.c.id, promo_codes_table.c.is_active)
            .where(promo_codes_table.c.event_id == str(event_id))
            .order_by(promo_codes_table.c.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return [PromoCode(id=UUID(r.id), is_active=bool(r.is_active)) for r in result.all()]
