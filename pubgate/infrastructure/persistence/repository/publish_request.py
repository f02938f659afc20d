from __future__ import annotations

import logging
from typing import List

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from pubgate.domain.event.model.value import EventId
from pubgate.domain.publish.model.aggregate import PublishRequest
from pubgate.domain.publish.model.value import PublishRequestId, PublishRequestStatus
from pubgate.domain.publish.port.repository import PublishRequestRepository
from pubgate.domain.shared.error import ConflictError
from pubgate.domain.workspace.model.value import WorkspaceId
from pubgate.infrastructure.persistence.mappers.publish_request import (
    publish_request_to_dict,
    row_to_publish_request,
)
from pubgate.infrastructure.persistence.tables import publish_requests_table

logger = logging.getLogger(__name__)

_t = publish_requests_table


class PostgresPublishRequestRepository(PublishRequestRepository):
    """Publish requests, guarded by the pending-per-event unique index."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, request_id: PublishRequestId) -> PublishRequest | None:
        stmt = select(_t).where(_t.c.id == str(request_id))
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_publish_request(dict(row)) if row else None

    async def get_latest_for_event(self, event_id: EventId) -> PublishRequest | None:
        stmt = (
            select(_t)
            .where(_t.c.event_id == str(event_id))
            .order_by(_t.c.requested_at.desc())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_publish_request(dict(row)) if row else None

    async def get_pending_for_event(self, event_id: EventId) -> PublishRequest | None:
        stmt = (
            select(_t)
            .where(_t.c.event_id == str(event_id))
            .where(_t.c.status == PublishRequestStatus.PENDING)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_publish_request(dict(row)) if row else None

    async def add(self, request: PublishRequest) -> None:
        try:
            await self.session.execute(insert(_t).values(**publish_request_to_dict(request)))
            await self.session.flush()
        except IntegrityError as e:
            logger.info("Duplicate pending publish request for event %s", request.event_id)
            raise ConflictError(
                f"Event {request.event_id} already has a pending publish request",
                code="request_pending",
            ) from e

    async def resolve(self, request: PublishRequest) -> bool:
        stmt = (
            update(_t)
            .where(_t.c.id == str(request.id))
            .where(_t.c.status == PublishRequestStatus.PENDING)
            .values(
                status=request.status,
                reviewer_id=str(request.reviewer_id) if request.reviewer_id else None,
                review_notes=request.review_notes,
                reviewed_at=request.reviewed_at,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1

    async def delete_pending(self, request_id: PublishRequestId) -> bool:
        stmt = (
            delete(_t)
            .where(_t.c.id == str(request_id))
            .where(_t.c.status == PublishRequestStatus.PENDING)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1

    async def list_pending_for_workspace(
        self,
        workspace_id: WorkspaceId,
        *,
        limit: int | None = None,
        offset: int | None = None,
    ) -> List[PublishRequest]:
        stmt = (
            select(_t)
            .where(_t.c.workspace_id == str(workspace_id))
            .where(_t.c.status == PublishRequestStatus.PENDING)
            .order_by(_t.c.requested_at.asc())
        )
        if offset is not None:
            stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)

        result = await self.session.execute(stmt)
        return [row_to_publish_request(dict(r)) for r in result.mappings().all()]
