"""Event readiness, direct status transitions and status history."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query
from pydantic import BaseModel

from pubgate.domain.event.model.value import EventId, EventStatus
from pubgate.domain.publish.command.submit import (
    PublishRequestSubmitted,
    SubmitPublishRequest,
    SubmitPublishRequestHandler,
)
from pubgate.domain.publish.model.value import PublishPriority
from pubgate.domain.publish.query.get_publish_status import (
    GetPublishStatus,
    GetPublishStatusHandler,
    PublishStatus,
)
from pubgate.domain.readiness.query.evaluate_readiness import (
    EvaluateReadiness,
    EvaluateReadinessHandler,
    ReadinessReport,
)
from pubgate.domain.status.command.change_status import (
    ChangeEventStatus,
    ChangeEventStatusHandler,
)
from pubgate.domain.status.command.publish_event import (
    EventStatusChanged,
    PublishEvent,
    PublishEventHandler,
)
from pubgate.domain.status.command.unpublish_event import (
    UnpublishEvent,
    UnpublishEventHandler,
)
from pubgate.domain.status.query.list_history import (
    ListStatusHistory,
    ListStatusHistoryHandler,
    StatusHistory,
)

router = APIRouter(prefix="/events", tags=["Events"], route_class=DishkaRoute)


class ChangeStatusRequest(BaseModel):
    status: EventStatus
    reason: str | None = None


class SubmitRequestBody(BaseModel):
    priority: PublishPriority = PublishPriority.MEDIUM
    notes: str | None = None


@router.get("/{event_id}/readiness", response_model=ReadinessReport)
async def evaluate_readiness(
    event_id: UUID,
    handler: FromDishka[EvaluateReadinessHandler],
) -> ReadinessReport:
    return await handler.run(EvaluateReadiness(event_id=EventId(event_id)))


@router.get("/{event_id}/publish-status", response_model=PublishStatus)
async def get_publish_status(
    event_id: UUID,
    handler: FromDishka[GetPublishStatusHandler],
) -> PublishStatus:
    return await handler.run(GetPublishStatus(event_id=EventId(event_id)))


@router.post("/{event_id}/publish", response_model=EventStatusChanged)
async def publish_event(
    event_id: UUID,
    handler: FromDishka[PublishEventHandler],
) -> EventStatusChanged:
    """Publish directly. Refused when the root workspace requires approval."""
    return await handler.run(PublishEvent(event_id=EventId(event_id)))


@router.post("/{event_id}/unpublish", response_model=EventStatusChanged)
async def unpublish_event(
    event_id: UUID,
    handler: FromDishka[UnpublishEventHandler],
) -> EventStatusChanged:
    return await handler.run(UnpublishEvent(event_id=EventId(event_id)))


@router.post("/{event_id}/status", response_model=EventStatusChanged)
async def change_status(
    event_id: UUID,
    body: ChangeStatusRequest,
    handler: FromDishka[ChangeEventStatusHandler],
) -> EventStatusChanged:
    return await handler.run(
        ChangeEventStatus(event_id=EventId(event_id), new_status=body.status, reason=body.reason)
    )


@router.get("/{event_id}/status-history", response_model=StatusHistory)
async def list_status_history(
    event_id: UUID,
    handler: FromDishka[ListStatusHistoryHandler],
    limit: int | None = Query(default=None, ge=1, le=500),
) -> StatusHistory:
    return await handler.run(ListStatusHistory(event_id=EventId(event_id), limit=limit))


@router.post(
    "/{event_id}/publish-requests",
    response_model=PublishRequestSubmitted,
    status_code=201,
)
async def submit_publish_request(
    event_id: UUID,
    body: SubmitRequestBody,
    handler: FromDishka[SubmitPublishRequestHandler],
) -> PublishRequestSubmitted:
    return await handler.run(
        SubmitPublishRequest(event_id=EventId(event_id), priority=body.priority, notes=body.notes)
    )
