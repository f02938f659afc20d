"""Reviewer actions on publish requests."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from pubgate.domain.publish.command.approve import (
    ApprovePublishRequest,
    ApprovePublishRequestHandler,
    PublishRequestResolved,
)
from pubgate.domain.publish.command.cancel import (
    CancelPublishRequest,
    CancelPublishRequestHandler,
    PublishRequestCancelled,
)
from pubgate.domain.publish.command.reject import (
    RejectPublishRequest,
    RejectPublishRequestHandler,
)
from pubgate.domain.publish.model.value import PublishRequestId

router = APIRouter(prefix="/publish-requests", tags=["Publish Requests"], route_class=DishkaRoute)


class ApproveRequestBody(BaseModel):
    notes: str | None = None


class RejectRequestBody(BaseModel):
    notes: str = ""


@router.post("/{request_id}/approve", response_model=PublishRequestResolved)
async def approve_request(
    request_id: UUID,
    handler: FromDishka[ApprovePublishRequestHandler],
    body: ApproveRequestBody | None = None,
) -> PublishRequestResolved:
    notes = body.notes if body else None
    return await handler.run(
        ApprovePublishRequest(request_id=PublishRequestId(request_id), notes=notes)
    )


@router.post("/{request_id}/reject", response_model=PublishRequestResolved)
async def reject_request(
    request_id: UUID,
    body: RejectRequestBody,
    handler: FromDishka[RejectPublishRequestHandler],
) -> PublishRequestResolved:
    return await handler.run(
        RejectPublishRequest(request_id=PublishRequestId(request_id), notes=body.notes)
    )


@router.delete("/{request_id}", response_model=PublishRequestCancelled)
async def cancel_request(
    request_id: UUID,
    handler: FromDishka[CancelPublishRequestHandler],
) -> PublishRequestCancelled:
    return await handler.run(CancelPublishRequest(request_id=PublishRequestId(request_id)))
