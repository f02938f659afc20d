"""Unit tests for publish request command and query handlers."""

from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from factories import NOW, make_event, make_principal, make_workspace
from pubgate.domain.auth.model.role import Role
from pubgate.domain.auth.model.value import UserId
from pubgate.domain.event.model.value import EventId
from pubgate.domain.publish.command.approve import (
    ApprovePublishRequest,
    ApprovePublishRequestHandler,
)
from pubgate.domain.publish.command.cancel import (
    CancelPublishRequest,
    CancelPublishRequestHandler,
)
from pubgate.domain.publish.command.reject import (
    RejectPublishRequest,
    RejectPublishRequestHandler,
)
from pubgate.domain.publish.command.submit import (
    SubmitPublishRequest,
    SubmitPublishRequestHandler,
)
from pubgate.domain.publish.model.aggregate import PublishRequest
from pubgate.domain.publish.model.value import (
    ChecklistSnapshot,
    PublishPriority,
    PublishRequestId,
)
from pubgate.domain.publish.query.get_publish_status import (
    GetPublishStatus,
    GetPublishStatusHandler,
)
from pubgate.domain.readiness import engine
from pubgate.domain.shared.error import AuthorizationError
from pubgate.domain.workspace.model.value import WorkspaceId, WorkspacePublishConfiguration


def _make_request(requested_by: UserId | None = None) -> PublishRequest:
    checklist = engine.evaluate(make_event(), WorkspacePublishConfiguration(), now=NOW)
    return PublishRequest.create(
        event_id=EventId(uuid4()),
        workspace_id=WorkspaceId(uuid4()),
        requested_by=requested_by or UserId(uuid4()),
        snapshot=ChecklistSnapshot.capture(checklist),
    )


class TestSubmitHandler:
    @pytest.mark.asyncio
    async def test_submits_as_principal(self):
        principal = make_principal(Role.ORGANIZER)
        request = _make_request(principal.user_id)
        publish_service = AsyncMock()
        publish_service.submit.return_value = request
        handler = SubmitPublishRequestHandler(principal=principal, publish_service=publish_service)

        result = await handler.run(
            SubmitPublishRequest(
                event_id=request.event_id, priority=PublishPriority.HIGH, notes="ready"
            )
        )

        publish_service.submit.assert_awaited_once_with(
            request.event_id,
            requested_by=principal.user_id,
            priority=PublishPriority.HIGH,
            notes="ready",
        )
        assert result.id == request.id
        assert result.can_publish is True

    @pytest.mark.asyncio
    async def test_public_caller_is_denied(self):
        publish_service = AsyncMock()
        handler = SubmitPublishRequestHandler(
            principal=make_principal(), publish_service=publish_service
        )

        with pytest.raises(AuthorizationError) as exc_info:
            await handler.run(SubmitPublishRequest(event_id=EventId(uuid4())))

        assert exc_info.value.code == "access_denied"
        publish_service.submit.assert_not_awaited()


class TestReviewerHandlers:
    @pytest.mark.asyncio
    async def test_organizer_cannot_approve(self):
        publish_service = AsyncMock()
        handler = ApprovePublishRequestHandler(
            principal=make_principal(Role.ORGANIZER), publish_service=publish_service
        )

        with pytest.raises(AuthorizationError):
            await handler.run(ApprovePublishRequest(request_id=PublishRequestId(uuid4())))

        publish_service.approve.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_reviewer_approves(self):
        reviewer = make_principal(Role.REVIEWER)
        request = _make_request()
        request.approve(reviewer.user_id, "ok")
        publish_service = AsyncMock()
        publish_service.approve.return_value = request
        handler = ApprovePublishRequestHandler(principal=reviewer, publish_service=publish_service)

        result = await handler.run(ApprovePublishRequest(request_id=request.id, notes="ok"))

        assert result.status == "approved"
        assert result.reviewer_id == reviewer.user_id

    @pytest.mark.asyncio
    async def test_reviewer_rejects(self):
        reviewer = make_principal(Role.REVIEWER)
        request = _make_request()
        request.reject(reviewer.user_id, "needs dates")
        publish_service = AsyncMock()
        publish_service.reject.return_value = request
        handler = RejectPublishRequestHandler(principal=reviewer, publish_service=publish_service)

        result = await handler.run(
            RejectPublishRequest(request_id=request.id, notes="needs dates")
        )

        assert result.status == "rejected"
        assert result.review_notes == "needs dates"


class TestCancelHandler:
    @pytest.mark.asyncio
    async def test_requester_can_cancel(self):
        organizer = make_principal(Role.ORGANIZER)
        request = _make_request(organizer.user_id)
        publish_service = AsyncMock()
        publish_service.get.return_value = request
        handler = CancelPublishRequestHandler(principal=organizer, publish_service=publish_service)

        result = await handler.run(CancelPublishRequest(request_id=request.id))

        publish_service.cancel.assert_awaited_once_with(request.id)
        assert result.event_id == request.event_id

    @pytest.mark.asyncio
    async def test_other_organizer_cannot_cancel(self):
        request = _make_request()
        publish_service = AsyncMock()
        publish_service.get.return_value = request
        handler = CancelPublishRequestHandler(
            principal=make_principal(Role.ORGANIZER), publish_service=publish_service
        )

        with pytest.raises(AuthorizationError) as exc_info:
            await handler.run(CancelPublishRequest(request_id=request.id))

        assert exc_info.value.code == "access_denied"
        publish_service.cancel.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_admin_can_cancel_any_request(self):
        request = _make_request()
        publish_service = AsyncMock()
        publish_service.get.return_value = request
        handler = CancelPublishRequestHandler(
            principal=make_principal(Role.ADMIN), publish_service=publish_service
        )

        await handler.run(CancelPublishRequest(request_id=request.id))

        publish_service.cancel.assert_awaited_once_with(request.id)


class TestGetPublishStatusHandler:
    @pytest.mark.asyncio
    async def test_combines_event_workspace_and_latest_request(self):
        event = make_event()
        workspace = make_workspace(
            event.id,
            publish_configuration=WorkspacePublishConfiguration(requires_approval=True),
        )
        checklist = engine.evaluate(event, workspace.publish_configuration, now=NOW)
        latest = _make_request()

        readiness_service = AsyncMock()
        readiness_service.get_event.return_value = event
        readiness_service.evaluate_event.return_value = checklist
        workspace_service = AsyncMock()
        workspace_service.get_root_for_event.return_value = workspace
        workspace_service.configuration_of = MagicMock(
            return_value=workspace.publish_configuration
        )
        publish_service = AsyncMock()
        publish_service.get_latest_for_event.return_value = latest

        handler = GetPublishStatusHandler(
            principal=make_principal(Role.ORGANIZER),
            readiness_service=readiness_service,
            workspace_service=workspace_service,
            publish_service=publish_service,
        )

        result = await handler.run(GetPublishStatus(event_id=event.id))

        assert result.event_status == event.status
        assert result.root_workspace_id == workspace.id
        assert result.requires_approval is True
        assert result.latest_request == latest
        assert result.checklist == checklist
