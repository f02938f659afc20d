"""Unit tests for EventStatusService."""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from factories import FakeUnitOfWork, make_event
from pubgate.domain.auth.model.value import UserId
from pubgate.domain.event.model.value import EventStatus
from pubgate.domain.shared.error import NotFoundError
from pubgate.domain.status.service.status import EventStatusService


def _make_service(event=None):
    event_repo = AsyncMock()
    event_repo.get.return_value = event
    history_repo = AsyncMock()
    uow = FakeUnitOfWork()
    service = EventStatusService(event_repo=event_repo, history_repo=history_repo, uow=uow)
    return service, event_repo, history_repo, uow


def _appended(history_repo):
    return [c.args[0] for c in history_repo.append.await_args_list]


class TestPublish:
    @pytest.mark.asyncio
    async def test_publish_records_history(self):
        event = make_event()
        service, event_repo, history_repo, uow = _make_service(event)
        user = UserId(uuid4())

        result = await service.publish(event.id, user)

        assert result.status == EventStatus.PUBLISHED
        event_repo.update_status.assert_awaited_once_with(event.id, EventStatus.PUBLISHED)
        [entry] = _appended(history_repo)
        assert entry.previous_status == EventStatus.DRAFT
        assert entry.new_status == EventStatus.PUBLISHED
        assert entry.changed_by == user
        assert entry.reason is None
        assert uow.commits == 1

    @pytest.mark.asyncio
    async def test_unpublish_returns_to_draft(self):
        event = make_event(status=EventStatus.PUBLISHED)
        service, event_repo, history_repo, _ = _make_service(event)

        result = await service.unpublish(event.id, UserId(uuid4()))

        assert result.status == EventStatus.DRAFT
        [entry] = _appended(history_repo)
        assert entry.previous_status == EventStatus.PUBLISHED
        assert entry.new_status == EventStatus.DRAFT

    @pytest.mark.asyncio
    async def test_unchanged_status_writes_nothing(self):
        event = make_event(status=EventStatus.PUBLISHED)
        service, event_repo, history_repo, _ = _make_service(event)

        await service.publish(event.id, UserId(uuid4()))

        event_repo.update_status.assert_not_awaited()
        history_repo.append.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_event(self):
        service, _, _, uow = _make_service(None)

        with pytest.raises(NotFoundError):
            await service.publish(uuid4(), UserId(uuid4()))

        assert uow.rollbacks == 1


class TestChangeStatus:
    @pytest.mark.asyncio
    async def test_reason_adds_explicit_entry(self):
        event = make_event(status=EventStatus.PUBLISHED)
        service, _, history_repo, _ = _make_service(event)

        await service.change_status(
            event.id, EventStatus.CANCELLED, UserId(uuid4()), reason="Venue flooded"
        )

        automatic, explicit = _appended(history_repo)
        assert automatic.reason is None
        assert explicit.reason == "Venue flooded"
        for entry in (automatic, explicit):
            assert entry.previous_status == EventStatus.PUBLISHED
            assert entry.new_status == EventStatus.CANCELLED

    @pytest.mark.asyncio
    async def test_without_reason_single_entry(self):
        event = make_event()
        service, _, history_repo, _ = _make_service(event)

        await service.change_status(event.id, EventStatus.ONGOING, UserId(uuid4()))

        assert len(_appended(history_repo)) == 1

    @pytest.mark.asyncio
    async def test_history_write_failure_rolls_back(self):
        event = make_event()
        service, _, history_repo, uow = _make_service(event)
        history_repo.append.side_effect = RuntimeError("disk full")

        with pytest.raises(RuntimeError):
            await service.change_status(event.id, EventStatus.COMPLETED, UserId(uuid4()))

        assert uow.rollbacks == 1
        assert uow.commits == 0


class TestListHistory:
    @pytest.mark.asyncio
    async def test_lists_for_existing_event(self):
        event = make_event()
        service, _, history_repo, _ = _make_service(event)
        history_repo.list_for_event.return_value = []

        assert await service.list_history(event.id, limit=10) == []
        history_repo.list_for_event.assert_awaited_once_with(event.id, limit=10)

    @pytest.mark.asyncio
    async def test_unknown_event(self):
        service, _, history_repo, _ = _make_service(None)

        with pytest.raises(NotFoundError):
            await service.list_history(uuid4())

        history_repo.list_for_event.assert_not_awaited()
