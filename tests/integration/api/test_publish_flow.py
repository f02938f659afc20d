"""End-to-end publish workflow through the REST API on in-memory SQLite."""

import os
from datetime import timedelta
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncEngine

from factories import make_token
from seeding import seed_event, seed_workspace
from pubgate.application.api.rest.app import create_app
from pubgate.config import Config, DatabaseConfig
from pubgate.domain.auth.model.role import Role
from pubgate.domain.auth.model.value import UserId
from pubgate.infrastructure.persistence.database import create_session_factory


@pytest.fixture
def client():
    config = Config(
        database=DatabaseConfig(url="sqlite+aiosqlite:///:memory:", auto_migrate=False)
    )
    with TestClient(create_app(config)) as client:
        yield client


def _headers(*roles: Role, user_id: UserId | None = None) -> dict[str, str]:
    token = make_token(
        os.environ["PUBGATE_AUTH__JWT__SECRET"], user_id, roles, expires_in=timedelta(hours=1)
    )
    return {"Authorization": f"Bearer {token}"}


def _seed(client: TestClient, settings=None) -> tuple[str, str]:
    async def run():
        engine = await client.app.state.dishka_container.get(AsyncEngine)
        async with create_session_factory(engine)() as session:
            event_id = await seed_event(session)
            workspace_id = await seed_workspace(session, event_id, settings=settings)
            await session.commit()
        return event_id, workspace_id

    return client.portal.call(run)


ORGANIZER = _headers(Role.ORGANIZER)
REVIEWER = _headers(Role.REVIEWER)
ADMIN = _headers(Role.ADMIN)


class TestAuth:
    def test_health_is_open(self, client):
        assert client.get("/api/v1/health").json()["status"] == "healthy"

    def test_missing_token_is_401(self, client):
        event_id, _ = _seed(client)

        response = client.get(f"/api/v1/events/{event_id}/readiness")

        assert response.status_code == 401
        assert response.json()["code"] == "missing_token"

    def test_bad_token_is_401(self, client):
        event_id, _ = _seed(client)

        response = client.get(
            f"/api/v1/events/{event_id}/readiness",
            headers={"Authorization": "Bearer not.a.jwt"},
        )

        assert response.status_code == 401
        assert response.json()["code"] == "invalid_token"

    def test_organizer_cannot_review(self, client):
        response = client.post(f"/api/v1/publish-requests/{uuid4()}/approve", headers=ORGANIZER)

        assert response.status_code == 403


class TestReadiness:
    def test_readiness_report(self, client):
        event_id, _ = _seed(client)

        response = client.get(f"/api/v1/events/{event_id}/readiness", headers=ORGANIZER)

        assert response.status_code == 200
        body = response.json()
        assert body["can_publish"] is True
        assert body["fail_count"] == 0
        assert [i["id"] for i in body["items"]][:2] == ["basic-info", "dates"]

    def test_unknown_event_is_404(self, client):
        response = client.get(f"/api/v1/events/{uuid4()}/readiness", headers=ORGANIZER)

        assert response.status_code == 404


class TestApprovalWorkflow:
    def test_submit_review_and_publish(self, client):
        event_id, workspace_id = _seed(client)

        settings = client.put(
            f"/api/v1/workspaces/{workspace_id}/publish-settings",
            json={"requires_approval": True, "approval_roles": ["WORKSPACE_OWNER"]},
            headers=ADMIN,
        )
        assert settings.status_code == 200

        direct = client.post(f"/api/v1/events/{event_id}/publish", headers=ORGANIZER)
        assert direct.status_code == 409
        assert direct.json()["code"] == "approval_required"

        submitted = client.post(
            f"/api/v1/events/{event_id}/publish-requests",
            json={"priority": "high", "notes": "ready"},
            headers=ORGANIZER,
        )
        assert submitted.status_code == 201
        request = submitted.json()
        assert request["status"] == "pending"
        assert request["can_publish"] is True

        duplicate = client.post(
            f"/api/v1/events/{event_id}/publish-requests", json={}, headers=ORGANIZER
        )
        assert duplicate.status_code == 409

        queue = client.get(f"/api/v1/workspaces/{workspace_id}/publish-requests", headers=REVIEWER)
        assert [r["id"] for r in queue.json()["items"]] == [request["id"]]

        blank = client.post(
            f"/api/v1/publish-requests/{request['id']}/reject",
            json={"notes": ""},
            headers=REVIEWER,
        )
        assert blank.status_code == 422
        assert blank.json()["field"] == "notes"

        approved = client.post(
            f"/api/v1/publish-requests/{request['id']}/approve", json={}, headers=REVIEWER
        )
        assert approved.status_code == 200
        assert approved.json()["status"] == "approved"

        again = client.post(
            f"/api/v1/publish-requests/{request['id']}/approve", json={}, headers=REVIEWER
        )
        assert again.status_code == 409

        status = client.get(f"/api/v1/events/{event_id}/publish-status", headers=ORGANIZER).json()
        assert status["event_status"] == "PUBLISHED"
        assert status["requires_approval"] is True
        assert status["latest_request"]["status"] == "approved"

        history = client.get(f"/api/v1/events/{event_id}/status-history", headers=ORGANIZER)
        [entry] = history.json()["entries"]
        assert entry["previous_status"] == "DRAFT"
        assert entry["new_status"] == "PUBLISHED"

    def test_cancel_and_resubmit(self, client):
        event_id, _ = _seed(client)
        requester = UserId(uuid4())
        own = _headers(Role.ORGANIZER, user_id=requester)
        request_id = client.post(
            f"/api/v1/events/{event_id}/publish-requests", json={}, headers=own
        ).json()["id"]

        stranger = client.delete(f"/api/v1/publish-requests/{request_id}", headers=ORGANIZER)
        assert stranger.status_code == 403

        cancelled = client.delete(f"/api/v1/publish-requests/{request_id}", headers=own)
        assert cancelled.status_code == 200

        resubmitted = client.post(
            f"/api/v1/events/{event_id}/publish-requests", json={}, headers=own
        )
        assert resubmitted.status_code == 201

        status = client.get(f"/api/v1/events/{event_id}/publish-status", headers=own).json()
        assert status["event_status"] == "DRAFT"


class TestDirectStatusChanges:
    def test_publish_unpublish_and_reasoned_change(self, client):
        event_id, _ = _seed(client)

        assert client.post(f"/api/v1/events/{event_id}/publish", headers=ORGANIZER).json()[
            "status"
        ] == "PUBLISHED"
        assert client.post(f"/api/v1/events/{event_id}/unpublish", headers=ORGANIZER).json()[
            "status"
        ] == "DRAFT"
        changed = client.post(
            f"/api/v1/events/{event_id}/status",
            json={"status": "CANCELLED", "reason": "Venue unavailable"},
            headers=ORGANIZER,
        )
        assert changed.json()["status"] == "CANCELLED"

        entries = client.get(
            f"/api/v1/events/{event_id}/status-history", headers=ORGANIZER
        ).json()["entries"]
        assert len(entries) == 4
        assert any(e["reason"] == "Venue unavailable" for e in entries)
        assert {e["new_status"] for e in entries[:2]} == {"CANCELLED"}

    def test_settings_on_child_workspace_conflict(self, client):
        async def seed_team():
            engine = await client.app.state.dishka_container.get(AsyncEngine)
            async with create_session_factory(engine)() as session:
                event_id = await seed_event(session)
                team_id = await seed_workspace(session, event_id, workspace_type="TEAM")
                await session.commit()
            return team_id

        team_id = client.portal.call(seed_team)

        response = client.put(
            f"/api/v1/workspaces/{team_id}/publish-settings",
            json={"requires_approval": True},
            headers=ADMIN,
        )

        assert response.status_code == 409
