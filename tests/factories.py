"""Builders shared across test modules."""

from datetime import UTC, datetime, timedelta
from typing import Any, Iterable
from uuid import uuid4

import jwt

from pubgate.domain.auth.model.principal import Principal
from pubgate.domain.auth.model.role import Role
from pubgate.domain.auth.model.value import UserId
from pubgate.domain.event.model.aggregate import Event
from pubgate.domain.event.model.branding import EventBranding
from pubgate.domain.event.model.value import EventId, EventVisibility
from pubgate.domain.shared.uow import UnitOfWork
from pubgate.domain.workspace.model.aggregate import Workspace
from pubgate.domain.workspace.model.value import WorkspaceId, WorkspaceType

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)


def make_event(**overrides: Any) -> Event:
    """An event that passes every basic check relative to NOW."""
    defaults: dict[str, Any] = {
        "id": EventId(uuid4()),
        "name": "Spring Hackathon",
        "description": "48 hours of building",
        "start_date": NOW + timedelta(days=30),
        "end_date": NOW + timedelta(days=32),
        "visibility": EventVisibility.PUBLIC,
        "capacity": 200,
        "branding": EventBranding(),
    }
    defaults.update(overrides)
    return Event(**defaults)


def make_workspace(event_id: EventId, **overrides: Any) -> Workspace:
    defaults: dict[str, Any] = {
        "id": WorkspaceId(uuid4()),
        "event_id": event_id,
        "name": "Spring Hackathon HQ",
        "workspace_type": WorkspaceType.ROOT,
    }
    defaults.update(overrides)
    return Workspace(**defaults)


def make_token(
    secret: str,
    user_id: UserId | None = None,
    roles: Iterable[Role | str] = (),
    *,
    sub: str | None = None,
    expires_in: timedelta = timedelta(minutes=5),
    audience: str = "authenticated",
) -> str:
    """An HS256 bearer token shaped like the ones the platform issues."""
    payload = {
        "sub": sub or str(user_id or UserId(uuid4())),
        "roles": [r.name if isinstance(r, Role) else r for r in roles],
        "aud": audience,
        "exp": datetime.now(UTC) + expires_in,
    }
    return jwt.encode(payload, secret, algorithm="HS256")


def make_principal(*roles: Role, user_id: UserId | None = None) -> Principal:
    return Principal(
        user_id=user_id or UserId(uuid4()),
        roles=frozenset(roles),
    )


class FakeUnitOfWork(UnitOfWork):
    """Records commits and rollbacks instead of touching a database."""

    def __init__(self) -> None:
        self.commits = 0
        self.rollbacks = 0

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        self.rollbacks += 1
