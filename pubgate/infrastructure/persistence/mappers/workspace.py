"""Workspace row mapping.

Publish settings live inside the workspace's shared ``settings`` JSON under
the keys other workspace tools already use, so writes merge into the blob
instead of replacing it.
"""

from typing import Any
from uuid import UUID

from pubgate.domain.event.model.value import EventId
from pubgate.domain.workspace.model.aggregate import Workspace
from pubgate.domain.workspace.model.value import (
    PublishRequirements,
    WorkspaceId,
    WorkspacePublishConfiguration,
    WorkspaceRole,
    WorkspaceType,
)
from pubgate.infrastructure.persistence.mappers.util import as_utc

REQUIRE_APPROVAL_KEY = "requireEventPublishApproval"
APPROVAL_ROLES_KEY = "publishApprovalRoles"
REQUIREMENTS_KEY = "publishRequirements"

_REQUIREMENT_KEYS = {
    "require_landing_page": "requireLandingPage",
    "require_ticketing_config": "requireTicketingConfig",
    "require_seo": "requireSEO",
    "require_accessibility": "requireAccessibility",
}


def _configuration_from_settings(
    settings: Any,
) -> WorkspacePublishConfiguration | None:
    if not isinstance(settings, dict) or not any(
        k in settings for k in (REQUIRE_APPROVAL_KEY, APPROVAL_ROLES_KEY, REQUIREMENTS_KEY)
    ):
        return None

    # Other workspace tools write this blob too; malformed values read as unset
    stored_reqs = settings.get(REQUIREMENTS_KEY)
    if not isinstance(stored_reqs, dict):
        stored_reqs = {}
    requirements = PublishRequirements(
        **{field: stored_reqs.get(key) is True for field, key in _REQUIREMENT_KEYS.items()}
    )

    stored_roles = settings.get(APPROVAL_ROLES_KEY)
    if not isinstance(stored_roles, list):
        stored_roles = []
    roles = [
        WorkspaceRole(r)
        for r in stored_roles
        if isinstance(r, str) and r in WorkspaceRole.__members__
    ] or [WorkspaceRole.WORKSPACE_OWNER]

    return WorkspacePublishConfiguration(
        requires_approval=settings.get(REQUIRE_APPROVAL_KEY) is True,
        approval_roles=roles,
        requirements=requirements,
    )


def configuration_to_settings(
    configuration: WorkspacePublishConfiguration,
    existing: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Merge publish configuration into an existing settings blob."""
    settings = dict(existing) if isinstance(existing, dict) else {}
    settings[REQUIRE_APPROVAL_KEY] = configuration.requires_approval
    settings[APPROVAL_ROLES_KEY] = [str(r) for r in configuration.approval_roles]
    settings[REQUIREMENTS_KEY] = {
        key: getattr(configuration.requirements, field)
        for field, key in _REQUIREMENT_KEYS.items()
    }
    return settings


def row_to_workspace(row: dict[str, Any]) -> Workspace:
    return Workspace(
        id=WorkspaceId(UUID(row["id"])),
        event_id=EventId(UUID(row["event_id"])),
        name=row["name"],
        workspace_type=WorkspaceType(row["workspace_type"]),
        publish_configuration=_configuration_from_settings(row.get("settings")),
        updated_at=as_utc(row["updated_at"]),
    )
