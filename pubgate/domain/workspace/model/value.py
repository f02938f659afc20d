from enum import StrEnum
from uuid import UUID, uuid4

from pydantic import Field, RootModel, field_validator

from pubgate.domain.shared.model.value import ValueObject


class WorkspaceId(RootModel[UUID]):
    """Unique identifier for a Workspace."""

    @classmethod
    def generate(cls) -> "WorkspaceId":
        return cls(uuid4())

    def __str__(self) -> str:
        return str(self.root)

    def __hash__(self) -> int:
        return hash(self.root)


class WorkspaceType(StrEnum):
    ROOT = "ROOT"
    DEPARTMENT = "DEPARTMENT"
    COMMITTEE = "COMMITTEE"
    TEAM = "TEAM"


class WorkspaceRole(StrEnum):
    """Workspace manager roles that may be allowed to approve publish requests."""

    WORKSPACE_OWNER = "WORKSPACE_OWNER"
    OPERATIONS_MANAGER = "OPERATIONS_MANAGER"
    GROWTH_MANAGER = "GROWTH_MANAGER"
    TECH_FINANCE_MANAGER = "TECH_FINANCE_MANAGER"


class PublishRequirements(ValueObject):
    """Which event-space checks block publishing for a workspace."""

    require_landing_page: bool = False
    require_ticketing_config: bool = False
    require_seo: bool = False
    require_accessibility: bool = False


class WorkspacePublishConfiguration(ValueObject):
    requires_approval: bool = False
    approval_roles: list[WorkspaceRole] = Field(
        default_factory=lambda: [WorkspaceRole.WORKSPACE_OWNER]
    )
    requirements: PublishRequirements = Field(default_factory=PublishRequirements)

    @field_validator("approval_roles")
    @classmethod
    def at_least_one_role(cls, v: list[WorkspaceRole]) -> list[WorkspaceRole]:
        if not v:
            raise ValueError("At least one approval role is required")
        # Keep order stable but drop duplicates
        return list(dict.fromkeys(v))
