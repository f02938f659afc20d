"""Unit tests for row <-> domain mappers."""

from datetime import UTC, datetime
from uuid import uuid4

import pytest

from pubgate.domain.event.model.branding import EventBranding
from pubgate.domain.event.model.value import EventStatus
from pubgate.domain.workspace.model.value import (
    PublishRequirements,
    WorkspacePublishConfiguration,
    WorkspaceRole,
)
from pubgate.infrastructure.persistence.mappers.event import branding_from_json, row_to_event
from pubgate.infrastructure.persistence.mappers.workspace import (
    configuration_to_settings,
    row_to_workspace,
)


def _event_row(**overrides) -> dict:
    row = {
        "id": str(uuid4()),
        "name": "Meetup",
        "description": None,
        "start_date": datetime(2026, 5, 1, 18, 0),
        "end_date": None,
        "visibility": None,
        "mode": "ONLINE",
        "capacity": None,
        "branding": None,
        "landing_page_data": None,
        "landing_page_slug": None,
        "organization_id": None,
        "status": "DRAFT",
        "created_at": datetime(2026, 1, 1),
        "updated_at": datetime(2026, 1, 1),
    }
    row.update(overrides)
    return row


def _workspace_row(settings) -> dict:
    return {
        "id": str(uuid4()),
        "event_id": str(uuid4()),
        "name": "HQ",
        "workspace_type": "ROOT",
        "settings": settings,
        "updated_at": datetime(2026, 1, 1, tzinfo=UTC),
    }


class TestEventMapper:
    def test_naive_datetimes_become_utc(self):
        event = row_to_event(_event_row())

        assert event.start_date == datetime(2026, 5, 1, 18, 0, tzinfo=UTC)
        assert event.created_at.tzinfo is UTC
        assert event.status == EventStatus.DRAFT

    def test_branding_sections_parse_and_ignore_unknown_keys(self):
        branding = branding_from_json(
            {
                "seo": {"metaDescription": "x", "meta_description": "Find us", "extra": 1},
                "ticketing": {"external_registration_url": "https://t.example.com"},
                "colors": {"primary": "#fff"},
            }
        )

        assert branding.seo is not None
        assert branding.seo.has_meta_description
        assert branding.ticketing is not None
        assert branding.ticketing.has_external_registration
        assert branding.accessibility is None

    def test_malformed_section_is_treated_as_absent(self, caplog):
        branding = branding_from_json(
            {
                "accessibility": {"features": "wheelchair"},
                "seo": {"meta_description": "ok"},
            }
        )

        assert branding.accessibility is None
        assert branding.seo is not None
        assert "accessibility" in caplog.text

    def test_unsupported_version_is_treated_as_absent(self):
        branding = branding_from_json({"seo": {"version": 2, "meta_description": "v2"}})

        assert branding.seo is None

    @pytest.mark.parametrize("blob", [["legacy"], "dark-theme", 3])
    def test_non_object_branding_is_ignored(self, blob, caplog):
        branding = branding_from_json(blob)

        assert branding == EventBranding()
        assert "expected an object" in caplog.text

    def test_non_object_section_is_treated_as_absent(self):
        branding = branding_from_json({"seo": ["meta"], "ticketing": "external"})

        assert branding.seo is None
        assert branding.ticketing is None

    def test_row_with_malformed_blobs_still_maps(self):
        event = row_to_event(_event_row(branding=["legacy"], landing_page_data="<h1>old</h1>"))

        assert event.branding == EventBranding()
        assert event.landing_page_data is None
        assert event.has_landing_page is False


class TestWorkspaceMapper:
    def test_no_publish_keys_means_unconfigured(self):
        workspace = row_to_workspace(_workspace_row({"theme": "dark"}))

        assert workspace.publish_configuration is None

    def test_reads_stored_settings(self):
        workspace = row_to_workspace(
            _workspace_row(
                {
                    "requireEventPublishApproval": True,
                    "publishApprovalRoles": ["OPERATIONS_MANAGER", "NOT_A_ROLE"],
                    "publishRequirements": {"requireSEO": True, "requireLandingPage": True},
                }
            )
        )

        config = workspace.publish_configuration
        assert config is not None
        assert config.requires_approval is True
        assert config.approval_roles == [WorkspaceRole.OPERATIONS_MANAGER]
        assert config.requirements == PublishRequirements(
            require_seo=True, require_landing_page=True
        )

    def test_malformed_requirements_and_roles_read_as_unset(self):
        workspace = row_to_workspace(
            _workspace_row(
                {
                    "requireEventPublishApproval": True,
                    "publishApprovalRoles": [{"role": "OWNER"}, ["GROWTH_MANAGER"], 7],
                    "publishRequirements": ["requireSEO"],
                }
            )
        )

        config = workspace.publish_configuration
        assert config is not None
        assert config.requires_approval is True
        assert config.approval_roles == [WorkspaceRole.WORKSPACE_OWNER]
        assert config.requirements == PublishRequirements()

    def test_roles_not_a_list_fall_back_to_owner(self):
        workspace = row_to_workspace(_workspace_row({"publishApprovalRoles": "GROWTH_MANAGER"}))

        assert workspace.publish_configuration is not None
        assert workspace.publish_configuration.approval_roles == [WorkspaceRole.WORKSPACE_OWNER]

    def test_settings_not_an_object_means_unconfigured(self):
        workspace = row_to_workspace(_workspace_row(["requireEventPublishApproval"]))

        assert workspace.publish_configuration is None

    def test_only_literal_true_requires_approval(self):
        workspace = row_to_workspace(_workspace_row({"requireEventPublishApproval": "yes"}))

        assert workspace.publish_configuration is not None
        assert workspace.publish_configuration.requires_approval is False

    def test_write_merges_into_existing_settings(self):
        config = WorkspacePublishConfiguration(
            requires_approval=True,
            requirements=PublishRequirements(require_accessibility=True),
        )

        settings = configuration_to_settings(config, {"theme": "dark"})

        assert settings["theme"] == "dark"
        assert settings["requireEventPublishApproval"] is True
        assert settings["publishApprovalRoles"] == ["WORKSPACE_OWNER"]
        assert settings["publishRequirements"] == {
            "requireLandingPage": False,
            "requireTicketingConfig": False,
            "requireSEO": False,
            "requireAccessibility": True,
        }
