"""Readiness rule engine.

Turns an event's current configuration into an ordered publish checklist.
Everything here is pure: no I/O, no clock reads unless ``now`` is omitted.

Basic checks come first, then event-space checks, each in a fixed order.
Item status follows one policy: a satisfied check passes, an unsatisfied
required check fails, an unsatisfied optional check warns.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, datetime

from pubgate.domain.event.model.aggregate import Event
from pubgate.domain.readiness.model.value import (
    CheckCategory,
    ChecklistItem,
    ChecklistResult,
    CheckStatus,
    PromoCode,
)
from pubgate.domain.shared.error import InputError
from pubgate.domain.workspace.model.value import (
    PublishRequirements,
    WorkspacePublishConfiguration,
)


@dataclass(frozen=True)
class ReadinessInput:
    event: Event
    requirements: PublishRequirements
    has_root_workspace: bool
    ticket_tier_count: int
    promo_codes: Sequence[PromoCode]
    now: datetime


def status_for(ok: bool, required: bool) -> CheckStatus:
    if ok:
        return CheckStatus.PASS
    return CheckStatus.FAIL if required else CheckStatus.WARNING


def _item(
    id: str,
    label: str,
    description: str,
    category: CheckCategory,
    *,
    ok: bool,
    required: bool,
) -> ChecklistItem:
    return ChecklistItem(
        id=id,
        label=label,
        description=description,
        category=category,
        required=required,
        status=status_for(ok, required),
    )


def _filled(value: str | None) -> bool:
    return bool(value and value.strip())


def _basic_checks(inp: ReadinessInput) -> list[ChecklistItem]:
    event = inp.event
    start = event.start_date
    if start is not None and start.tzinfo is None:
        start = start.replace(tzinfo=UTC)

    return [
        _item(
            "basic-info",
            "Basic Information",
            "Event name and description are configured",
            CheckCategory.BASIC,
            ok=_filled(event.name) and _filled(event.description),
            required=True,
        ),
        _item(
            "dates",
            "Event Dates",
            "Start and end dates are set",
            CheckCategory.BASIC,
            ok=event.start_date is not None and event.end_date is not None,
            required=True,
        ),
        _item(
            "future-date",
            "Event Date Valid",
            "Event start date is in the future",
            CheckCategory.BASIC,
            ok=start is None or start >= inp.now,
            required=False,
        ),
        _item(
            "root-workspace",
            "ROOT Workspace",
            "A ROOT workspace exists for the event",
            CheckCategory.BASIC,
            ok=inp.has_root_workspace,
            required=True,
        ),
        _item(
            "visibility",
            "Event Visibility",
            "Event visibility is configured",
            CheckCategory.BASIC,
            ok=event.visibility is not None,
            required=False,
        ),
        _item(
            "capacity",
            "Capacity Limit",
            "Event capacity is defined",
            CheckCategory.BASIC,
            ok=bool(event.capacity and event.capacity > 0),
            required=False,
        ),
    ]


def _event_space_checks(inp: ReadinessInput) -> list[ChecklistItem]:
    event = inp.event
    reqs = inp.requirements
    branding = event.branding

    ticketing_ok = inp.ticket_tier_count > 0 or (
        branding.ticketing is not None and branding.ticketing.has_external_registration
    )
    seo_ok = branding.seo is not None and branding.seo.has_meta_description
    accessibility_ok = branding.accessibility is not None and branding.accessibility.is_configured

    items = [
        _item(
            "landing-page",
            "Landing Page",
            "A landing page has been designed for the event",
            CheckCategory.EVENT_SPACE,
            ok=event.has_landing_page,
            required=reqs.require_landing_page,
        ),
        _item(
            "ticketing",
            "Ticketing & Registration",
            "At least one ticket tier or an external registration link is configured",
            CheckCategory.EVENT_SPACE,
            ok=ticketing_ok,
            required=reqs.require_ticketing_config,
        ),
        _item(
            "seo",
            "SEO Settings",
            "A meta description is set for search engines",
            CheckCategory.EVENT_SPACE,
            ok=seo_ok,
            required=reqs.require_seo,
        ),
        _item(
            "accessibility",
            "Accessibility",
            "Accessibility features or notes are configured",
            CheckCategory.EVENT_SPACE,
            ok=accessibility_ok,
            required=reqs.require_accessibility,
        ),
    ]

    if inp.promo_codes:
        active = sum(1 for p in inp.promo_codes if p.is_active)
        items.append(
            _item(
                "promo-codes",
                "Promo Codes",
                f"{active} of {len(inp.promo_codes)} promo code(s) active",
                CheckCategory.EVENT_SPACE,
                ok=active > 0,
                required=False,
            )
        )

    return items


def completion_percentage(items: Sequence[ChecklistItem]) -> int:
    if not items:
        return 0
    passed = sum(1 for i in items if i.status == CheckStatus.PASS)
    # Half-up, not banker's rounding
    return math.floor(100 * passed / len(items) + 0.5)


def evaluate(
    event: Event | None,
    workspace_config: WorkspacePublishConfiguration,
    ticket_tier_count: int = 0,
    promo_codes: Sequence[PromoCode] = (),
    *,
    has_root_workspace: bool = True,
    now: datetime | None = None,
) -> ChecklistResult:
    """Build the publish checklist for an event.

    Args:
        event: The event record. ``None`` means the reference could not be
            resolved and raises InputError.
        workspace_config: Publish configuration of the root workspace, or the
            node defaults when there is none.
        ticket_tier_count: Number of ticket tiers defined for the event.
        promo_codes: Promo codes of the event; the promo-code item is only
            listed when this is non-empty.
        has_root_workspace: Whether the event has a ROOT workspace.
        now: Reference time for the future-date check (defaults to UTC now).
    """
    if event is None:
        raise InputError("Event could not be resolved for readiness evaluation")

    inp = ReadinessInput(
        event=event,
        requirements=workspace_config.requirements,
        has_root_workspace=has_root_workspace,
        ticket_tier_count=ticket_tier_count,
        promo_codes=promo_codes,
        now=now or datetime.now(UTC),
    )
    items = _basic_checks(inp) + _event_space_checks(inp)

    can_publish = not any(i.required and i.status == CheckStatus.FAIL for i in items)
    return ChecklistResult(
        items=items,
        can_publish=can_publish,
        completion_percentage=completion_percentage(items),
    )
