"""Typed branding configuration consumed by the readiness checks.

Each category is a closed record tagged with a schema version. Keys the
record does not know about are dropped on load, so older or richer blobs
stored by other tools still parse.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class _BrandingSection(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class TicketingConfig(_BrandingSection):
    version: Literal[1] = 1
    registration_enabled: bool = False
    external_registration_url: str | None = None
    currency: str | None = None

    @property
    def has_external_registration(self) -> bool:
        return bool(self.external_registration_url and self.external_registration_url.strip())


class SeoConfig(_BrandingSection):
    version: Literal[1] = 1
    title: str | None = None
    meta_description: str | None = None
    keywords: list[str] = Field(default_factory=list)
    og_image_url: str | None = None

    @property
    def has_meta_description(self) -> bool:
        return bool(self.meta_description and self.meta_description.strip())


class AccessibilityConfig(_BrandingSection):
    version: Literal[1] = 1
    features: list[str] = Field(default_factory=list)  # e.g. ["wheelchair", "captions"]
    language: str | None = None
    notes: str | None = None

    @property
    def is_configured(self) -> bool:
        return bool(self.features) or bool(self.notes and self.notes.strip())


class EventBranding(_BrandingSection):
    ticketing: TicketingConfig | None = None
    seo: SeoConfig | None = None
    accessibility: AccessibilityConfig | None = None
