"""
Analytics Module

Google Analytics 4 or Google Tag Manager integration. Which ID field is shown
(and required) depends on the selected analytics type.
"""

from __future__ import annotations

import logging
from typing import Any

from adminkit.modules.base import ModuleBase, ModuleMeta

logger = logging.getLogger(__name__)

SECTION = "analytics"

ANALYTICS_TYPES = {
    "ga4": "Google Analytics 4 (GA4) - Recommended",
    "gtm": "Google Tag Manager (GTM)",
}

_META = ModuleMeta(
    slug="analytics",
    name="Analytics",
    version="1.0.0",
    description="Add Google Analytics 4 or Google Tag Manager tracking with privacy controls.",
    category="marketing",
    defaults={
        "analytics_type": "ga4",
        "analytics_ga4_id": "",
        "analytics_gtm_id": "",
        "analytics_respect_dnt": True,
        "analytics_consent_mode": True,
        "analytics_track_events": [],
    },
)


class AnalyticsModule(ModuleBase):
    @property
    def meta(self) -> ModuleMeta:
        return _META

    def get_admin_structure(self) -> dict[str, Any]:
        return {SECTION: {"title": "Analytics"}}

    def get_field_definitions(self) -> list[dict[str, Any]]:
        return [
            {
                "id": "analytics_type",
                "name": "Analytics Type",
                "desc": "Choose your preferred analytics implementation",
                "type": "select",
                "section": SECTION,
                "options": ANALYTICS_TYPES,
                "std": "ga4",
            },
            {
                "id": "analytics_ga4_id",
                "name": "GA4 Measurement ID",
                "desc": "Your GA4 Measurement ID (e.g., G-XXXXXXXXXX)",
                "type": "text",
                "section": SECTION,
                "placeholder": "G-XXXXXXXXXX",
                "required": True,
                "max_length": 20,
                "show_if": {"field": "analytics_type", "operator": "===", "value": "ga4"},
            },
            {
                "id": "analytics_gtm_id",
                "name": "GTM Container ID",
                "desc": "Your Google Tag Manager Container ID (e.g., GTM-XXXXXXX)",
                "type": "text",
                "section": SECTION,
                "placeholder": "GTM-XXXXXXX",
                "required": True,
                "max_length": 20,
                "show_if": {"field": "analytics_type", "operator": "===", "value": "gtm"},
            },
            {
                "id": "analytics_gtm_notice",
                "name": "Google Tag Manager Configuration",
                "type": "html",
                "section": SECTION,
                "std": (
                    "<p><strong>Note:</strong> With GTM, structured dataLayer events are pushed for "
                    "downloads, outbound links, scroll tracking and form submissions. Configure "
                    "triggers and GA4 tags in your GTM container to use this data.</p>"
                ),
                "show_if": {"field": "analytics_type", "operator": "===", "value": "gtm"},
            },
            {
                "id": "analytics_respect_dnt",
                "name": "Respect Do Not Track",
                "desc": "Honor browser Do Not Track settings (applies to all types)",
                "type": "checkbox",
                "section": SECTION,
                "std": True,
            },
            {
                "id": "analytics_consent_mode",
                "name": "Enable Consent Mode v2",
                "desc": "Sets default deny state until the user grants consent (GA4 and GTM only)",
                "type": "checkbox",
                "section": SECTION,
                "std": True,
                "show_if": {"field": "analytics_type", "operator": "in", "value": ["ga4", "gtm"]},
            },
            {
                "id": "analytics_track_events",
                "name": "Tracked Events",
                "desc": "Interactions pushed as custom events",
                "type": "checkbox",
                "section": SECTION,
                "options": {
                    "downloads": "File downloads",
                    "outbound": "Outbound links",
                    "scroll": "Scroll depth",
                    "forms": "Form submissions",
                },
                "max_selections": 4,
            },
        ]
