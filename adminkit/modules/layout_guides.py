"""
Layout Guides Module

Development overlay: grid columns, baseline grid, rulers and spacing
highlights, toggled with a keyboard shortcut.
"""

from __future__ import annotations

import logging
from typing import Any

from adminkit.modules.base import ModuleBase, ModuleMeta

logger = logging.getLogger(__name__)

SECTION = "layout_guides"

_PREVIEW_HTML = """
<div class="layout-guides-settings-preview">
  <div class="layout-guides-settings-preview__header">
    <h3>Layout Guides Preview</h3>
    <p>Visual debugging tools to help with layout development and alignment.</p>
  </div>
  <ul class="layout-guides-settings-preview__features">
    <li>Grid overlay with customizable columns</li>
    <li>Baseline grid for typography alignment</li>
    <li>Rulers for precise measurements</li>
    <li>Keyboard shortcuts for quick toggling</li>
  </ul>
</div>
"""

_META = ModuleMeta(
    slug="layout_guides",
    name="Layout Guides",
    version="1.0.0",
    description="Development tool that adds visual layout guides and debugging helpers for theme development.",
    category="development",
    defaults={
        "layout_guides_enabled": False,
        "layout_guides_show_grid": True,
        "layout_guides_show_baseline": True,
        "layout_guides_show_rulers": True,
        "layout_guides_grid_columns": 12,
        "layout_guides_grid_gutter": 20,
        "layout_guides_baseline_height": 24,
        "layout_guides_opacity": 0.3,
        "layout_guides_color": "#ff0000",
        "layout_guides_toggle_key": "ctrl+shift+g",
    },
)


class LayoutGuidesModule(ModuleBase):
    @property
    def meta(self) -> ModuleMeta:
        return _META

    async def on_load(self, settings: dict[str, Any]) -> None:
        await super().on_load(settings)
        logger.debug(
            "LayoutGuidesModule loaded (grid_columns=%s)",
            settings.get("layout_guides_grid_columns", 12),
        )

    def get_admin_structure(self) -> dict[str, Any]:
        return {SECTION: "Layout Guides"}

    def get_field_definitions(self) -> list[dict[str, Any]]:
        return [
            {
                "id": "layout_guides_preview",
                "type": "html",
                "std": _PREVIEW_HTML,
                "section": SECTION,
            },
            {
                "id": "layout_guides_show_grid",
                "name": "Show Grid",
                "desc": "Display grid overlay for layout alignment.",
                "type": "checkbox",
                "std": True,
                "section": SECTION,
            },
            {
                "id": "layout_guides_show_baseline",
                "name": "Show Baseline Grid",
                "desc": "Display horizontal baseline grid for typography alignment.",
                "type": "checkbox",
                "std": True,
                "section": SECTION,
            },
            {
                "id": "layout_guides_show_rulers",
                "name": "Show Rulers",
                "desc": "Display measurement rulers on page edges.",
                "type": "checkbox",
                "std": True,
                "section": SECTION,
            },
            {
                "id": "layout_guides_grid_columns",
                "name": "Grid Columns",
                "desc": "Number of columns in the grid overlay.",
                "type": "number",
                "std": 12,
                "min": 1,
                "max": 24,
                "section": SECTION,
            },
            {
                "id": "layout_guides_grid_gutter",
                "name": "Grid Gutter (px)",
                "desc": "Space between grid columns in pixels.",
                "type": "number",
                "std": 20,
                "min": 0,
                "max": 100,
                "section": SECTION,
            },
            {
                "id": "layout_guides_baseline_height",
                "name": "Baseline Height (px)",
                "desc": "Height of baseline grid lines in pixels.",
                "type": "number",
                "std": 24,
                "min": 8,
                "max": 48,
                "section": SECTION,
            },
            {
                "id": "layout_guides_opacity",
                "name": "Guide Opacity",
                "desc": "Opacity of layout guides (0.1 = very transparent, 1.0 = fully opaque).",
                "type": "number",
                "std": 0.3,
                "min": 0.1,
                "max": 1.0,
                "step": "0.1",
                "section": SECTION,
            },
            {
                "id": "layout_guides_color",
                "name": "Guide Color",
                "desc": "Color of the layout guides.",
                "type": "text",
                "std": "#ff0000",
                "max_length": 7,
                "section": SECTION,
            },
            {
                "id": "layout_guides_toggle_key",
                "name": "Toggle Keyboard Shortcut",
                "desc": "Keyboard shortcut to toggle guides on/off.",
                "type": "select",
                "std": "ctrl+shift+g",
                "options": {
                    "ctrl+shift+g": "Ctrl+Shift+G",
                    "ctrl+shift+l": "Ctrl+Shift+L",
                    "alt+shift+g": "Alt+Shift+G",
                    "alt+shift+l": "Alt+Shift+L",
                },
                "section": SECTION,
            },
        ]
