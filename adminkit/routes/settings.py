"""
Settings Routes

API endpoints for reading, rendering and saving AdminKit settings pages.
Pages are looked up by slug in ``app.state.adminkit_pages``.
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import HTMLResponse

from adminkit.exceptions import PageNotFoundError
from adminkit.framework import AdminKit

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Settings"])


def get_page(slug: str, request: Request) -> AdminKit:
    """Resolve the AdminKit page registered under slug."""
    pages: dict[str, AdminKit] = getattr(request.app.state, "adminkit_pages", {})
    page = pages.get(slug)
    if page is None:
        raise PageNotFoundError(slug)
    return page


@router.get("/settings/{slug}")
async def get_settings(page: AdminKit = Depends(get_page)) -> dict[str, Any]:
    """Get the stored settings of a page."""
    return page.get_settings()


@router.get("/settings/{slug}/structure")
async def get_structure(page: AdminKit = Depends(get_page)) -> dict[str, Any]:
    """Get the page's tabs, sections and field ids."""
    fields = page.get_content_fields()
    return {
        "title": page.title,
        "tabs": {
            tab_key: {
                "title": title,
                "display_mode": page.get_section_display_mode(tab_key),
                "sections": page.get_sections(tab_key),
                "fields": [d.id for d in fields.get(tab_key, []) if d.id],
            }
            for tab_key, title in page.get_tabs().items()
        },
    }


@router.get("/settings/{slug}/form", response_class=HTMLResponse)
async def render_settings_form(
    page: AdminKit = Depends(get_page),
    tab: str | None = None,
    section: str | None = None,
) -> HTMLResponse:
    """
    Render the fields of one section as HTML.

    Unknown or missing tab/section fall back to the first one.
    """
    active_tab = page.get_active_tab(tab)
    active_section = page.get_active_section(active_tab, section) or None
    return HTMLResponse(str(page.render_section(active_tab, active_section)))


@router.put("/settings/{slug}")
async def update_settings(
    data: dict[str, Any] = Body(...),
    page: AdminKit = Depends(get_page),
) -> dict[str, Any]:
    """
    Save a page's settings.

    The submitted mapping is sanitized and validated field by field; the
    first invalid field aborts the save with a 400 response.
    """
    settings = page.save_settings(data)
    logger.info("Settings page %s updated: %s", page.slug, sorted(data))
    return {"message": "Settings saved successfully", "settings": settings}
