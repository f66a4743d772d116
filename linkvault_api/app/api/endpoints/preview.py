"""
Interstitial preview page.

Shown before a visitor leaves for an external URL.  Always answers
with HTML; a missing link gets a "not found" page with status 404.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import HTMLResponse

from linkvault_api.app.api.deps import get_link_service
from linkvault_api.app.core.errors import NotFound
from linkvault_api.app.pages import render_not_found, render_preview
from linkvault_api.app.services import LinkService

router = APIRouter()


@router.get("/preview/{link_id}", response_class=HTMLResponse)
async def preview_link(
    link_id: str,
    service: LinkService = Depends(get_link_service),
) -> HTMLResponse:
    try:
        link, owner = await service.get_preview(link_id)
    except NotFound:
        return HTMLResponse(render_not_found(), status_code=status.HTTP_404_NOT_FOUND)
    return HTMLResponse(render_preview(link, owner))
