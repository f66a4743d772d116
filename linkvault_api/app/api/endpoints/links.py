"""
Link endpoints.

CRUD over links plus click registration.  Fetching a single link by
id counts as a view, so ``GET /{link_id}`` is not read-only.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from linkvault_api.app.api.deps import get_link_service
from linkvault_api.app.core.errors import InvalidInput, NotFound
from linkvault_api.app.schemas.link import (
    ClickResult,
    LinkCreate,
    LinkDeleted,
    LinkRead,
    LinkResponse,
    LinkUpdate,
)
from linkvault_api.app.services import LinkService

router = APIRouter()


@router.post("", response_model=LinkResponse)
async def create_link(
    payload: LinkCreate,
    service: LinkService = Depends(get_link_service),
) -> LinkResponse:
    """Create a link; ``username``, ``title`` and ``url`` are required."""
    try:
        link = await service.create_link(payload)
    except InvalidInput as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message)
    return LinkResponse(link=link)


@router.get("/{link_id}", response_model=LinkRead)
async def get_link(
    link_id: str,
    service: LinkService = Depends(get_link_service),
) -> LinkRead:
    try:
        return await service.get_link(link_id)
    except NotFound as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.message)


@router.put("/{link_id}", response_model=LinkResponse)
async def update_link(
    link_id: str,
    payload: LinkUpdate,
    service: LinkService = Depends(get_link_service),
) -> LinkResponse:
    try:
        link = await service.update_link(link_id, payload)
    except NotFound as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.message)
    return LinkResponse(link=link)


@router.delete("/{link_id}", response_model=LinkDeleted)
async def delete_link(
    link_id: str,
    service: LinkService = Depends(get_link_service),
) -> LinkDeleted:
    try:
        await service.delete_link(link_id)
    except NotFound as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.message)
    return LinkDeleted()


@router.post("/{link_id}/click", response_model=ClickResult)
async def register_click(
    link_id: str,
    service: LinkService = Depends(get_link_service),
) -> ClickResult:
    """Record a click-through from the preview page."""
    try:
        clicks = await service.register_click(link_id)
    except NotFound as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.message)
    return ClickResult(clicks=clicks)
