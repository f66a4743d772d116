"""
User endpoints.

The profile route is the public page of a user and only lists public
links; ``/{username}/links`` lists every link of the user, private
ones included, and does not require the user to exist.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from linkvault_api.app.api.deps import get_link_service, get_user_service
from linkvault_api.app.core.errors import NotFound
from linkvault_api.app.schemas.link import LinkList
from linkvault_api.app.schemas.user import UserProfile, UserUpdate, UserUpdateResponse
from linkvault_api.app.services import LinkService, UserService

router = APIRouter()


@router.get("/{username}", response_model=UserProfile)
async def get_profile(
    username: str,
    service: UserService = Depends(get_user_service),
) -> UserProfile:
    try:
        return await service.get_profile(username)
    except NotFound as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.message)


@router.put("/{username}", response_model=UserUpdateResponse)
async def update_profile(
    username: str,
    payload: UserUpdate,
    service: UserService = Depends(get_user_service),
) -> UserUpdateResponse:
    """Update ``fullName``, ``bio`` and/or ``avatar``."""
    try:
        user = await service.update_profile(username, payload)
    except NotFound as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.message)
    return UserUpdateResponse(user=user)


@router.get("/{username}/links", response_model=LinkList)
async def list_user_links(
    username: str,
    service: LinkService = Depends(get_link_service),
) -> LinkList:
    return LinkList(links=await service.list_user_links(username))
