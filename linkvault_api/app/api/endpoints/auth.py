"""
Login endpoint.

There are no passwords: logging in with an unknown username registers
it.  The response carries the public user fields only.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from linkvault_api.app.api.deps import get_user_service
from linkvault_api.app.core.errors import InvalidInput
from linkvault_api.app.schemas.user import LoginRequest, LoginResponse
from linkvault_api.app.services import UserService

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
async def login(
    payload: LoginRequest,
    service: UserService = Depends(get_user_service),
) -> LoginResponse:
    """Log in as ``username``, registering it on first use."""
    try:
        user = await service.login_or_register(payload.username)
    except InvalidInput as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message)
    return LoginResponse(user=user)
