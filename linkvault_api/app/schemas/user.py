"""
Pydantic models for user data.

A user is identified by a lowercased username and carries only
display fields; there are no credentials.  Wire names are camelCase
(``fullName``, ``totalViews``) to match the stored records.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .link import LinkRead


class LoginRequest(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    username: Optional[str] = Field(None, examples=["Ana"])


class UserPublic(BaseModel):
    """Fields of a user that are shown to anyone."""

    model_config = ConfigDict(populate_by_name=True)

    username: str
    full_name: Optional[str] = Field("", alias="fullName")
    bio: Optional[str] = ""
    avatar: Optional[str] = ""
    total_views: int = Field(0, alias="totalViews")


class UserRead(UserPublic):
    """Full user record, including the creation timestamp."""

    created: Optional[str] = None


class UserUpdate(BaseModel):
    """Payload for ``PUT /api/users/{username}``.

    ``fullName`` and ``avatar`` are applied only when non-empty, while
    ``bio`` is applied whenever it is present in the body, so an empty
    string clears it.
    """

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    full_name: Optional[str] = Field(None, alias="fullName")
    bio: Optional[str] = None
    avatar: Optional[str] = None


class LoginResponse(BaseModel):
    success: bool = True
    user: UserPublic


class UserUpdateResponse(BaseModel):
    success: bool = True
    user: UserRead


class UserProfile(BaseModel):
    """Public profile page: the user and their public links."""

    model_config = ConfigDict(populate_by_name=True)

    user: UserPublic
    links: List[LinkRead]
    link_count: int = Field(..., alias="linkCount")
