"""
Business logic for users.

Users are created on first login and never deleted.  There is no
password: the username alone identifies the account, and it is
normalised (trimmed, lowercased) before every lookup.
"""

import logging
from typing import Optional

from linkvault_api.app.core.errors import InvalidInput, NotFound
from linkvault_api.app.core.store import JsonStore, utc_timestamp
from linkvault_api.app.schemas.link import LinkRead
from linkvault_api.app.schemas.user import UserProfile, UserPublic, UserRead, UserUpdate

logger = logging.getLogger(__name__)


def normalize_username(username: Optional[str]) -> str:
    """Return the storage key for ``username`` (``""`` for ``None``)."""
    return (username or "").strip().lower()


class UserService:
    """Operations on user records held by a ``JsonStore``."""

    def __init__(self, store: JsonStore, default_avatar: str = "👤") -> None:
        self.store = store
        self.default_avatar = default_avatar

    async def login_or_register(self, username: Optional[str]) -> UserPublic:
        """Return the user for ``username``, creating it on first use.

        The display name of a new user is the username exactly as
        typed.  An existing user is returned untouched.
        """
        key = normalize_username(username)
        if not key:
            raise InvalidInput("Username is required")
        if key not in self.store.users:
            with self.store.transaction() as store:
                # Re-check under the lock; another request may have won.
                if key not in store.users:
                    store.users[key] = {
                        "username": key,
                        "fullName": username,
                        "bio": "",
                        "avatar": self.default_avatar,
                        "totalViews": 0,
                        "created": utc_timestamp(),
                    }
                    logger.info("Registered user %s", key)
        return UserPublic.model_validate(self.store.users[key])

    async def get_profile(self, username: str) -> UserProfile:
        """Return the user with their public links."""
        key = normalize_username(username)
        user = self.store.users.get(key)
        if user is None:
            raise NotFound("User not found")
        links = [
            LinkRead.model_validate(link)
            for link in list(self.store.links.values())
            if link.get("user") == key and link.get("isPublic") is True
        ]
        return UserProfile(
            user=UserPublic.model_validate(user),
            links=links,
            link_count=len(links),
        )

    async def update_profile(self, username: str, data: UserUpdate) -> UserRead:
        """Update display fields of an existing user."""
        key = normalize_username(username)
        with self.store.transaction() as store:
            user = store.users.get(key)
            if user is None:
                raise NotFound("User not found")
            if data.full_name:
                user["fullName"] = data.full_name
            if "bio" in data.model_fields_set:
                user["bio"] = data.bio or ""
            if data.avatar:
                user["avatar"] = data.avatar
            logger.info("Updated profile of %s", key)
            return UserRead.model_validate(user)
