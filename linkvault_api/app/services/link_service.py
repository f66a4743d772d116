"""
Business logic for links.

Every mutating call runs inside ``JsonStore.transaction`` so the
change is persisted before the method returns.  Note that
``get_link`` is a mutation too: each fetch by id counts as a view.
"""

import logging
import uuid
from typing import List, Optional, Tuple

from linkvault_api.app.core.errors import InvalidInput, NotFound
from linkvault_api.app.core.store import JsonStore, utc_timestamp
from linkvault_api.app.schemas.link import LinkCreate, LinkRead, LinkUpdate
from linkvault_api.app.schemas.user import UserRead
from linkvault_api.app.services.user_service import normalize_username

logger = logging.getLogger(__name__)


def generate_link_id() -> str:
    return str(uuid.uuid4())


class LinkService:
    """Operations on link records held by a ``JsonStore``."""

    def __init__(self, store: JsonStore) -> None:
        self.store = store

    async def create_link(self, data: LinkCreate) -> LinkRead:
        """Create a link owned by ``data.username``.

        The owner is not required to exist.  ``isPublic`` defaults to
        true unless the payload carries exactly ``false``.
        """
        owner = normalize_username(data.username)
        if not owner or not data.title or not data.url:
            raise InvalidInput("username, title and url are required")
        link = {
            "id": generate_link_id(),
            "user": owner,
            "title": data.title,
            "url": data.url,
            "description": data.description or "",
            "isPublic": data.is_public is not False,
            "created": utc_timestamp(),
            "views": 0,
            "clicks": 0,
        }
        with self.store.transaction() as store:
            store.links[link["id"]] = link
        logger.info("Created link %s for %s", link["id"], owner)
        return LinkRead.model_validate(link)

    async def list_user_links(self, username: str) -> List[LinkRead]:
        """Return every link (public or private) owned by ``username``."""
        owner = normalize_username(username)
        return [
            LinkRead.model_validate(link)
            for link in list(self.store.links.values())
            if link.get("user") == owner
        ]

    async def get_link(self, link_id: str) -> LinkRead:
        """Return a link and count the fetch as a view."""
        with self.store.transaction() as store:
            link = store.links.get(link_id)
            if link is None:
                raise NotFound("Link not found")
            link["views"] = link.get("views", 0) + 1
            return LinkRead.model_validate(link)

    async def get_preview(self, link_id: str) -> Tuple[LinkRead, Optional[UserRead]]:
        """Return a link and its owner without touching any counter.

        The owner is ``None`` when the link references a user that
        does not exist.
        """
        link = self.store.links.get(link_id)
        if link is None:
            raise NotFound("Link not found")
        owner = self.store.users.get(link.get("user", ""))
        return (
            LinkRead.model_validate(link),
            UserRead.model_validate(owner) if owner is not None else None,
        )

    async def update_link(self, link_id: str, data: LinkUpdate) -> LinkRead:
        fields_set = data.model_fields_set
        with self.store.transaction() as store:
            link = store.links.get(link_id)
            if link is None:
                raise NotFound("Link not found")
            if data.title:
                link["title"] = data.title
            if data.url:
                link["url"] = data.url
            if "description" in fields_set:
                link["description"] = data.description or ""
            if "is_public" in fields_set:
                link["isPublic"] = bool(data.is_public)
            logger.info("Updated link %s", link_id)
            return LinkRead.model_validate(link)

    async def delete_link(self, link_id: str) -> None:
        with self.store.transaction() as store:
            if store.links.pop(link_id, None) is None:
                raise NotFound("Link not found")
        logger.info("Deleted link %s", link_id)

    async def register_click(self, link_id: str) -> int:
        """Count a click-through and return the new click count.

        The owner's ``totalViews`` grows with it; a missing owner is
        skipped silently.
        """
        with self.store.transaction() as store:
            link = store.links.get(link_id)
            if link is None:
                raise NotFound("Link not found")
            link["clicks"] = link.get("clicks", 0) + 1
            owner = store.users.get(link.get("user", ""))
            if owner is not None:
                owner["totalViews"] = owner.get("totalViews", 0) + 1
            return link["clicks"]
