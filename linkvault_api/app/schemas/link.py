"""
Pydantic schemas for links.

Field names are snake_case in Python and camelCase on the wire
(``isPublic``), matching the keys stored in the JSON database.
Request schemas keep every field optional: presence checks happen in
``LinkService`` so that an incomplete payload is answered with 400
rather than a validation error.  Numbers sent for text fields are
accepted and stored as strings.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class LinkCreate(BaseModel):
    """Payload for ``POST /api/links``.

    ``isPublic`` is kept as the raw JSON value: only a literal
    ``false`` makes the link private.
    """

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    username: Optional[str] = Field(None, examples=["ana"])
    title: Optional[str] = Field(None, examples=["My site"])
    url: Optional[str] = Field(None, examples=["https://example.com"])
    description: Optional[str] = None
    is_public: Optional[Any] = Field(None, alias="isPublic")


class LinkUpdate(BaseModel):
    """Payload for ``PUT /api/links/{id}``.

    ``title`` and ``url`` are applied only when non-empty;
    ``description`` and ``isPublic`` are applied whenever they appear
    in the body, even if falsy.
    """

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    title: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None
    is_public: Optional[bool] = Field(None, alias="isPublic")


class LinkRead(BaseModel):
    """A stored link record."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    user: str
    title: str
    url: str
    description: Optional[str] = ""
    is_public: bool = Field(True, alias="isPublic")
    created: Optional[str] = None
    views: int = 0
    clicks: int = 0


class LinkResponse(BaseModel):
    success: bool = True
    link: LinkRead


class LinkList(BaseModel):
    links: List[LinkRead]


class LinkDeleted(BaseModel):
    success: bool = True
    message: str = "Link deleted"


class ClickResult(BaseModel):
    success: bool = True
    clicks: int
