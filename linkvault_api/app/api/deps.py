"""
FastAPI dependencies.

The store lives on ``app.state`` (set up by ``main.create_app``);
services are built per request around it.
"""

from fastapi import Depends, Request

from linkvault_api.app.core.config import Settings
from linkvault_api.app.core.store import JsonStore
from linkvault_api.app.services import LinkService, UserService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> JsonStore:
    return request.app.state.store


def get_user_service(
    store: JsonStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> UserService:
    return UserService(store, default_avatar=settings.default_avatar)


def get_link_service(store: JsonStore = Depends(get_store)) -> LinkService:
    return LinkService(store)
