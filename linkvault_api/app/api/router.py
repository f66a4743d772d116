"""
Top‑level router for the JSON API.

Aggregates domain routers under their prefixes; ``main.create_app``
mounts the result under ``/api``.
"""

from fastapi import APIRouter

from .endpoints import auth, links, users

router = APIRouter()

router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(links.router, prefix="/links", tags=["links"])
