"""
Service layer abstraction.

Each service encapsulates business logic for a domain and works on a
``JsonStore`` handed to it by the caller, so the storage can be
swapped (or isolated in tests) without changing API handlers.
"""

from .link_service import LinkService
from .user_service import UserService, normalize_username

__all__ = ["LinkService", "UserService", "normalize_username"]
