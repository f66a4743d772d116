"""
Endpoint subpackage.

Each module defines an APIRouter for one domain (auth, users, links,
preview).  The JSON routers are aggregated in ``api/router.py``; the
HTML preview router is mounted at the application root.
"""
