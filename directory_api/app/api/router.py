"""
Top‑level router.

Aggregates the domain routers under their path prefixes.  Static file
mounts are not routes and are added by ``main.create_app``.
"""

from fastapi import APIRouter

from .endpoints import cities, home, users

router = APIRouter()

router.include_router(home.router, tags=["home"])
router.include_router(users.router, prefix="/user", tags=["users"])
router.include_router(cities.router, prefix="/city", tags=["cities"])
