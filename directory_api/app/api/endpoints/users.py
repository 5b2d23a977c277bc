"""
User endpoints.

``GET /user`` lists every record in the directory and
``GET /user/{username}`` returns the first record whose first or last
name matches ``username``, ignoring case.  A miss raises
``UserNotFound``, which the application turns into a plain‑text 404.
"""

from typing import List

from fastapi import APIRouter, Depends

from directory_api.app.api.deps import get_store
from directory_api.app.schemas.user import UserRecord
from directory_api.app.services.record_store import RecordStore

router = APIRouter()


@router.get("", response_model=List[UserRecord])
async def list_users(store: RecordStore = Depends(get_store)) -> List[UserRecord]:
    """Return all users in insertion order."""
    return store.list_all()


@router.get("/{username}", response_model=UserRecord)
async def get_user(username: str, store: RecordStore = Depends(get_store)) -> UserRecord:
    """Return the first user matching ``username``."""
    _, user = store.find_by_name(username)
    return user
