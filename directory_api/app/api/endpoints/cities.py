"""
City endpoint.

``GET /city/{city}`` accepts a city code (``jkt``) or one of the known
full city names (``jakarta``) and returns the matching users in
insertion order.
"""

from typing import List

from fastapi import APIRouter, Depends

from directory_api.app.api.deps import get_store
from directory_api.app.schemas.user import UserRecord
from directory_api.app.services.record_store import RecordStore

router = APIRouter()


@router.get("/{city}", response_model=List[UserRecord])
async def users_by_city(city: str, store: RecordStore = Depends(get_store)) -> List[UserRecord]:
    """Return the users of a city code or city name."""
    return store.find_by_city(city)
