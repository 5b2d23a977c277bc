"""
Home endpoint.

Answers ``GET /`` with a fixed greeting so that load balancers and
humans can check that the service is up.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()

HOME_TEXT = "Bismillah Home"


@router.get("/", response_class=PlainTextResponse)
async def home() -> str:
    """Return the greeting text."""
    return HOME_TEXT
