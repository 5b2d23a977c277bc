"""
FastAPI dependencies shared by the endpoint modules.
"""

from fastapi import Request

from directory_api.app.services.record_store import RecordStore


def get_store(request: Request) -> RecordStore:
    """Return the record store attached to the application at startup."""
    return request.app.state.store
