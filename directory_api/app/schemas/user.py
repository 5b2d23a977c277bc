"""
Pydantic model for user records.

A ``UserRecord`` is immutable once built.  On the wire its fields use
lower‑case keys (``firstname``, ``lastname``, ``city``); in Python the
record can be built with either the attribute names or those keys.
"""

from pydantic import BaseModel, Field


class UserRecord(BaseModel):
    """A single directory entry."""

    first_name: str = Field(..., alias="firstname", examples=["Hasbi"])
    last_name: str = Field(..., alias="lastname", examples=["Qohar"])
    # Short city code such as ``JKT`` or ``MDN``.  Case is preserved as
    # given; lookups compare it lower‑cased.
    city: str = Field(..., examples=["JKT"])

    model_config = {
        "frozen": True,
        "populate_by_name": True,
    }
