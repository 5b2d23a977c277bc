"""
Pydantic schema definitions for API payloads.

Schemas describe how records are serialised on the wire and are kept
separate from the store that holds them.
"""
