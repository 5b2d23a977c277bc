"""
Application package initializer.

The directory service is split into a small number of layers: ``core``
holds configuration, logging and the error taxonomy, ``schemas``
defines the pydantic representation of a user record, ``services``
contains the in‑memory record store and ``api`` maps HTTP paths onto
store lookups.  ``factory.create_app`` assembles them; ``main.app`` is
the default instance for ASGI servers.
"""
