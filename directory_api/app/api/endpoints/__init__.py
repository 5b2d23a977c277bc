"""
Endpoint subpackage.

Each module in this package defines an APIRouter for one resource
(home, users, cities).  The routers are aggregated in ``router.py``.
"""
