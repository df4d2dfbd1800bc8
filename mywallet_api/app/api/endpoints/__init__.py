"""
Endpoint subpackage.

Each module defines an APIRouter for one resource (participants,
login, operations).  The routers are aggregated in ``router.py``.
"""
