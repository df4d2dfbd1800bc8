"""
Top‑level router for the API.

The public paths (``/participants``, ``/user``, ``/operations``) are
part of the client contract, so the resource routers are included
without a version prefix.
"""

from fastapi import APIRouter

from .endpoints import auth, operations, participants

router = APIRouter()

router.include_router(participants.router, prefix="/participants", tags=["participants"])
router.include_router(auth.router, prefix="/user", tags=["auth"])
router.include_router(operations.router, prefix="/operations", tags=["operations"])
