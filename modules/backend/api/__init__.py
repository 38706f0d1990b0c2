"""
API Router.

Aggregates the seat and note routers at their public paths.
"""

from fastapi import APIRouter

from modules.backend.api import notes, seats

router = APIRouter()

router.include_router(seats.router, prefix="/seats", tags=["seats"])
router.include_router(notes.seat_notes_router, prefix="/seats/{model}/{seat}/notes", tags=["seat notes"])
router.include_router(notes.notes_router, prefix="/notes", tags=["seat notes"])
