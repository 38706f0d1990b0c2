"""
Seat Note Schemas.

Pydantic schemas for note request/response bodies.
"""

from datetime import datetime

from pydantic import Field

from modules.backend.schemas.base import CamelModel


class NoteTextRequest(CamelModel):
    """
    Body for creating or updating a note.

    ``text`` is optional here so a missing or null value reaches note
    validation and is reported with the usual 400 message.
    """

    text: str | None = Field(
        default=None,
        description="Note text, 1 to 500 characters",
        examples=["Quiet row, good legroom"],
    )


class SeatNoteResponse(CamelModel):
    """Schema for a note in API responses."""

    id: int = Field(description="Note identifier")
    aircraft_model: str
    seat_number: str
    text: str
    created_at: datetime = Field(description="Creation timestamp (UTC)")
    updated_at: datetime = Field(description="Last update timestamp (UTC)")
