"""
Seat Note Repository.

Data access layer for seat notes.
"""

from sqlalchemy import select

from modules.backend.models.seat_note import SeatNote
from modules.backend.repositories.base import BaseRepository


class SeatNoteRepository(BaseRepository[SeatNote]):
    """
    Repository for SeatNote model.

    Inherits key lookups, create and delete from BaseRepository and
    adds the per-seat listing.
    """

    model = SeatNote

    async def list_for_seat(self, aircraft_model: str, seat_number: str) -> list[SeatNote]:
        """
        Get all notes for a seat, most recently touched first.

        Args:
            aircraft_model: Aircraft model identifier
            seat_number: Seat number within the model

        Returns:
            Notes ordered by updated_at descending (id breaks ties)
        """
        result = await self.session.execute(
            select(SeatNote)
            .where(SeatNote.aircraft_model == aircraft_model)
            .where(SeatNote.seat_number == seat_number)
            .order_by(SeatNote.updated_at.desc(), SeatNote.id.desc())
        )
        return list(result.scalars().all())
