"""
Seat Repository.

Read-only data access for the seat catalog.
"""

from sqlalchemy import select

from modules.backend.models.seat import Seat
from modules.backend.repositories.base import BaseRepository


class SeatRepository(BaseRepository[Seat]):
    """Repository for Seat model. Keys are (aircraft_model, seat_number)."""

    model = Seat

    async def get(self, aircraft_model: str, seat_number: str) -> Seat | None:
        """Exact match on the composite key."""
        return await self.get_by_key_or_none((aircraft_model, seat_number))

    async def exists_seat(self, aircraft_model: str, seat_number: str) -> bool:
        """Check whether a seat exists without loading its row."""
        result = await self.session.execute(
            select(Seat.seat_number)
            .where(Seat.aircraft_model == aircraft_model)
            .where(Seat.seat_number == seat_number)
        )
        return result.scalar_one_or_none() is not None

    async def list_by_model(self, aircraft_model: str) -> list[Seat]:
        """
        Get all seats for an aircraft model.

        Ordered by seat number as a string, so "10A" sorts before "2A".
        """
        result = await self.session.execute(
            select(Seat)
            .where(Seat.aircraft_model == aircraft_model)
            .order_by(Seat.seat_number.asc())
        )
        return list(result.scalars().all())

    async def any_exist(self) -> bool:
        """True when the catalog holds at least one seat."""
        result = await self.session.execute(select(Seat.seat_number).limit(1))
        return result.first() is not None
