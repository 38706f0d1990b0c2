"""
Seat Service.

Read-only access to the seat catalog.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from modules.backend.models.seat import Seat
from modules.backend.repositories.seat import SeatRepository
from modules.backend.services.base import BaseService


class SeatService(BaseService):
    """Looks up seats by (aircraft model, seat number) or lists a model's seats."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.repo = SeatRepository(session)

    async def get_seat(self, aircraft_model: str, seat_number: str) -> Seat | None:
        """
        Get a seat by its composite key.

        Returns:
            The seat, or None if no seat matches
        """
        self._log_debug("Looking up seat", aircraft_model=aircraft_model, seat_number=seat_number)
        return await self.repo.get(aircraft_model, seat_number)

    async def list_seats(self, aircraft_model: str) -> list[Seat]:
        """
        List all seats of an aircraft model ordered by seat number (string order).

        Returns:
            Seats for the model, empty if none match
        """
        self._log_debug("Listing seats", aircraft_model=aircraft_model)
        return await self.repo.list_by_model(aircraft_model)
