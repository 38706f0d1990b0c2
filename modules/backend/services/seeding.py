"""
Seed Data.

Reference seats and sample notes for local and demo databases. Seeding
only runs against an empty catalog, so it is safe to call on every start.

Usage:
    from modules.backend.services.seeding import seed_database

    await seed_database()
"""

from datetime import datetime, timedelta

from sqlalchemy.ext.asyncio import AsyncSession

from modules.backend.core.database import get_session_factory
from modules.backend.core.utils import utc_now
from modules.backend.models import Seat, SeatNote, SeatPosition
from modules.backend.repositories.seat import SeatRepository
from modules.backend.services.base import BaseService

# (aircraft_model, seat_number, days after the base time, text)
_SAMPLE_NOTES = [
    ("A320", "12A", 0, "Great legroom and easy access to overhead bins. "
                       "The window view is excellent for photography!"),
    ("A320", "12A", 2, "Power outlet works perfectly for laptop charging during long flights."),
    ("A320", "12B", 1, "Too cramped as a middle seat. "
                       "No power outlet is disappointing on long-haul flights."),
    ("A320", "12C", 3, "Convenient aisle access for frequent bathroom trips. "
                       "USB-C power is very helpful."),
    ("B737", "15F", 4, "Exit row means extra legroom, but the lack of window is a major downside. "
                       "No recline either."),
    ("B737", "15F", 5, "Perfect for tall passengers needing leg space. "
                       "Just don't expect scenery or under-seat storage."),
]


def reference_seats(now: datetime | None = None) -> list[Seat]:
    """Build the four reference seats, unsaved."""
    now = now or utc_now()
    common = {"created_at": now, "updated_at": now}
    return [
        Seat(
            aircraft_model="A320",
            seat_number="12A",
            position=SeatPosition.WINDOW,
            has_window=True,
            power_available=True,
            power_type="USB-C",
            has_in_seat_screen=True,
            experience_summary="Quiet row, good legroom",
            **common,
        ),
        Seat(
            aircraft_model="A320",
            seat_number="12B",
            position=SeatPosition.MIDDLE,
            has_window=False,
            power_available=True,
            power_type="USB",
            has_in_seat_screen=True,
            experience_summary="Standard middle seat",
            **common,
        ),
        Seat(
            aircraft_model="A320",
            seat_number="12C",
            position=SeatPosition.AISLE,
            has_window=False,
            power_available=True,
            power_type="USB-C",
            has_in_seat_screen=True,
            experience_summary="Easy access to aisle",
            **common,
        ),
        Seat(
            aircraft_model="B737",
            seat_number="15F",
            position=SeatPosition.WINDOW,
            has_window=False,
            power_available=False,
            power_type=None,
            has_in_seat_screen=False,
            experience_summary="Exit row, extra legroom but no window",
            **common,
        ),
    ]


def sample_notes(base_time: datetime) -> list[SeatNote]:
    """
    Build the sample notes, unsaved.

    Each note is stamped a whole number of days after ``base_time`` and
    has never been edited, so created_at equals updated_at.
    """
    notes = []
    for aircraft_model, seat_number, days, text in _SAMPLE_NOTES:
        stamp = base_time + timedelta(days=days)
        notes.append(
            SeatNote(
                aircraft_model=aircraft_model,
                seat_number=seat_number,
                text=text,
                created_at=stamp,
                updated_at=stamp,
            )
        )
    return notes


class SeedService(BaseService):
    """Populates an empty store with the reference catalog."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.seats = SeatRepository(session)

    async def seed(self) -> bool:
        """
        Insert reference seats and sample notes into an empty store.

        Does nothing if any seat already exists. The caller commits.

        Returns:
            True if data was inserted, False if the store was already seeded
        """
        if await self.seats.any_exist():
            self._log_debug("Seed skipped, seats already present")
            return False

        now = utc_now()
        seats = reference_seats(now)
        notes = sample_notes(now - timedelta(days=7))

        async def _insert() -> None:
            self.session.add_all(seats)
            await self.session.flush()
            self.session.add_all(notes)
            await self.session.flush()

        await self._execute_db_operation("seed", _insert())

        self._log_operation("Seeded database", seats=len(seats), notes=len(notes))
        return True


async def seed_database() -> bool:
    """Seed the configured store in its own committed session."""
    async with get_session_factory()() as session:
        seeded = await SeedService(session).seed()
        await session.commit()
    return seeded
