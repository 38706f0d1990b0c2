"""
Seat Note Service.

Business logic for public seat notes: create, list, update, delete.

Updates are last-write-wins. There is no version check, so when two
writers update the same note concurrently the later commit silently
replaces the earlier one.
"""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from modules.backend.core.exceptions import NotFoundError
from modules.backend.core.utils import utc_now, utc_now_after
from modules.backend.models.seat_note import SeatNote
from modules.backend.repositories.seat import SeatRepository
from modules.backend.repositories.seat_note import SeatNoteRepository
from modules.backend.services.base import BaseService
from modules.backend.services.validation import sanitize_note_text


class SeatNoteService(BaseService):
    """
    Service for seat note business logic.

    Text passed in is expected to have passed is_valid_note_text already;
    the service only sanitizes it.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.repo = SeatNoteRepository(session)
        self.seats = SeatRepository(session)

    async def list_notes(self, aircraft_model: str, seat_number: str) -> list[SeatNote]:
        """
        List notes for a seat, most recently updated first.

        Returns:
            Notes for the seat, empty if there are none
        """
        return await self.repo.list_for_seat(aircraft_model, seat_number)

    async def create_note(self, aircraft_model: str, seat_number: str, text: str) -> SeatNote:
        """
        Create a note on an existing seat.

        Args:
            aircraft_model: Aircraft model of the seat
            seat_number: Seat number within the model
            text: Note text, trimmed before storing

        Returns:
            Created note with its assigned id

        Raises:
            NotFoundError: If the seat does not exist
        """
        if not await self.seats.exists_seat(aircraft_model, seat_number):
            raise NotFoundError(f"Seat not found: {aircraft_model}/{seat_number}")

        self._log_operation(
            "Creating seat note",
            aircraft_model=aircraft_model,
            seat_number=seat_number,
        )

        note = await self._execute_db_operation(
            "create_note",
            self._insert_note(aircraft_model, seat_number, sanitize_note_text(text)),
        )

        self._log_debug("Seat note created", note_id=note.id)
        return note

    async def _insert_note(self, aircraft_model: str, seat_number: str, text: str) -> SeatNote:
        """
        Insert a note stamped with a single creation instant.

        A foreign key failure here means the seat was removed after the
        existence check; it is reported the same way as a missing seat.
        """
        now = utc_now()
        try:
            return await self.repo.create(
                aircraft_model=aircraft_model,
                seat_number=seat_number,
                text=text,
                created_at=now,
                updated_at=now,
            )
        except IntegrityError as e:
            if self._is_unique_violation(e):
                raise
            self._logger.warning(
                "Seat removed before note insert",
                extra={"aircraft_model": aircraft_model, "seat_number": seat_number},
            )
            raise NotFoundError(f"Seat not found: {aircraft_model}/{seat_number}") from e

    async def update_note(self, note_id: int, text: str) -> SeatNote | None:
        """
        Replace a note's text and refresh updated_at. created_at is untouched.

        Returns:
            Updated note, or None if no note has this id
        """
        note = await self.repo.get_by_key_or_none(note_id)
        if note is None:
            return None

        self._log_operation("Updating seat note", note_id=note_id)

        note.text = sanitize_note_text(text)
        note.updated_at = utc_now_after(note.updated_at)

        return await self._execute_db_operation("update_note", self.repo.save(note))

    async def delete_note(self, note_id: int) -> bool:
        """
        Delete a note.

        Returns:
            True if the note existed, False otherwise
        """
        self._log_operation("Deleting seat note", note_id=note_id)
        return await self._execute_db_operation(
            "delete_note",
            self.repo.delete_by_key(note_id),
        )

    async def get_note_by_id(self, note_id: int) -> SeatNote | None:
        """Get a note by id, or None if absent."""
        return await self.repo.get_by_key_or_none(note_id)
