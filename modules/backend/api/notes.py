"""
Seat Note API Endpoints.

Create and list notes under a seat; read, update and delete them by id.
Updates are last-write-wins.
"""

from typing import Annotated

from fastapi import APIRouter, Path, Response

from modules.backend.api.seats import require_valid_seat_number
from modules.backend.core.dependencies import Context, DbSession
from modules.backend.core.exceptions import NotFoundError, ValidationError
from modules.backend.schemas.seat_note import NoteTextRequest, SeatNoteResponse
from modules.backend.services.seat_note import SeatNoteService
from modules.backend.services.validation import is_valid_note_text

INVALID_NOTE_TEXT = "Note text must be between 1 and 500 characters"

# Ids outside the Integer primary key range never reach the store.
NoteId = Annotated[int, Path(ge=1, le=2**31 - 1, description="Note identifier")]

seat_notes_router = APIRouter()
notes_router = APIRouter()


def require_valid_note_text(ctx: Context, text: str | None) -> str:
    """Return ``text`` if it is valid note text, else raise a 400 ValidationError."""
    if not is_valid_note_text(text):
        ctx.logger.warning("Invalid note text", extra={"length": len(text or "")})
        raise ValidationError(INVALID_NOTE_TEXT)
    return text


def note_location(note_id: int) -> str:
    return f"/notes/{note_id}"


@seat_notes_router.post(
    "",
    response_model=SeatNoteResponse,
    status_code=201,
    summary="Create a note for a seat",
    description="Creates a new public note for a specific seat. Notes are limited to 500 characters.",
    responses={400: {"description": "Invalid seat number or note text"}, 404: {"description": "Seat not found"}},
)
async def create_note(
    model: str,
    seat: str,
    data: NoteTextRequest,
    response: Response,
    db: DbSession,
    ctx: Context,
) -> SeatNoteResponse:
    """Create a note; the Location header points at the new note."""
    ctx.logger.info("Creating note for seat", extra={"model": model, "seat": seat})

    require_valid_seat_number(ctx, seat)
    text = require_valid_note_text(ctx, data.text)

    note = await SeatNoteService(db).create_note(model, seat, text)

    ctx.logger.info("Note created", extra={"note_id": note.id, "model": model, "seat": seat})
    response.headers["Location"] = note_location(note.id)
    return SeatNoteResponse.model_validate(note)


@seat_notes_router.get(
    "",
    response_model=list[SeatNoteResponse],
    summary="List notes for a seat",
    description="Retrieves all public notes for a specific seat, ordered by most recent.",
    responses={400: {"description": "Invalid seat number"}},
)
async def list_notes(
    model: str,
    seat: str,
    db: DbSession,
    ctx: Context,
) -> list[SeatNoteResponse]:
    """List a seat's notes, most recently updated first."""
    require_valid_seat_number(ctx, seat)

    notes = await SeatNoteService(db).list_notes(model, seat)

    ctx.logger.info("Notes listed", extra={"model": model, "seat": seat, "count": len(notes)})
    return [SeatNoteResponse.model_validate(note) for note in notes]


@notes_router.get(
    "/{note_id}",
    response_model=SeatNoteResponse,
    summary="Get a note",
    responses={404: {"description": "Note not found"}},
)
async def get_note(
    note_id: NoteId,
    db: DbSession,
    ctx: Context,
) -> SeatNoteResponse:
    """Get a note by id."""
    note = await SeatNoteService(db).get_note_by_id(note_id)
    if note is None:
        raise NotFoundError(f"Note not found: {note_id}")
    return SeatNoteResponse.model_validate(note)


@notes_router.put(
    "/{note_id}",
    response_model=SeatNoteResponse,
    summary="Update a note",
    description="Updates an existing note's text. Uses last-write-wins strategy.",
    responses={400: {"description": "Invalid note text"}, 404: {"description": "Note not found"}},
)
async def update_note(
    note_id: NoteId,
    data: NoteTextRequest,
    db: DbSession,
    ctx: Context,
) -> SeatNoteResponse:
    """Replace a note's text."""
    ctx.logger.info("Updating note", extra={"note_id": note_id})

    text = require_valid_note_text(ctx, data.text)

    note = await SeatNoteService(db).update_note(note_id, text)
    if note is None:
        ctx.logger.warning("Note not found", extra={"note_id": note_id})
        raise NotFoundError(f"Note not found: {note_id}")

    ctx.logger.info("Note updated", extra={"note_id": note_id})
    return SeatNoteResponse.model_validate(note)


@notes_router.delete(
    "/{note_id}",
    status_code=204,
    response_class=Response,
    summary="Delete a note",
    description="Deletes an existing note by ID.",
    responses={404: {"description": "Note not found"}},
)
async def delete_note(
    note_id: NoteId,
    db: DbSession,
    ctx: Context,
) -> None:
    """Delete a note."""
    ctx.logger.info("Deleting note", extra={"note_id": note_id})

    if not await SeatNoteService(db).delete_note(note_id):
        ctx.logger.warning("Note not found", extra={"note_id": note_id})
        raise NotFoundError(f"Note not found: {note_id}")

    ctx.logger.info("Note deleted", extra={"note_id": note_id})
