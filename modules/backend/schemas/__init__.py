# Pydantic schemas package
from modules.backend.schemas.base import CamelModel, ProblemDetail
from modules.backend.schemas.seat import SeatAttributesResponse
from modules.backend.schemas.seat_note import NoteTextRequest, SeatNoteResponse

__all__ = [
    "CamelModel",
    "NoteTextRequest",
    "ProblemDetail",
    "SeatAttributesResponse",
    "SeatNoteResponse",
]
