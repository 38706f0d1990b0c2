# SQLAlchemy models package. Importing it registers every table on Base.metadata.
from modules.backend.models.base import Base, TimestampMixin
from modules.backend.models.seat import Seat, SeatPosition
from modules.backend.models.seat_note import MAX_NOTE_LENGTH, SeatNote

__all__ = [
    "MAX_NOTE_LENGTH",
    "Base",
    "Seat",
    "SeatNote",
    "SeatPosition",
    "TimestampMixin",
]
