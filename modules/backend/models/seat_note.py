"""
Seat Note Model.

Public free-text notes attached to a seat. Updates are last-write-wins:
there is no version column and no conflict detection.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKeyConstraint, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from modules.backend.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from modules.backend.models.seat import Seat

MAX_NOTE_LENGTH = 500


class SeatNote(TimestampMixin, Base):
    """SeatNote database model with a surrogate integer primary key."""

    __tablename__ = "seat_notes"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    aircraft_model: Mapped[str] = mapped_column(String(100), nullable=False)
    seat_number: Mapped[str] = mapped_column(String(10), nullable=False)
    text: Mapped[str] = mapped_column(String(MAX_NOTE_LENGTH), nullable=False)

    seat: Mapped[Seat] = relationship(back_populates="notes")

    __table_args__ = (
        ForeignKeyConstraint(
            ["aircraft_model", "seat_number"],
            ["seats.aircraft_model", "seats.seat_number"],
            ondelete="CASCADE",
        ),
        Index(
            "ix_seat_notes_seat_updated_at",
            "aircraft_model",
            "seat_number",
            "updated_at",
        ),
    )

    def __repr__(self) -> str:
        return f"<SeatNote(id={self.id}, seat={self.aircraft_model}/{self.seat_number})>"
