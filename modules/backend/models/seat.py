"""
Seat Model.

Read-only catalog of aircraft seats, keyed by (aircraft_model, seat_number).
"""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

from sqlalchemy import Enum, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from modules.backend.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from modules.backend.models.seat_note import SeatNote


class SeatPosition(str, enum.Enum):
    """Where the seat sits in its row."""

    AISLE = "Aisle"
    MIDDLE = "Middle"
    WINDOW = "Window"


class Seat(TimestampMixin, Base):
    """
    Seat database model.

    Seats are written only by seeding; the API never creates or
    modifies them. Deleting a seat cascades to its notes.
    """

    __tablename__ = "seats"

    aircraft_model: Mapped[str] = mapped_column(String(100), primary_key=True)
    seat_number: Mapped[str] = mapped_column(String(10), primary_key=True)
    position: Mapped[SeatPosition] = mapped_column(
        Enum(
            SeatPosition,
            native_enum=False,
            length=20,
            values_callable=lambda members: [m.value for m in members],
            validate_strings=True,
        ),
        nullable=False,
    )
    has_window: Mapped[bool] = mapped_column(nullable=False)
    power_available: Mapped[bool] = mapped_column(nullable=False)
    power_type: Mapped[str | None] = mapped_column(String(20), nullable=True)
    has_in_seat_screen: Mapped[bool] = mapped_column(nullable=False)
    experience_summary: Mapped[str | None] = mapped_column(String(500), nullable=True)

    notes: Mapped[list[SeatNote]] = relationship(
        back_populates="seat",
        cascade="all",
        passive_deletes=True,
    )

    __table_args__ = (
        Index("ix_seats_position", "position"),
    )

    @property
    def window_confirmed(self) -> bool:
        """True only for a window-position seat that actually has a window."""
        return self.has_window and self.position == SeatPosition.WINDOW

    def __repr__(self) -> str:
        return f"<Seat({self.aircraft_model}/{self.seat_number}, position={self.position.value})>"
