"""
Seat Schemas.

Response DTO for seat attributes.
"""

from modules.backend.models.seat import SeatPosition
from modules.backend.schemas.base import CamelModel


class SeatAttributesResponse(CamelModel):
    """Seat attributes as returned by GET /seats/{model}/{seat}."""

    aircraft_model: str
    seat_number: str
    position: SeatPosition
    has_window: bool
    power_available: bool
    power_type: str | None
    has_in_seat_screen: bool
    experience_summary: str | None
