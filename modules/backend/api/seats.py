"""
Seat API Endpoints.

Read-only seat attribute lookups.
"""

from fastapi import APIRouter

from modules.backend.core.dependencies import Context, DbSession
from modules.backend.core.exceptions import NotFoundError, ValidationError
from modules.backend.schemas.seat import SeatAttributesResponse
from modules.backend.services.seat import SeatService
from modules.backend.services.validation import is_valid_seat_number

router = APIRouter()


def require_valid_seat_number(ctx: Context, seat: str, message: str | None = None) -> None:
    """Raise a 400 ValidationError unless ``seat`` looks like "12A"."""
    if not is_valid_seat_number(seat):
        ctx.logger.warning("Invalid seat number format", extra={"seat": seat})
        raise ValidationError(message or f"Invalid seat number format: {seat}")


@router.get(
    "/{model}",
    response_model=list[SeatAttributesResponse],
    summary="List seats for an aircraft model",
    description="Gets every seat of an aircraft model, ordered by seat number.",
)
async def list_seats(
    model: str,
    db: DbSession,
    ctx: Context,
) -> list[SeatAttributesResponse]:
    """List seats for a model; empty when the model is unknown."""
    seats = await SeatService(db).list_seats(model)
    ctx.logger.info("Seats listed", extra={"model": model, "count": len(seats)})
    return [SeatAttributesResponse.model_validate(seat) for seat in seats]


@router.get(
    "/{model}/{seat}",
    response_model=SeatAttributesResponse,
    summary="Retrieve seat attributes",
    description=(
        "Gets detailed attributes for a specific seat including position, "
        "power, screen, and experience summary."
    ),
    responses={400: {"description": "Malformed seat number"}, 404: {"description": "Seat not found"}},
)
async def get_seat_attributes(
    model: str,
    seat: str,
    db: DbSession,
    ctx: Context,
) -> SeatAttributesResponse:
    """Get one seat's attributes."""
    ctx.logger.info("Retrieving seat attributes", extra={"model": model, "seat": seat})

    require_valid_seat_number(
        ctx,
        seat,
        f"Invalid seat number format: {seat}. Expected pattern: row digits + seat letter (A-F).",
    )

    result = await SeatService(db).get_seat(model, seat)
    if result is None:
        ctx.logger.info("Seat not found", extra={"model": model, "seat": seat})
        raise NotFoundError(f"Seat not found: {model}/{seat}")

    return SeatAttributesResponse.model_validate(result)
