"""
Unit Tests for Seat Service.

Tests SeatService lookups with a mocked session.
"""

from unittest.mock import MagicMock, patch

import pytest

from modules.backend.services.seat import SeatService


class TestSeatServiceGet:
    """Tests for single seat lookups."""

    @pytest.mark.asyncio
    async def test_get_seat_uses_composite_key(self, mock_db_session):
        """Should look the seat up by (model, seat number)."""
        seat = MagicMock()
        mock_db_session.get.return_value = seat

        result = await SeatService(mock_db_session).get_seat("A320", "12A")

        assert result is seat
        args = mock_db_session.get.call_args.args
        assert args[1] == ("A320", "12A")

    @pytest.mark.asyncio
    async def test_get_seat_missing(self, mock_db_session):
        mock_db_session.get.return_value = None

        assert await SeatService(mock_db_session).get_seat("A320", "99F") is None


class TestSeatServiceList:
    """Tests for listing a model's seats."""

    @pytest.mark.asyncio
    async def test_list_seats(self, mock_db_session, mock_db_result):
        seats = [MagicMock(seat_number="12A"), MagicMock(seat_number="12B")]
        mock_db_result.scalars.return_value.all.return_value = seats
        mock_db_session.execute.return_value = mock_db_result

        result = await SeatService(mock_db_session).list_seats("A320")

        assert result == seats
        mock_db_session.execute.assert_called_once()

    @pytest.mark.asyncio
    async def test_list_seats_delegates_to_repository(self, mock_db_session):
        service = SeatService(mock_db_session)

        with patch.object(service.repo, "list_by_model", return_value=[]) as mock_list:
            assert await service.list_seats("Z999") == []

        mock_list.assert_called_once_with("Z999")
