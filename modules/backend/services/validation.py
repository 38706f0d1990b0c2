"""
Seat and Note Validation.

Pure checks applied to request data before any store access, plus the
note text sanitizer used on every write.
"""

import re

from modules.backend.models.seat_note import MAX_NOTE_LENGTH

# Row digits followed by a single uppercase seat letter, e.g. "12A".
SEAT_NUMBER_PATTERN = re.compile(r"[0-9]+[A-F]")


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def is_valid_seat_number(seat_number: str | None) -> bool:
    """Return True for seat numbers like "12A"; lowercase letters are rejected."""
    if _is_blank(seat_number):
        return False

    return SEAT_NUMBER_PATTERN.fullmatch(seat_number) is not None


def is_valid_note_text(text: str | None) -> bool:
    """
    Return True if note text is non-blank and at most MAX_NOTE_LENGTH characters.

    The length is measured on the raw text, before sanitize_note_text trims it.
    """
    if _is_blank(text):
        return False

    return len(text) <= MAX_NOTE_LENGTH


def sanitize_note_text(text: str | None) -> str:
    """Trim leading and trailing whitespace. None becomes an empty string."""
    if text is None:
        return ""
    return text.strip()


def validate_power_configuration(power_available: bool, power_type: str | None) -> bool:
    """
    Return False when power is available but no power type is given.

    Not applied on any write path: seats are never created or updated
    through the API.
    """
    if power_available and _is_blank(power_type):
        return False

    return True
