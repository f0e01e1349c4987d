"""Shared validators for domain input.

Clients send loosely typed JSON from phones and the playback terminal, so
these helpers normalise values before they reach the domain models.
"""

from typing import Any

from karaoke_server.domain.shared.messages import ErrorMessages


def validate_non_empty_string(value: str, field_name: str = "value") -> str:
    """Validate that a string is not empty or whitespace-only.

    Args:
        value: The string to validate.
        field_name: Name of the field for error messages.

    Returns:
        The validated string.

    Raises:
        ValueError: If the string is empty or whitespace-only.
    """
    if not value or not value.strip():
        raise ValueError(ErrorMessages.FIELD_CANNOT_BE_EMPTY.format(field_name=field_name))
    return value


def clean_text(value: Any) -> str:
    """Coerce an arbitrary JSON value to a trimmed string.

    ``None`` and ``False``-y values become an empty string, mirroring how the
    web clients send blank form fields.
    """
    if value is None or value is False:
        return ""
    return str(value).strip()


def clean_path_candidate(value: Any) -> str | None:
    """Return the trimmed path if ``value`` is a non-blank string, else None."""
    if not isinstance(value, str):
        return None
    trimmed = value.strip()
    return trimmed or None


def is_blank_song_ref(value: Any) -> bool:
    """True when a song reference is absent or carries no content."""
    if value is None or isinstance(value, bool):
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, dict):
        return not value
    return not isinstance(value, int)
