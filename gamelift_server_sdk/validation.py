"""Validation of string input fields."""

from __future__ import annotations

import re

from .errors import GameLiftError, GameLiftErrorType


def validate_string(
    field_name: str,
    value: str,
    pattern: str | re.Pattern[str] | None = None,
    min_length: int = 0,
    max_length: int | None = None,
    required: bool = False,
    override_error_message: str = "",
) -> None:
    """Check a string field, raising a validation GameLiftError if it is invalid.

    A max_length of None means there is no upper limit. The pattern is searched
    for anywhere in the value; override_error_message replaces the pattern error.
    """
    if not value:
        if required:
            raise _validation_error(f"{field_name} is required.")
        return

    length = len(value)
    if length < min_length or (max_length is not None and length > max_length):
        if max_length is None:
            raise _validation_error(
                f"{field_name} is invalid. Length must be at least {min_length} characters."
            )
        raise _validation_error(
            f"{field_name} is invalid. Length must be between "
            f"{min_length} and {max_length} characters."
        )

    if pattern is not None:
        regex = re.compile(pattern) if isinstance(pattern, str) else pattern
        if regex.search(value) is None:
            if override_error_message:
                raise _validation_error(override_error_message)
            raise _validation_error(
                f"{field_name} is invalid. Must match the pattern: {regex.pattern}."
            )


def _validation_error(message: str) -> GameLiftError:
    return GameLiftError(GameLiftErrorType.VALIDATION_EXCEPTION, "", message)