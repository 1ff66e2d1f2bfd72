"""Enumerations exchanged with the service as upper-case strings."""

from __future__ import annotations

from enum import Enum


def _parse_member(enum_cls, value):
    """Return the member of enum_cls with this exact text, or its first member."""
    if not isinstance(value, str):
        raise TypeError(f"{enum_cls.__name__} must be parsed from a string, got {value!r}")
    for member in enum_cls:
        if member.value == value:
            return member
    return next(iter(enum_cls))


class _WireEnum(str, Enum):
    """A string enumeration whose first member is the fallback for unknown text."""

    def __str__(self) -> str:
        return self.value


class GameSessionStatus(_WireEnum):
    """Current status of a game session."""

    NOT_SET = "NOT_SET"
    ACTIVE = "ACTIVE"
    ACTIVATING = "ACTIVATING"
    TERMINATED = "TERMINATED"
    TERMINATING = "TERMINATING"

    @classmethod
    def parse(cls, value):
        """Return the status with this text, or NOT_SET if none has it."""
        return _parse_member(cls, value)


class BackfillMode(_WireEnum):
    """How backfill requests are handled for non-full game sessions."""

    NOT_SET = "NOT_SET"
    MANUAL = "MANUAL"
    AUTOMATIC = "AUTOMATIC"

    @classmethod
    def parse(cls, value):
        """Return the mode with this text, or NOT_SET if none has it."""
        return _parse_member(cls, value)


class PlayerSessionCreationPolicy(_WireEnum):
    """Whether a game session accepts new player sessions."""

    NOT_SET = "NOT_SET"
    DENY_ALL = "DENY_ALL"
    ACCEPT_ALL = "ACCEPT_ALL"

    @classmethod
    def parse(cls, value):
        """Return the policy with this text, or NOT_SET if none has it."""
        return _parse_member(cls, value)


class PlayerSessionStatus(_WireEnum):
    """Current status of a player session."""

    NOT_SET = "NOT_SET"
    RESERVED = "RESERVED"
    ACTIVE = "ACTIVE"
    COMPLETED = "COMPLETED"
    TIMEDOUT = "TIMEDOUT"

    @classmethod
    def parse(cls, value):
        """Return the status with this text, or NOT_SET if none has it."""
        return _parse_member(cls, value)


class UpdateReason(_WireEnum):
    """Why a game session update was supplied."""

    UNKNOWN = "UNKNOWN"
    MATCHMAKING_DATA_UPDATED = "MATCHMAKING_DATA_UPDATED"
    BACKFILL_FAILED = "BACKFILL_FAILED"
    BACKFILL_TIMED_OUT = "BACKFILL_TIMED_OUT"
    BACKFILL_CANCELLED = "BACKFILL_CANCELLED"

    @classmethod
    def parse(cls, value):
        """Return the reason with this text, or UNKNOWN if none has it."""
        return _parse_member(cls, value)