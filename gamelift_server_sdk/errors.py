"""Error types raised by the server SDK and the outcome of service calls."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum
from http import HTTPStatus


class GameLiftErrorType(IntEnum):
    """Kinds of errors that the server SDK can report."""

    ALREADY_INITIALIZED = 0
    FLEET_MISMATCH = 1
    GAMELIFT_CLIENT_NOT_INITIALIZED = 2
    GAMELIFT_SERVER_NOT_INITIALIZED = 3
    GAME_SESSION_ENDED_FAILED = 4
    GAME_SESSION_NOT_READY = 5
    GAME_SESSION_READY_FAILED = 6
    GAME_SESSION_ID_NOT_SET = 7
    INITIALIZATION_MISMATCH = 8
    NOT_INITIALIZED = 9
    NO_TARGET_ALIAS_ID_SET = 10
    NO_TARGET_FLEET_SET = 11
    PROCESS_ENDING_FAILED = 12
    PROCESS_NOT_ACTIVE = 13
    PROCESS_NOT_READY = 14
    PROCESS_READY_FAILED = 15
    SDK_VERSION_DETECTION_FAILED = 16
    SERVICE_CALL_FAILED = 17
    UNEXPECTED_PLAYER_SESSION = 18
    LOCAL_CONNECTION_FAILED = 19
    NETWORK_NOT_INITIALIZED = 20
    TERMINATION_TIME_NOT_SET = 21
    BAD_REQUEST_EXCEPTION = 22
    UNAUTHORIZED_EXCEPTION = 23
    FORBIDDEN_EXCEPTION = 24
    NOT_FOUND_EXCEPTION = 25
    CONFLICT_EXCEPTION = 26
    TOO_MANY_REQUESTS_EXCEPTION = 27
    INTERNAL_SERVICE_EXCEPTION = 28
    VALIDATION_EXCEPTION = 29
    WEBSOCKET_CONNECT_FAILURE = 30
    WEBSOCKET_RETRIABLE_SEND_MESSAGE_FAILURE = 31
    WEBSOCKET_SEND_MESSAGE_FAILURE = 32
    WEBSOCKET_CLOSING_ERROR = 33
    UNKNOWN_EXCEPTION = 34


_NOT_INITIALIZED_MESSAGE = (
    "You must call InitSDK() before making calls to the server SDK for Amazon GameLift Servers."
)

_DESCRIPTIONS: dict[GameLiftErrorType, tuple[str, str]] = {
    GameLiftErrorType.ALREADY_INITIALIZED: (
        "Already Initialized",
        "Server SDK has already been initialized. "
        "You must call Destroy() before reinitializing the server SDK.",
    ),
    GameLiftErrorType.FLEET_MISMATCH: (
        "Fleet mismatch.",
        "The Target fleet does not match the request fleet. "
        "Make sure GameSessions and PlayerSessions belong to your target fleet.",
    ),
    GameLiftErrorType.GAMELIFT_CLIENT_NOT_INITIALIZED: (
        "Sever SDK not initialized.",
        _NOT_INITIALIZED_MESSAGE,
    ),
    GameLiftErrorType.GAMELIFT_SERVER_NOT_INITIALIZED: (
        "Server SDK not initialized.",
        _NOT_INITIALIZED_MESSAGE,
    ),
    GameLiftErrorType.GAME_SESSION_ENDED_FAILED: (
        "Game session failed.",
        "The GameSessionEnded invocation failed.",
    ),
    GameLiftErrorType.GAME_SESSION_NOT_READY: (
        "Game session not activated.",
        "The Game session associated with this server was not activated.",
    ),
    GameLiftErrorType.GAME_SESSION_READY_FAILED: (
        "Game session failed.",
        "The GameSessionReady invocation failed.",
    ),
    GameLiftErrorType.GAME_SESSION_ID_NOT_SET: (
        "GameSession id is not set.",
        "No game sessions are bound to this process.",
    ),
    GameLiftErrorType.INITIALIZATION_MISMATCH: (
        "Server SDK not initialized.",
        _NOT_INITIALIZED_MESSAGE,
    ),
    GameLiftErrorType.NOT_INITIALIZED: (
        "Server SDK not initialized.",
        _NOT_INITIALIZED_MESSAGE,
    ),
    GameLiftErrorType.NO_TARGET_ALIAS_ID_SET: (
        "No target aliasId set.",
        "The aliasId has not been set. "
        "Clients should call SetTargetAliasId() before making calls that require an alias.",
    ),
    GameLiftErrorType.NO_TARGET_FLEET_SET: (
        "No target fleet set.",
        "The target fleet has not been set. "
        "Clients should call SetTargetFleet() before making calls that require a fleet.",
    ),
    GameLiftErrorType.PROCESS_ENDING_FAILED: (
        "Process ending failed.",
        "The server SDK call to ProcessEnding() failed.",
    ),
    GameLiftErrorType.PROCESS_NOT_ACTIVE: (
        "Process not activated.",
        "The process has not yet been activated.",
    ),
    GameLiftErrorType.PROCESS_NOT_READY: (
        "Process not ready.",
        "The process has not yet been activated by calling ProcessReady(). "
        "Processes in standby cannot receive StartGameSession callbacks.",
    ),
    GameLiftErrorType.PROCESS_READY_FAILED: (
        "Process ready failed.",
        "The server SDK call to ProcessEnding() failed.",
    ),
    GameLiftErrorType.SDK_VERSION_DETECTION_FAILED: (
        "Could not detect SDK version.",
        "Could not detect SDK version.",
    ),
    GameLiftErrorType.SERVICE_CALL_FAILED: (
        "Service call failed.",
        "The call to an AWS service has failed. See the root cause error for more information.",
    ),
    GameLiftErrorType.UNEXPECTED_PLAYER_SESSION: (
        "Unexpected player session.",
        "The player session was not expected by the server. "
        "Clients wishing to connect to a server must obtain a PlayerSessionID from "
        "Amazon GameLift Servers by creating a player session on the desired game session.",
    ),
    GameLiftErrorType.LOCAL_CONNECTION_FAILED: (
        "Local connection failed.",
        "Connection to the game server could not be established.",
    ),
    GameLiftErrorType.NETWORK_NOT_INITIALIZED: (
        "Network not initialized.",
        "Local network was not initialized. Have you called InitSDK()?",
    ),
    GameLiftErrorType.TERMINATION_TIME_NOT_SET: (
        "TerminationTime is not set.",
        "TerminationTime has not been sent to this process.",
    ),
    GameLiftErrorType.BAD_REQUEST_EXCEPTION: (
        "Bad request exception.",
        "Bad request exception.",
    ),
    GameLiftErrorType.UNAUTHORIZED_EXCEPTION: (
        "Unauthorized exception.",
        "User provided invalid or missing authorization to access a resource/operation.",
    ),
    GameLiftErrorType.FORBIDDEN_EXCEPTION: (
        "Forbidden exception.",
        "User is attempting to access resources/operations that they are not allowed to access.",
    ),
    GameLiftErrorType.NOT_FOUND_EXCEPTION: (
        "Not found exception.",
        "A necessary resource was missing when attempting to process the request.",
    ),
    GameLiftErrorType.CONFLICT_EXCEPTION: (
        "Conflict exception.",
        "Request conflicts with the current state of the target resource.",
    ),
    GameLiftErrorType.TOO_MANY_REQUESTS_EXCEPTION: (
        "Throttling exception.",
        "Too many requests; please increase throttle limit if needed.",
    ),
    GameLiftErrorType.INTERNAL_SERVICE_EXCEPTION: (
        "Internal service exception.",
        "Internal service exception.",
    ),
    GameLiftErrorType.VALIDATION_EXCEPTION: (
        "Validation exception.",
        "Validation exception.",
    ),
    GameLiftErrorType.WEBSOCKET_CONNECT_FAILURE: (
        "WebSocket Connection Failed",
        "Connection to the Amazon GameLift Servers websocket has failed",
    ),
    GameLiftErrorType.WEBSOCKET_RETRIABLE_SEND_MESSAGE_FAILURE: (
        "WebSocket Send Message Failed",
        "Sending Message to the Amazon GameLift Servers websocket has failed",
    ),
    GameLiftErrorType.WEBSOCKET_SEND_MESSAGE_FAILURE: (
        "WebSocket Send Message Failed",
        "Sending Message to the Amazon GameLift Servers websocket has failed",
    ),
    GameLiftErrorType.WEBSOCKET_CLOSING_ERROR: (
        "WebSocket close error",
        "An error has occurred in closing the connection",
    ),
    GameLiftErrorType.UNKNOWN_EXCEPTION: (
        "Unknown exception.",
        "Unknown exception.",
    ),
}

_STATUS_CODE_TYPES: dict[int, GameLiftErrorType] = {
    400: GameLiftErrorType.BAD_REQUEST_EXCEPTION,
    401: GameLiftErrorType.UNAUTHORIZED_EXCEPTION,
    403: GameLiftErrorType.FORBIDDEN_EXCEPTION,
    404: GameLiftErrorType.NOT_FOUND_EXCEPTION,
    409: GameLiftErrorType.CONFLICT_EXCEPTION,
    429: GameLiftErrorType.TOO_MANY_REQUESTS_EXCEPTION,
}

_MESSAGE_TYPE_PATTERN = re.compile(r"\s*\[GameLiftError:\s*ErrorType=\{\s*([+-]?\d+)\}")


class GameLiftError(Exception):
    """An error in a call to the server SDK.

    An empty name or message falls back to the default text for the error type.
    """

    def __init__(
        self,
        error_type: GameLiftErrorType | int,
        name: str = "",
        message: str = "",
    ) -> None:
        self.error_type = GameLiftErrorType(error_type)
        self._name = name
        self._message = message
        super().__init__(self.error_type, name, message)

    @classmethod
    def from_status_code(cls, status_code: int, error_message: str) -> GameLiftError:
        """Build an error from a service status code and its message."""
        return cls(error_type_for_status_code(status_code), "", error_message)

    @property
    def name(self) -> str:
        if self._name:
            return self._name
        description = _DESCRIPTIONS.get(self.error_type)
        return description[0] if description else "Unknown Error"

    @property
    def message(self) -> str:
        if self._message:
            return self._message
        description = _DESCRIPTIONS.get(self.error_type)
        return description[1] if description else "An unexpected error has occurred."

    def __str__(self) -> str:
        return (
            f"[GameLiftError: ErrorType={{{int(self.error_type)}}}, "
            f"ErrorName={{{self.name}}}, ErrorMessage={{{self.message}}}]"
        )


def error_type_for_status_code(status_code: int) -> GameLiftErrorType:
    """Classify a service status code; 4xx codes are client errors, the rest internal."""
    if HTTPStatus.BAD_REQUEST <= status_code < HTTPStatus.INTERNAL_SERVER_ERROR:
        return _STATUS_CODE_TYPES.get(status_code, GameLiftErrorType.BAD_REQUEST_EXCEPTION)
    return GameLiftErrorType.INTERNAL_SERVICE_EXCEPTION


def error_type_from_message(error_message: str) -> GameLiftErrorType:
    """Recover the error type from the text of a GameLiftError."""
    match = _MESSAGE_TYPE_PATTERN.match(error_message)
    if match is None:
        return GameLiftErrorType.UNKNOWN_EXCEPTION
    try:
        return GameLiftErrorType(int(match.group(1)))
    except ValueError:
        return GameLiftErrorType.UNKNOWN_EXCEPTION


@dataclass
class Outcome:
    """A raw service response: its payload and the error, if any."""

    data: bytes = b""
    error: Exception | None = None