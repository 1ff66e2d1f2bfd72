"""Requests that the server process sends to the service over the websocket."""

from __future__ import annotations

import json
import uuid
from dataclasses import dataclass, field
from typing import Any

from .enums import PlayerSessionCreationPolicy
from .messages import Message, MessageAction
from .sessions import Player


def _new_request_id() -> str:
    return str(uuid.uuid4())


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, list, tuple, dict)):
        return len(value) == 0
    if isinstance(value, (bool, int, float)):
        return value == 0
    return False


def _without_empty(values: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in values.items() if not _is_empty(value)}


@dataclass
class Request(Message):
    """A request to the service; each one gets a fresh request id to pair it with its reply."""

    request_id: str = field(default_factory=_new_request_id)

    def _payload(self) -> dict[str, Any]:
        return {}

    def to_dict(self) -> dict[str, Any]:
        """Return the wire form: action and request id first, then the request's fields."""
        return {**super().to_dict(), **self._payload()}

    def to_json(self) -> str:
        """Serialise the wire form to compact JSON text."""
        return json.dumps(self.to_dict(), separators=(",", ":"))


@dataclass
class AcceptPlayerSessionRequest(Request):
    """Accept a player into the game session."""

    action: MessageAction | str = MessageAction.ACCEPT_PLAYER_SESSION
    game_session_id: str = ""
    player_session_id: str = ""

    def _payload(self) -> dict[str, Any]:
        return _without_empty(
            {"GameSessionId": self.game_session_id, "PlayerSessionId": self.player_session_id}
        )


@dataclass
class ActivateGameSessionRequest(Request):
    """Report that the game session is ready for players."""

    action: MessageAction | str = MessageAction.ACTIVATE_GAME_SESSION
    game_session_id: str = ""

    def _payload(self) -> dict[str, Any]:
        return _without_empty({"GameSessionId": self.game_session_id})


@dataclass
class ActivateServerProcessRequest(Request):
    """Report that the server process is ready to host game sessions."""

    action: MessageAction | str = MessageAction.ACTIVATE_SERVER_PROCESS
    sdk_version: str = ""
    sdk_language: str = ""
    sdk_tool_name: str = ""
    sdk_tool_version: str = ""
    port: int = 0
    log_paths: list[str] | None = None

    def _payload(self) -> dict[str, Any]:
        payload = _without_empty(
            {
                "SdkVersion": self.sdk_version,
                "SdkLanguage": self.sdk_language,
                "SdkToolName": self.sdk_tool_name,
                "SdkToolVersion": self.sdk_tool_version,
                "Port": self.port,
            }
        )
        payload["LogPaths"] = None if self.log_paths is None else list(self.log_paths)
        return payload


@dataclass
class DescribePlayerSessionsRequest(Request):
    """Ask for player sessions matching the given filters."""

    action: MessageAction | str = MessageAction.DESCRIBE_PLAYER_SESSIONS
    game_session_id: str = ""
    player_id: str = ""
    player_session_id: str = ""
    player_session_status_filter: str = ""
    next_token: str = ""
    limit: int = 0

    def _payload(self) -> dict[str, Any]:
        return _without_empty(
            {
                "GameSessionId": self.game_session_id,
                "PlayerId": self.player_id,
                "PlayerSessionId": self.player_session_id,
                "PlayerSessionStatusFilter": self.player_session_status_filter,
                "NextToken": self.next_token,
                "Limit": self.limit,
            }
        )


@dataclass
class GetComputeCertificateRequest(Request):
    """Ask for the path to the compute's TLS certificate."""

    action: MessageAction | str = MessageAction.GET_COMPUTE_CERTIFICATE


@dataclass
class GetFleetRoleCredentialsRequest(Request):
    """Ask for credentials of the fleet's service role."""

    action: MessageAction | str = MessageAction.GET_FLEET_ROLE_CREDENTIALS
    role_arn: str = ""
    role_session_name: str = ""

    def _payload(self) -> dict[str, Any]:
        return _without_empty(
            {"RoleArn": self.role_arn, "RoleSessionName": self.role_session_name}
        )


@dataclass
class HeartbeatServerProcessRequest(Request):
    """Report the health of the server process."""

    action: MessageAction | str = MessageAction.HEARTBEAT_SERVER_PROCESS
    health_status: bool = False

    def _payload(self) -> dict[str, Any]:
        return {"HealthStatus": bool(self.health_status)}


@dataclass
class RemovePlayerSessionRequest(Request):
    """Report that a player has disconnected."""

    action: MessageAction | str = MessageAction.REMOVE_PLAYER_SESSION
    game_session_id: str = ""
    player_session_id: str = ""

    def _payload(self) -> dict[str, Any]:
        return _without_empty(
            {"GameSessionId": self.game_session_id, "PlayerSessionId": self.player_session_id}
        )


@dataclass
class StartMatchBackfillRequest(Request):
    """Ask the matchmaker to find players for open slots."""

    action: MessageAction | str = MessageAction.START_MATCH_BACKFILL
    game_session_arn: str = ""
    matchmaking_configuration_arn: str = ""
    ticket_id: str = ""
    players: list[Player] | None = None

    def _payload(self) -> dict[str, Any]:
        payload = _without_empty(
            {
                "GameSessionArn": self.game_session_arn,
                "MatchmakingConfigurationArn": self.matchmaking_configuration_arn,
            }
        )
        payload["TicketId"] = self.ticket_id
        payload["Players"] = (
            None if self.players is None else [player.to_dict() for player in self.players]
        )
        return payload


@dataclass
class StopMatchBackfillRequest(Request):
    """Cancel an active match backfill."""

    action: MessageAction | str = MessageAction.STOP_MATCH_BACKFILL
    game_session_arn: str = ""
    matchmaking_configuration_arn: str = ""
    ticket_id: str = ""

    def _payload(self) -> dict[str, Any]:
        return _without_empty(
            {
                "GameSessionArn": self.game_session_arn,
                "MatchmakingConfigurationArn": self.matchmaking_configuration_arn,
                "TicketId": self.ticket_id,
            }
        )


@dataclass
class TerminateServerProcessRequest(Request):
    """Report that the server process is shutting down."""

    action: MessageAction | str = MessageAction.TERMINATE_SERVER_PROCESS


@dataclass
class UpdatePlayerSessionCreationPolicyRequest(Request):
    """Change whether the game session accepts new players; an unset policy is left out."""

    action: MessageAction | str = MessageAction.UPDATE_PLAYER_SESSION_CREATION_POLICY
    game_session_id: str = ""
    player_session_policy: PlayerSessionCreationPolicy | None = None

    def _payload(self) -> dict[str, Any]:
        payload = _without_empty({"GameSessionId": self.game_session_id})
        if self.player_session_policy is not None:
            payload["PlayerSessionPolicy"] = self.player_session_policy.value
        return payload