"""Messages exchanged with the service over the websocket."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .sessions import GameSession, UpdateGameSession


class MessageAction(str, Enum):
    """The action a message carries."""

    ACCEPT_PLAYER_SESSION = "AcceptPlayerSession"
    ACTIVATE_GAME_SESSION = "ActivateGameSession"
    TERMINATE_SERVER_PROCESS = "TerminateServerProcess"
    ACTIVATE_SERVER_PROCESS = "ActivateServerProcess"
    UPDATE_PLAYER_SESSION_CREATION_POLICY = "UpdatePlayerSessionCreationPolicy"
    CREATE_GAME_SESSION = "CreateGameSession"
    UPDATE_GAME_SESSION = "UpdateGameSession"
    START_MATCH_BACKFILL = "StartMatchBackfill"
    TERMINATE_PROCESS = "TerminateProcess"
    DESCRIBE_PLAYER_SESSIONS = "DescribePlayerSessions"
    STOP_MATCH_BACKFILL = "StopMatchBackfill"
    HEARTBEAT_SERVER_PROCESS = "HeartbeatServerProcess"
    GET_COMPUTE_CERTIFICATE = "GetComputeCertificate"
    GET_FLEET_ROLE_CREDENTIALS = "GetFleetRoleCredentials"
    REFRESH_CONNECTION = "RefreshConnection"
    REMOVE_PLAYER_SESSION = "RemovePlayerSession"

    def __str__(self) -> str:
        return self.value


def _parse_action(value: Any) -> MessageAction | str:
    text = value or ""
    try:
        return MessageAction(text)
    except ValueError:
        return text


@dataclass
class Message:
    """A message with its action and the request id that pairs it with a reply.

    Actions the SDK does not know are kept as plain strings.
    """

    action: MessageAction | str = ""
    request_id: str = ""

    @classmethod
    def create(cls, action: MessageAction | str) -> Message:
        """Return a message for action with a freshly generated request id."""
        return cls(action=action, request_id=str(uuid.uuid4()))

    def to_dict(self) -> dict[str, Any]:
        """Return the wire form."""
        return {"Action": str(self.action), "RequestId": self.request_id}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Message:
        """Build a message from its wire form."""
        return cls(
            action=_parse_action(data.get("Action")),
            request_id=data.get("RequestId") or "",
        )


@dataclass
class ResponseMessage(Message):
    """A reply from the service with its status code and error text."""

    status_code: int = 0
    error_message: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            **super().to_dict(),
            "StatusCode": self.status_code,
            "ErrorMessage": self.error_message,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ResponseMessage:
        base = Message.from_dict(data)
        return cls(
            action=base.action,
            request_id=base.request_id,
            status_code=int(data.get("StatusCode") or 0),
            error_message=data.get("ErrorMessage") or "",
        )


@dataclass
class CreateGameSessionMessage(Message):
    """A request from the service to start a new game session."""

    maximum_player_session_count: int = 0
    port: int = 0
    ip_address: str = ""
    game_session_id: str = ""
    game_session_name: str = ""
    game_session_data: str = ""
    matchmaker_data: str = ""
    dns_name: str = ""
    game_properties: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            **super().to_dict(),
            "MaximumPlayerSessionCount": self.maximum_player_session_count,
            "Port": self.port,
            "IpAddress": self.ip_address,
            "GameSessionId": self.game_session_id,
            "GameSessionName": self.game_session_name,
            "GameSessionData": self.game_session_data,
            "MatchmakerData": self.matchmaker_data,
            "DnsName": self.dns_name,
            "GameProperties": dict(self.game_properties),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CreateGameSessionMessage:
        base = Message.from_dict(data)
        return cls(
            action=base.action,
            request_id=base.request_id,
            maximum_player_session_count=int(data.get("MaximumPlayerSessionCount") or 0),
            port=int(data.get("Port") or 0),
            ip_address=data.get("IpAddress") or "",
            game_session_id=data.get("GameSessionId") or "",
            game_session_name=data.get("GameSessionName") or "",
            game_session_data=data.get("GameSessionData") or "",
            matchmaker_data=data.get("MatchmakerData") or "",
            dns_name=data.get("DnsName") or "",
            game_properties=dict(data.get("GameProperties") or {}),
        )

    def to_game_session(self) -> GameSession:
        """Return the game session this message describes."""
        return GameSession(
            game_session_id=self.game_session_id,
            game_session_data=self.game_session_data,
            name=self.game_session_name,
            matchmaker_data=self.matchmaker_data,
            maximum_player_session_count=self.maximum_player_session_count,
            ip_address=self.ip_address,
            port=self.port,
            dns_name=self.dns_name,
            game_properties=dict(self.game_properties),
        )


@dataclass
class RefreshConnectionMessage(Message):
    """A request from the service to reconnect to a new endpoint."""

    refresh_connection_endpoint: str = ""
    auth_token: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            **super().to_dict(),
            "RefreshConnectionEndpoint": self.refresh_connection_endpoint,
            "AuthToken": self.auth_token,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RefreshConnectionMessage:
        base = Message.from_dict(data)
        return cls(
            action=base.action,
            request_id=base.request_id,
            refresh_connection_endpoint=data.get("RefreshConnectionEndpoint") or "",
            auth_token=data.get("AuthToken") or "",
        )


@dataclass
class TerminateProcessMessage(Message):
    """Notice that the process is to be terminated.

    termination_time is in milliseconds since the Unix epoch.
    """

    termination_time: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "TerminationTime": self.termination_time}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TerminateProcessMessage:
        base = Message.from_dict(data)
        return cls(
            action=base.action,
            request_id=base.request_id,
            termination_time=int(data.get("TerminationTime") or 0),
        )


@dataclass
class UpdateGameSessionMessage(Message):
    """Notice of an update to the current game session."""

    update_game_session: UpdateGameSession = field(default_factory=UpdateGameSession)

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), **self.update_game_session.to_dict()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UpdateGameSessionMessage:
        base = Message.from_dict(data)
        return cls(
            action=base.action,
            request_id=base.request_id,
            update_game_session=UpdateGameSession.from_dict(data),
        )