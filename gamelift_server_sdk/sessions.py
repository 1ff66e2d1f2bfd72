"""Game session, player and player session data."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .attribute_value import AttributeValue
from .enums import GameSessionStatus, PlayerSessionStatus, UpdateReason


@dataclass
class GameSession:
    """A game session hosted by the server process."""

    game_session_id: str = ""
    game_session_data: str = ""
    name: str = ""
    matchmaker_data: str = ""
    fleet_id: str = ""
    location: str = ""
    maximum_player_session_count: int = 0
    ip_address: str = ""
    port: int = 0
    dns_name: str = ""
    game_properties: dict[str, str] = field(default_factory=dict)
    status: GameSessionStatus | None = None
    status_reason: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the wire form; Status is left out when unset."""
        result: dict[str, Any] = {
            "GameSessionId": self.game_session_id,
            "GameSessionData": self.game_session_data,
            "Name": self.name,
            "MatchmakerData": self.matchmaker_data,
            "FleetId": self.fleet_id,
            "Location": self.location,
            "MaximumPlayerSessionCount": self.maximum_player_session_count,
            "IpAddress": self.ip_address,
            "Port": self.port,
            "DnsName": self.dns_name,
            "GameProperties": dict(self.game_properties),
        }
        if self.status is not None:
            result["Status"] = self.status.value
        result["StatusReason"] = self.status_reason
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GameSession:
        """Build a GameSession from its wire form."""
        status = data.get("Status")
        return cls(
            game_session_id=data.get("GameSessionId") or "",
            game_session_data=data.get("GameSessionData") or "",
            name=data.get("Name") or "",
            matchmaker_data=data.get("MatchmakerData") or "",
            fleet_id=data.get("FleetId") or "",
            location=data.get("Location") or "",
            maximum_player_session_count=int(data.get("MaximumPlayerSessionCount") or 0),
            ip_address=data.get("IpAddress") or "",
            port=int(data.get("Port") or 0),
            dns_name=data.get("DnsName") or "",
            game_properties=dict(data.get("GameProperties") or {}),
            status=GameSessionStatus.parse(status) if status is not None else None,
            status_reason=data.get("StatusReason") or "",
        )


@dataclass
class Player:
    """A player in matchmaking, with attributes and regional latencies."""

    player_id: str = ""
    team: str = ""
    player_attributes: dict[str, AttributeValue] = field(default_factory=dict)
    latency_in_ms: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return the wire form."""
        return {
            "PlayerId": self.player_id,
            "Team": self.team,
            "PlayerAttributes": {
                key: value.to_dict() for key, value in self.player_attributes.items()
            },
            "LatencyInMs": dict(self.latency_in_ms),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Player:
        """Build a Player from its wire form."""
        return cls(
            player_id=data.get("PlayerId") or "",
            team=data.get("Team") or "",
            player_attributes={
                key: AttributeValue.from_dict(value)
                for key, value in (data.get("PlayerAttributes") or {}).items()
            },
            latency_in_ms={
                key: int(value) for key, value in (data.get("LatencyInMs") or {}).items()
            },
        )


@dataclass
class PlayerSession:
    """Details of a player's connection to the game server."""

    player_id: str = ""
    player_session_id: str = ""
    game_session_id: str = ""
    fleet_id: str = ""
    player_data: str = ""
    ip_address: str = ""
    port: int = 0
    creation_time: int = 0
    termination_time: int = 0
    dns_name: str = ""
    status: PlayerSessionStatus | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the wire form; Status is left out when unset."""
        result: dict[str, Any] = {
            "PlayerId": self.player_id,
            "PlayerSessionId": self.player_session_id,
            "GameSessionId": self.game_session_id,
            "FleetId": self.fleet_id,
            "PlayerData": self.player_data,
            "IpAddress": self.ip_address,
            "Port": self.port,
            "CreationTime": self.creation_time,
            "TerminationTime": self.termination_time,
            "DnsName": self.dns_name,
        }
        if self.status is not None:
            result["Status"] = self.status.value
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PlayerSession:
        """Build a PlayerSession from its wire form."""
        status = data.get("Status")
        return cls(
            player_id=data.get("PlayerId") or "",
            player_session_id=data.get("PlayerSessionId") or "",
            game_session_id=data.get("GameSessionId") or "",
            fleet_id=data.get("FleetId") or "",
            player_data=data.get("PlayerData") or "",
            ip_address=data.get("IpAddress") or "",
            port=int(data.get("Port") or 0),
            creation_time=int(data.get("CreationTime") or 0),
            termination_time=int(data.get("TerminationTime") or 0),
            dns_name=data.get("DnsName") or "",
            status=PlayerSessionStatus.parse(status) if status is not None else None,
        )


@dataclass
class UpdateGameSession:
    """An update to the mutable properties of a game session."""

    backfill_ticket_id: str = ""
    game_session: GameSession = field(default_factory=GameSession)
    update_reason: UpdateReason | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the wire form; UpdateReason is left out when unset."""
        result: dict[str, Any] = {
            "BackfillTicketId": self.backfill_ticket_id,
            "GameSession": self.game_session.to_dict(),
        }
        if self.update_reason is not None:
            result["UpdateReason"] = self.update_reason.value
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UpdateGameSession:
        """Build an UpdateGameSession from its wire form."""
        reason = data.get("UpdateReason")
        return cls(
            backfill_ticket_id=data.get("BackfillTicketId") or "",
            game_session=GameSession.from_dict(data.get("GameSession") or {}),
            update_reason=UpdateReason.parse(reason) if reason is not None else None,
        )