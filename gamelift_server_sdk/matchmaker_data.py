"""Matchmaker data attached to a game session, in its team-grouped wire form."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from .attribute_value import AttributeType, AttributeValue, make_attribute_value
from .enums import BackfillMode
from .sessions import Player


def _attribute_to_wire(value: AttributeValue) -> dict[str, Any]:
    payloads = {
        AttributeType.STRING: lambda: value.s,
        AttributeType.DOUBLE: lambda: value.n,
        AttributeType.STRING_LIST: lambda: list(value.sl),
        AttributeType.STRING_DOUBLE_MAP: lambda: dict(value.sdm),
    }
    payload = payloads.get(value.attr_type)
    if payload is None:
        return {"attributeType": AttributeType.NONE.value, "valueAttribute": None}
    return {"attributeType": value.attr_type.value, "valueAttribute": payload()}


@dataclass
class MatchmakerData:
    """Match details: the players of all teams and the backfill settings."""

    match_id: str = ""
    matchmaking_configuration_arn: str = ""
    players: list[Player] = field(default_factory=list)
    auto_backfill_ticket_id: str = ""
    backfill_mode: BackfillMode = BackfillMode.NOT_SET

    def to_dict(self) -> dict[str, Any]:
        """Return the wire form, with players grouped into teams in order of appearance."""
        teams: dict[str, list[Player]] = {}
        for player in self.players:
            teams.setdefault(player.team, []).append(player)
        return {
            "matchId": self.match_id,
            "matchmakingConfigurationArn": self.matchmaking_configuration_arn,
            "teams": [
                {
                    "name": name,
                    "players": [
                        {
                            "playerId": player.player_id,
                            "attributes": {
                                key: _attribute_to_wire(value)
                                for key, value in player.player_attributes.items()
                            },
                        }
                        for player in members
                    ],
                }
                for name, members in teams.items()
            ],
            "autoBackfillTicketId": self.auto_backfill_ticket_id,
            "autoBackfillMode": self.backfill_mode.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MatchmakerData:
        """Build MatchmakerData from its wire form.

        Attribute types follow the JSON type of each value, not the declared type.
        """
        players = [
            Player(
                player_id=player.get("playerId") or "",
                team=team.get("name") or "",
                player_attributes={
                    key: make_attribute_value((attribute or {}).get("valueAttribute"))
                    for key, attribute in (player.get("attributes") or {}).items()
                },
            )
            for team in data.get("teams") or []
            for player in team.get("players") or []
        ]
        return cls(
            match_id=data.get("matchId") or "",
            matchmaking_configuration_arn=data.get("matchmakingConfigurationArn") or "",
            players=players,
            auto_backfill_ticket_id=data.get("autoBackfillTicketId") or "",
            backfill_mode=BackfillMode.parse(data.get("autoBackfillMode") or ""),
        )

    def to_json(self) -> str:
        """Serialise to the JSON text carried in a game session."""
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, text: str | bytes) -> MatchmakerData:
        """Parse the JSON text carried in a game session; empty text gives empty data."""
        if not text:
            return cls()
        return cls.from_dict(json.loads(text))