import json

import pytest

from gamelift_server_sdk.enums import (
    BackfillMode,
    GameSessionStatus,
    PlayerSessionCreationPolicy,
    PlayerSessionStatus,
    UpdateReason,
)

GAME_SESSION_CASES = [
    (GameSessionStatus.ACTIVE, '"ACTIVE"'),
    (GameSessionStatus.ACTIVATING, '"ACTIVATING"'),
    (GameSessionStatus.TERMINATED, '"TERMINATED"'),
    (GameSessionStatus.TERMINATING, '"TERMINATING"'),
    (GameSessionStatus.NOT_SET, '"NOT_SET"'),
]

BACKFILL_CASES = [
    (BackfillMode.AUTOMATIC, '"AUTOMATIC"'),
    (BackfillMode.NOT_SET, '"NOT_SET"'),
    (BackfillMode.MANUAL, '"MANUAL"'),
]

PLAYER_SESSION_CASES = [
    (PlayerSessionStatus.ACTIVE, '"ACTIVE"'),
    (PlayerSessionStatus.COMPLETED, '"COMPLETED"'),
    (PlayerSessionStatus.NOT_SET, '"NOT_SET"'),
    (PlayerSessionStatus.RESERVED, '"RESERVED"'),
    (PlayerSessionStatus.TIMEDOUT, '"TIMEDOUT"'),
]

UPDATE_REASON_CASES = [
    (UpdateReason.UNKNOWN, '"UNKNOWN"'),
    (UpdateReason.MATCHMAKING_DATA_UPDATED, '"MATCHMAKING_DATA_UPDATED"'),
    (UpdateReason.BACKFILL_FAILED, '"BACKFILL_FAILED"'),
    (UpdateReason.BACKFILL_TIMED_OUT, '"BACKFILL_TIMED_OUT"'),
    (UpdateReason.BACKFILL_CANCELLED, '"BACKFILL_CANCELLED"'),
]

POLICY_CASES = [
    (PlayerSessionCreationPolicy.NOT_SET, '"NOT_SET"'),
    (PlayerSessionCreationPolicy.DENY_ALL, '"DENY_ALL"'),
    (PlayerSessionCreationPolicy.ACCEPT_ALL, '"ACCEPT_ALL"'),
]


@pytest.mark.parametrize("member,encoded", GAME_SESSION_CASES)
def test_game_session_status_marshal(member, encoded):
    parsed = GameSessionStatus.parse(member.value)
    assert json.dumps(parsed) == encoded
    assert json.dumps(str(parsed)) == encoded


@pytest.mark.parametrize("member,encoded", GAME_SESSION_CASES)
def test_game_session_status_unmarshal(member, encoded):
    assert GameSessionStatus.parse(json.loads(encoded)) is member


@pytest.mark.parametrize("member,encoded", BACKFILL_CASES)
def test_backfill_mode_marshal(member, encoded):
    parsed = BackfillMode.parse(member.value)
    assert json.dumps(parsed) == encoded
    assert json.dumps(str(parsed)) == encoded


@pytest.mark.parametrize("member,encoded", BACKFILL_CASES)
def test_backfill_mode_unmarshal(member, encoded):
    assert BackfillMode.parse(json.loads(encoded)) is member


@pytest.mark.parametrize("member,encoded", PLAYER_SESSION_CASES)
def test_player_session_status_marshal(member, encoded):
    parsed = PlayerSessionStatus.parse(member.value)
    assert json.dumps(parsed) == encoded
    assert json.dumps(str(parsed)) == encoded


@pytest.mark.parametrize("member,encoded", PLAYER_SESSION_CASES)
def test_player_session_status_unmarshal(member, encoded):
    assert PlayerSessionStatus.parse(json.loads(encoded)) is member


@pytest.mark.parametrize("member,encoded", UPDATE_REASON_CASES)
def test_update_reason_marshal(member, encoded):
    parsed = UpdateReason.parse(member.value)
    assert json.dumps(parsed) == encoded
    assert json.dumps(str(parsed)) == encoded


@pytest.mark.parametrize("member,encoded", UPDATE_REASON_CASES)
def test_update_reason_unmarshal(member, encoded):
    assert UpdateReason.parse(json.loads(encoded)) is member


@pytest.mark.parametrize("member,encoded", POLICY_CASES)
def test_creation_policy_marshal(member, encoded):
    parsed = PlayerSessionCreationPolicy.parse(member.value)
    assert json.dumps(parsed) == encoded
    assert json.dumps(str(parsed)) == encoded


@pytest.mark.parametrize("member,encoded", POLICY_CASES)
def test_creation_policy_unmarshal(member, encoded):
    assert PlayerSessionCreationPolicy.parse(json.loads(encoded)) is member


@pytest.mark.parametrize(
    "enum_cls,default",
    [
        (GameSessionStatus, GameSessionStatus.NOT_SET),
        (BackfillMode, BackfillMode.NOT_SET),
        (PlayerSessionCreationPolicy, PlayerSessionCreationPolicy.NOT_SET),
        (PlayerSessionStatus, PlayerSessionStatus.NOT_SET),
        (UpdateReason, UpdateReason.UNKNOWN),
    ],
)
def test_unknown_text_falls_back_to_default(enum_cls, default):
    assert enum_cls.parse("SOMETHING_ELSE") is default


def test_parse_is_case_sensitive():
    assert GameSessionStatus.parse("active") is GameSessionStatus.NOT_SET


def test_parse_rejects_non_string():
    with pytest.raises(TypeError):
        UpdateReason.parse(3)


def test_str_is_wire_text():
    assert str(BackfillMode.parse("MANUAL")) == "MANUAL"
    assert str(PlayerSessionStatus.parse("TIMEDOUT")) == "TIMEDOUT"