import json
import uuid

from gamelift_server_sdk.enums import GameSessionStatus, UpdateReason
from gamelift_server_sdk.messages import (
    CreateGameSessionMessage,
    Message,
    MessageAction,
    RefreshConnectionMessage,
    ResponseMessage,
    TerminateProcessMessage,
    UpdateGameSessionMessage,
)
from gamelift_server_sdk.sessions import GameSession, UpdateGameSession

GAME_SESSION_JSON = """{
    "Action": "CreateGameSession",
    "MaximumPlayerSessionCount": 1000,
    "Port": 1122,
    "IpAddress": "test.com",
    "GameSessionId": "game_session_id",
    "GameSessionName": "game_session_name",
    "GameSessionData": "game_session_data",
    "MatchmakerData": "{}",
    "GameProperties": {
        "property_1": "value_1",
        "property_2": "value_2",
        "property_3": "value_3",
        "property_4": "value_4"
    }
}"""


def test_new_game_session_from_create_message():
    message = CreateGameSessionMessage.from_dict(json.loads(GAME_SESSION_JSON))
    assert message.action == "CreateGameSession"
    assert message.action is MessageAction.CREATE_GAME_SESSION
    session = message.to_game_session()
    assert session.maximum_player_session_count == 1000
    assert session.port == 1122
    assert session.ip_address == "test.com"
    assert session.game_session_id == "game_session_id"
    assert session.name == "game_session_name"
    assert session.game_session_data == "game_session_data"
    assert session.matchmaker_data == "{}"
    assert session.game_properties == message.game_properties
    assert session.game_properties["property_3"] == "value_3"


def test_create_message_round_trip():
    message = CreateGameSessionMessage.from_dict(json.loads(GAME_SESSION_JSON))
    assert CreateGameSessionMessage.from_dict(message.to_dict()) == message


def test_create_generates_uuid_request_id():
    first = Message.create(MessageAction.HEARTBEAT_SERVER_PROCESS)
    second = Message.create(MessageAction.HEARTBEAT_SERVER_PROCESS)
    assert str(uuid.UUID(first.request_id)) == first.request_id
    assert first.request_id != second.request_id
    assert first.action is MessageAction.HEARTBEAT_SERVER_PROCESS


def test_message_to_dict_uses_wire_names():
    message = Message(MessageAction.REFRESH_CONNECTION, "req-1")
    assert message.to_dict() == {"Action": "RefreshConnection", "RequestId": "req-1"}


def test_unknown_action_is_kept_as_text():
    message = Message.from_dict({"Action": "SomethingElse", "RequestId": "r"})
    assert message.action == "SomethingElse"
    assert message.to_dict()["Action"] == "SomethingElse"


def test_missing_fields_default_to_empty():
    message = Message.from_dict({})
    assert message == Message("", "")


def test_response_message_from_dict():
    response = ResponseMessage.from_dict(
        {"Action": "ActivateGameSession", "RequestId": "r1", "StatusCode": 404, "ErrorMessage": "gone"}
    )
    assert response.action is MessageAction.ACTIVATE_GAME_SESSION
    assert response.request_id == "r1"
    assert response.status_code == 404
    assert response.error_message == "gone"
    assert ResponseMessage.from_dict(response.to_dict()) == response


def test_refresh_connection_message():
    message = RefreshConnectionMessage.from_dict(
        {
            "Action": "RefreshConnection",
            "RequestId": "r2",
            "RefreshConnectionEndpoint": "wss://localhost:8080",
            "AuthToken": "token",
        }
    )
    assert message.refresh_connection_endpoint == "wss://localhost:8080"
    assert message.auth_token == "token"
    assert RefreshConnectionMessage.from_dict(message.to_dict()) == message


def test_terminate_process_message():
    message = TerminateProcessMessage.from_dict(
        {"Action": "TerminateProcess", "RequestId": "r3", "TerminationTime": 1469498468057}
    )
    assert message.action is MessageAction.TERMINATE_PROCESS
    assert message.termination_time == 1469498468057


def test_update_game_session_message_is_flat_on_the_wire():
    data = {
        "Action": "UpdateGameSession",
        "RequestId": "r4",
        "BackfillTicketId": "ticket-1",
        "GameSession": {"GameSessionId": "gs-1", "Status": "ACTIVE"},
        "UpdateReason": "BACKFILL_FAILED",
    }
    message = UpdateGameSessionMessage.from_dict(data)
    update = message.update_game_session
    assert update.backfill_ticket_id == "ticket-1"
    assert update.game_session.game_session_id == "gs-1"
    assert update.game_session.status is GameSessionStatus.ACTIVE
    assert update.update_reason is UpdateReason.BACKFILL_FAILED
    wire = message.to_dict()
    assert wire["BackfillTicketId"] == "ticket-1"
    assert wire["RequestId"] == "r4"
    assert UpdateGameSessionMessage.from_dict(wire) == message


def test_update_message_without_reason():
    message = UpdateGameSessionMessage(
        MessageAction.UPDATE_GAME_SESSION,
        "r5",
        UpdateGameSession(game_session=GameSession(name="match")),
    )
    wire = message.to_dict()
    assert "UpdateReason" not in wire
    assert UpdateGameSessionMessage.from_dict(wire).update_game_session.game_session.name == "match"