# gamelift-server-sdk

The data model a game server process uses to talk to Amazon GameLift Servers:
game and player sessions, matchmaker data, the messages and requests that go
over the service's WebSocket, the results that come back, and the errors the
SDK raises.

The package has no dependencies outside the standard library and supports
Python 3.10 and later.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Errors

`gamelift_server_sdk.errors` holds `GameLiftError`, an exception that carries
a `GameLiftErrorType` in its `error_type` attribute, together with `name` and
`message`. Where no name or message is given, the defaults for the type are
used.

```python
from gamelift_server_sdk.errors import (
    GameLiftError,
    GameLiftErrorType,
    error_type_for_status_code,
    error_type_from_message,
)

err = GameLiftError(GameLiftErrorType.PROCESS_NOT_ACTIVE)
str(err)
# '[GameLiftError: ErrorType={13}, ErrorName={Process not activated.},
#   ErrorMessage={The process has not yet been activated.}]'

error_type_from_message(str(err))        # GameLiftErrorType.PROCESS_NOT_ACTIVE
error_type_from_message("anything else") # GameLiftErrorType.UNKNOWN_EXCEPTION

GameLiftError.from_status_code(429, "slow down").error_type
# GameLiftErrorType.TOO_MANY_REQUESTS_EXCEPTION
error_type_for_status_code(418)          # GameLiftErrorType.BAD_REQUEST_EXCEPTION
error_type_for_status_code(503)          # GameLiftErrorType.INTERNAL_SERVICE_EXCEPTION
```

The same module has `Outcome`, a small dataclass holding the raw `data` bytes
of a service response and the `error`, if any.

## Validating input

```python
import re
from gamelift_server_sdk.validation import validate_string

validate_string("RoleArn", value, re.compile(r"^arn:.*"), 20, 2048, True, "")
```

`validate_string` raises a `GameLiftError` of type `VALIDATION_EXCEPTION`
when the value is empty but required, is shorter than `min_length` or longer
than `max_length`, or does not match the pattern. An empty value that is not
required passes. A `max_length` of `None` means there is no upper limit. The
pattern may be a string or a compiled pattern and is searched for anywhere in
the value; a non-empty `override_error_message` replaces the text of the
pattern error.

## The data model

* `gamelift_server_sdk.enums`: `GameSessionStatus`, `PlayerSessionStatus`,
  `PlayerSessionCreationPolicy`, `BackfillMode` and `UpdateReason`, string
  enumerations whose values are the service's upper-case text. Each has a
  `parse` class method that maps unknown text to its first member (`NOT_SET`,
  or `UNKNOWN` for `UpdateReason`) and raises `TypeError` for non-strings.
* `gamelift_server_sdk.attribute_value`: `AttributeValue`, `AttributeType`
  and `make_attribute_value`, which picks the attribute type from a Python
  value: a number gives `DOUBLE`, a string `STRING`, a list or tuple
  `STRING_LIST` (non-strings dropped), a dict `STRING_DOUBLE_MAP`
  (non-numeric values dropped), anything else `NONE`. `AttributeType.parse`
  ignores case.
* `gamelift_server_sdk.sessions`: `GameSession`, `Player`, `PlayerSession`
  and `UpdateGameSession`, all with `to_dict` and `from_dict` using the
  service's field names. Unset statuses and update reasons are left out of
  `to_dict`.
* `gamelift_server_sdk.matchmaker_data`: `MatchmakerData`, read from and
  written to the JSON found in `GameSession.matchmaker_data`. Players are
  grouped into teams when written and flattened again when read; empty text
  reads as empty data.

```python
from gamelift_server_sdk.matchmaker_data import MatchmakerData

data = MatchmakerData.from_json(session.matchmaker_data)
for player in data.players:
    print(player.team, player.player_id)
```

## Messages, requests and results

* `gamelift_server_sdk.messages`: `Message` (with `create`, which generates
  a request id), `MessageAction`, and the messages the service sends:
  `CreateGameSessionMessage`, `UpdateGameSessionMessage`,
  `TerminateProcessMessage`, `RefreshConnectionMessage` and
  `ResponseMessage`, each with `from_dict`.
  `CreateGameSessionMessage.to_game_session()` builds a `GameSession`.
* `gamelift_server_sdk.requests`: `Request` and the requests the server
  process sends: `AcceptPlayerSessionRequest`, `ActivateGameSessionRequest`,
  `ActivateServerProcessRequest`, `DescribePlayerSessionsRequest`,
  `GetComputeCertificateRequest`, `GetFleetRoleCredentialsRequest`,
  `HeartbeatServerProcessRequest`, `RemovePlayerSessionRequest`,
  `StartMatchBackfillRequest`, `StopMatchBackfillRequest`,
  `TerminateServerProcessRequest` and
  `UpdatePlayerSessionCreationPolicyRequest`. Each gets a fresh request id
  and its action by default, and serialises with `to_dict` or `to_json`
  (compact JSON); most empty fields are left out.
* `gamelift_server_sdk.results`: `DescribePlayerSessionsResult`,
  `GetComputeCertificateResult`, `GetFleetRoleCredentialsResult`,
  `StartMatchBackfillResult` and the matching `...Response` classes, each
  with `from_dict`.

```python
from gamelift_server_sdk.requests import HeartbeatServerProcessRequest

payload = HeartbeatServerProcessRequest(health_status=True).to_json()
# '{"Action":"HeartbeatServerProcess","RequestId":"...","HealthStatus":true}'
```

## What the package does not do

The package describes what is exchanged with the service; it does not
exchange it. There is no WebSocket connection, no retrying transport, no
heartbeat loop, no callbacks for starting or terminating game sessions, and no
process-level calls such as initialising the SDK, reporting the process ready
or ending it. Those have to be built on top of these types.