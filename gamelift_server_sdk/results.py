"""Results of service calls and the responses that carry them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .messages import Message
from .sessions import PlayerSession


@dataclass
class DescribePlayerSessionsResult:
    """A page of player sessions; an empty next_token marks the last page."""

    next_token: str = ""
    player_sessions: list[PlayerSession] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DescribePlayerSessionsResult:
        return cls(
            next_token=data.get("NextToken") or "",
            player_sessions=[
                PlayerSession.from_dict(item) for item in data.get("PlayerSessions") or []
            ],
        )


@dataclass
class GetComputeCertificateResult:
    """Location of the compute's TLS certificate and its host name."""

    certificate_path: str = ""
    compute_name: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GetComputeCertificateResult:
        return cls(
            certificate_path=data.get("CertificatePath") or "",
            compute_name=data.get("ComputeName") or "",
        )


@dataclass
class GetFleetRoleCredentialsResult:
    """Temporary credentials for the fleet's service role."""

    assumed_role_user_arn: str = ""
    assumed_role_id: str = ""
    access_key_id: str = ""
    secret_access_key: str = ""
    session_token: str = ""
    expiration: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GetFleetRoleCredentialsResult:
        return cls(
            assumed_role_user_arn=data.get("AssumedRoleUserArn") or "",
            assumed_role_id=data.get("AssumedRoleId") or "",
            access_key_id=data.get("AccessKeyId") or "",
            secret_access_key=data.get("SecretAccessKey") or "",
            session_token=data.get("SessionToken") or "",
            expiration=int(data.get("Expiration") or 0),
        )


@dataclass
class StartMatchBackfillResult:
    """The ticket id of a started match backfill."""

    ticket_id: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> StartMatchBackfillResult:
        return cls(ticket_id=data.get("TicketId") or "")


@dataclass
class DescribePlayerSessionsResponse(Message):
    """Reply to DescribePlayerSessions."""

    result: DescribePlayerSessionsResult = field(default_factory=DescribePlayerSessionsResult)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DescribePlayerSessionsResponse:
        base = Message.from_dict(data)
        return cls(
            action=base.action,
            request_id=base.request_id,
            result=DescribePlayerSessionsResult.from_dict(data),
        )


@dataclass
class GetComputeCertificateResponse(Message):
    """Reply to GetComputeCertificate."""

    result: GetComputeCertificateResult = field(default_factory=GetComputeCertificateResult)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GetComputeCertificateResponse:
        base = Message.from_dict(data)
        return cls(
            action=base.action,
            request_id=base.request_id,
            result=GetComputeCertificateResult.from_dict(data),
        )


@dataclass
class GetFleetRoleCredentialsResponse(Message):
    """Reply to GetFleetRoleCredentials."""

    result: GetFleetRoleCredentialsResult = field(default_factory=GetFleetRoleCredentialsResult)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GetFleetRoleCredentialsResponse:
        base = Message.from_dict(data)
        return cls(
            action=base.action,
            request_id=base.request_id,
            result=GetFleetRoleCredentialsResult.from_dict(data),
        )


@dataclass
class StartMatchBackfillResponse(Message):
    """Reply to StartMatchBackfill."""

    result: StartMatchBackfillResult = field(default_factory=StartMatchBackfillResult)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> StartMatchBackfillResponse:
        base = Message.from_dict(data)
        return cls(
            action=base.action,
            request_id=base.request_id,
            result=StartMatchBackfillResult.from_dict(data),
        )