"""Matchmaking attribute values of one of several data types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from numbers import Real
from typing import Any


class AttributeType(str, Enum):
    """The data type held by an AttributeValue."""

    NONE = "NONE"
    STRING = "STRING"
    DOUBLE = "DOUBLE"
    STRING_LIST = "STRING_LIST"
    STRING_DOUBLE_MAP = "STRING_DOUBLE_MAP"

    @classmethod
    def parse(cls, value):
        """Return the type named by value, ignoring case; unknown names give NONE."""
        if not isinstance(value, str):
            raise TypeError(f"AttributeType must be parsed from a string, got {value!r}")
        folded = value.casefold()
        for member in cls:
            if member.value.casefold() == folded:
                return member
        return cls.NONE

    def __str__(self) -> str:
        return self.value


@dataclass
class AttributeValue:
    """An attribute value; only the field matching attr_type is meaningful."""

    attr_type: AttributeType = AttributeType.NONE
    n: float = 0.0
    s: str = ""
    sl: list[str] = field(default_factory=list)
    sdm: dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return the wire form; a DOUBLE always carries N and nothing else."""
        result: dict[str, Any] = {"AttrType": self.attr_type.value}
        if self.attr_type is AttributeType.DOUBLE:
            result["N"] = self.n
            return result
        if self.n:
            result["N"] = self.n
        if self.s:
            result["S"] = self.s
        if self.sl:
            result["SL"] = list(self.sl)
        if self.sdm:
            result["SDM"] = dict(self.sdm)
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AttributeValue:
        """Build an AttributeValue from its wire form."""
        attr_type = data.get("AttrType")
        return cls(
            attr_type=AttributeType.parse(attr_type) if attr_type is not None else AttributeType.NONE,
            n=float(data.get("N") or 0.0),
            s=data.get("S") or "",
            sl=list(data.get("SL") or []),
            sdm={key: float(val) for key, val in (data.get("SDM") or {}).items()},
        )


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def make_attribute_value(arg: Any) -> AttributeValue:
    """Build an AttributeValue whose type follows the Python type of arg.

    Numbers become DOUBLE, strings STRING, lists STRING_LIST (non-strings dropped),
    dicts STRING_DOUBLE_MAP (non-numeric values dropped); anything else is NONE.
    """
    if _is_number(arg):
        return AttributeValue(AttributeType.DOUBLE, n=float(arg))
    if isinstance(arg, str):
        return AttributeValue(AttributeType.STRING, s=arg)
    if isinstance(arg, (list, tuple)):
        return AttributeValue(
            AttributeType.STRING_LIST, sl=[item for item in arg if isinstance(item, str)]
        )
    if isinstance(arg, dict):
        return AttributeValue(
            AttributeType.STRING_DOUBLE_MAP,
            sdm={
                key: float(val)
                for key, val in arg.items()
                if isinstance(key, str) and _is_number(val)
            },
        )
    return AttributeValue(AttributeType.NONE)