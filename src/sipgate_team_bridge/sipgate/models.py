from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Scope(str, Enum):
    SHARED = "SHARED"
    PRIVATE = "PRIVATE"
    INTERNAL = "INTERNAL"
    ALL = "ALL"


@dataclass(frozen=True)
class SipgateEmail:
    email: str
    type: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class SipgateNumber:
    number: str
    type: list[str] = field(default_factory=list)


@dataclass
class SipgateContact:
    """A contact as stored by sipgate. ``scope`` keeps whatever string the API sent."""

    id: str
    name: str
    scope: str
    emails: list[SipgateEmail] = field(default_factory=list)
    numbers: list[SipgateNumber] = field(default_factory=list)
    organization: list[list[str]] = field(default_factory=list)
    picture: str | None = None
    addresses: list[dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> SipgateContact:
        return cls(
            id=data.get("id", ""),
            name=data.get("name") or "",
            scope=data.get("scope", ""),
            emails=[
                SipgateEmail(email=e.get("email", ""), type=list(e.get("type") or []))
                for e in data.get("emails") or []
            ],
            numbers=[
                SipgateNumber(number=n.get("number", ""), type=list(n.get("type") or []))
                for n in data.get("numbers") or []
            ],
            organization=[list(org) for org in data.get("organization") or []],
            picture=data.get("picture"),
            addresses=list(data.get("addresses") or []),
        )

    def to_api(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "emails": [{"email": e.email, "type": list(e.type)} for e in self.emails],
            "numbers": [{"number": n.number, "type": list(n.type)} for n in self.numbers],
            "organization": [list(org) for org in self.organization],
            "scope": self.scope,
            "picture": self.picture,
            "addresses": list(self.addresses),
        }
