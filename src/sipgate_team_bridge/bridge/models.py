from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class PhoneNumberLabel(str, Enum):
    WORK = "WORK"
    HOME = "HOME"
    MOBILE = "MOBILE"
    HOMEFAX = "HOMEFAX"
    WORKFAX = "WORKFAX"
    OTHERFAX = "OTHERFAX"
    PAGER = "PAGER"
    OTHER = "OTHER"


@dataclass(frozen=True)
class Config:
    api_key: str
    api_url: str | None = None
    locale: str | None = None


@dataclass(frozen=True)
class PhoneNumber:
    label: PhoneNumberLabel
    phone_number: str


@dataclass
class ContactTemplate:
    name: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    organization: str | None = None
    phone_numbers: list[PhoneNumber] = field(default_factory=list)


@dataclass
class ContactUpdate(ContactTemplate):
    id: str = ""


@dataclass
class Contact:
    id: str
    name: str | None
    first_name: str | None
    last_name: str | None
    email: str | None
    organization: str | None
    phone_numbers: list[PhoneNumber]
    contact_url: str | None
    avatar_url: str | None
