from __future__ import annotations

from typing import Any, Iterable

from sipgate_team_bridge.bridge.models import (
    Contact,
    ContactTemplate,
    PhoneNumber,
    PhoneNumberLabel,
)
from sipgate_team_bridge.sipgate.models import Scope, SipgateContact

SIPGATE_TEAM_CONTACTS_URL = "https://app.sipgate.com/team/contacts"

DEFAULT_TYPE = ["work"]

_LISTED_SCOPES = {Scope.SHARED.value, Scope.PRIVATE.value}

# Checked in order; fax combinations must win over the plain work/home tags.
_LABEL_RULES: list[tuple[frozenset[str], PhoneNumberLabel]] = [
    (frozenset({"fax", "work"}), PhoneNumberLabel.WORKFAX),
    (frozenset({"fax", "home"}), PhoneNumberLabel.HOMEFAX),
    (frozenset({"fax"}), PhoneNumberLabel.OTHERFAX),
    (frozenset({"pager"}), PhoneNumberLabel.PAGER),
    (frozenset({"cell"}), PhoneNumberLabel.MOBILE),
    (frozenset({"work"}), PhoneNumberLabel.WORK),
    (frozenset({"home"}), PhoneNumberLabel.HOME),
    (frozenset({"other"}), PhoneNumberLabel.OTHER),
]


def phone_number_label(tags: Iterable[str]) -> PhoneNumberLabel:
    """Pick the bridge label for a sipgate number from its type tags (case-insensitive)."""
    normalized = {t.lower() for t in tags if t}
    for required, label in _LABEL_RULES:
        if required <= normalized:
            return label
    return PhoneNumberLabel.WORK


def split_name(name: str | None) -> tuple[str, str]:
    first, _, last = (name or "").strip().partition(" ")
    return first, last.strip()


def select_name(name: str | None, first_name: str | None = None, last_name: str | None = None) -> str:
    if name:
        return name
    if first_name or last_name:
        return f"{first_name or ''} {last_name or ''}"
    return ""


def is_listed(contact: SipgateContact) -> bool:
    return contact.scope in _LISTED_SCOPES


def to_canonical(contact: SipgateContact, contact_url: str = SIPGATE_TEAM_CONTACTS_URL) -> Contact:
    first_name, last_name = split_name(contact.name)
    email = contact.emails[0].email if contact.emails else ""
    organization = contact.organization[0][0] if contact.organization and contact.organization[0] else ""

    return Contact(
        id=contact.id,
        name=contact.name,
        first_name=first_name,
        last_name=last_name,
        email=email,
        organization=organization,
        phone_numbers=[
            PhoneNumber(label=phone_number_label(n.type), phone_number=n.number)
            for n in contact.numbers
        ],
        contact_url=contact_url,
        avatar_url=None,
    )


def to_provider_payload(
    contact_id: str,
    contact: ContactTemplate,
    existing: SipgateContact | None = None,
) -> dict[str, Any]:
    """Build the sipgate PUT body for ``contact``.

    Emails, organization and numbers replace whatever sipgate holds. Type tags,
    picture and addresses are taken over from ``existing`` where it has them.
    """
    emails: list[dict[str, Any]] = []
    if contact.email:
        emails.append({"email": contact.email, "type": _existing_email_type(existing, contact.email)})

    return {
        "id": contact_id,
        "name": select_name(contact.name, contact.first_name, contact.last_name),
        "emails": emails,
        "organization": [[contact.organization, ""]] if contact.organization else [],
        "numbers": [
            {"number": p.phone_number, "type": _existing_number_type(existing, p.phone_number)}
            for p in contact.phone_numbers
        ],
        "scope": Scope.SHARED.value,
        "picture": existing.picture if existing else None,
        "addresses": list(existing.addresses) if existing else [],
    }


def _existing_email_type(existing: SipgateContact | None, address: str) -> list[str]:
    if existing is not None:
        for e in existing.emails:
            if e.email == address:
                return list(e.type)
    return list(DEFAULT_TYPE)


def _existing_number_type(existing: SipgateContact | None, number: str) -> list[str]:
    if existing is not None:
        for n in existing.numbers:
            if n.number == number:
                return list(n.type)
    return list(DEFAULT_TYPE)
