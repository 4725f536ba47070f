from __future__ import annotations

import json
import uuid
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from loguru import logger

from sipgate_team_bridge.bridge.adapter import ServerError
from sipgate_team_bridge.bridge.models import Config, Contact, ContactTemplate, ContactUpdate
from sipgate_team_bridge.contact_mapper import (
    SIPGATE_TEAM_CONTACTS_URL,
    is_listed,
    to_canonical,
    to_provider_payload,
)
from sipgate_team_bridge.sipgate.client import DEFAULT_BASE_URL, SipgateClient, get_sipgate_client
from sipgate_team_bridge.sipgate.models import Scope


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.text or f"HTTP {response.status_code}"


class SipgateTeamAdapter:
    """Bridge adapter backed by the sipgate Team contacts API."""

    def __init__(
        self,
        api_base_url: str = DEFAULT_BASE_URL,
        contacts_url: str = SIPGATE_TEAM_CONTACTS_URL,
        timeout_seconds: float = 30,
        page_size: int = 5000,
    ):
        self._api_base_url = api_base_url
        self._contacts_url = contacts_url
        self._timeout_seconds = timeout_seconds
        self._page_size = page_size

    async def get_contacts(self, config: Config) -> list[Contact]:
        with logger.contextualize(operation="get_contacts"):
            async with self._sipgate(config, "get_contacts") as client:
                response_contacts = await client.get_contacts(Scope.ALL)

            contacts = [to_canonical(c, self._contacts_url) for c in response_contacts if is_listed(c)]
            logger.info(f"Listed {len(contacts)} of {len(response_contacts)} sipgate contact(s)")
            return contacts

    async def create_contact(self, config: Config, contact: ContactTemplate) -> Contact:
        contact_id = str(uuid.uuid4())
        with logger.contextualize(operation="create_contact", contact_id=contact_id):
            payload = to_provider_payload(contact_id, contact)
            logger.debug(f"payload: {json.dumps(payload)}")

            async with self._sipgate(config, "create_contact") as client:
                await client.update_contact(payload)

            logger.info("Created sipgate contact")
            return self._echo(contact_id, contact)

    async def update_contact(self, config: Config, id: str, contact: ContactUpdate) -> Contact:
        with logger.contextualize(operation="update_contact", contact_id=id):
            async with self._sipgate(config, "update_contact") as client:
                shared = await client.get_contacts(Scope.SHARED)
                existing = next((c for c in shared if c.id == id), None)
                if existing is None:
                    logger.warning("Contact not found in shared contacts; existing fields cannot be kept")

                payload = to_provider_payload(id, contact, existing)
                logger.debug(f"payload: {json.dumps(payload)}")
                await client.update_contact(payload)

            logger.info("Updated sipgate contact")
            return self._echo(id, contact)

    async def delete_contact(self, config: Config, id: str) -> None:
        with logger.contextualize(operation="delete_contact", contact_id=id):
            async with self._sipgate(config, "delete_contact") as client:
                await client.delete_contact(id)

            logger.info("Deleted sipgate contact")

    def _echo(self, contact_id: str, contact: ContactTemplate) -> Contact:
        return Contact(
            id=contact_id,
            name=contact.name,
            first_name=contact.first_name,
            last_name=contact.last_name,
            email=contact.email,
            organization=contact.organization,
            phone_numbers=list(contact.phone_numbers),
            contact_url=self._contacts_url,
            avatar_url=None,
        )

    @asynccontextmanager
    async def _sipgate(self, config: Config, operation: str) -> AsyncIterator[SipgateClient]:
        try:
            client = get_sipgate_client(
                config.api_key,
                base_url=config.api_url or self._api_base_url,
                timeout=self._timeout_seconds,
                page_size=self._page_size,
            )
        except ValueError as ex:
            logger.error(f"{operation} rejected credentials: {ex}")
            raise ServerError(401, str(ex)) from ex

        try:
            yield client
        except httpx.HTTPStatusError as ex:
            status = ex.response.status_code
            message = _error_message(ex.response)
            logger.error(f"{operation} failed: HTTP {status} -- {message}")
            raise ServerError(status, message) from ex
        except (httpx.HTTPError, ValueError, KeyError) as ex:
            logger.error(f"{operation} failed: {ex}")
            raise ServerError(500, str(ex) or type(ex).__name__) from ex
        finally:
            await client.aclose()
