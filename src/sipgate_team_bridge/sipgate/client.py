from typing import Any

import httpx
from loguru import logger

from sipgate_team_bridge.sipgate.models import Scope, SipgateContact

DEFAULT_BASE_URL = "https://api.sipgate.com/v2"
_TIMEOUT_SECONDS = 30
_PAGE_SIZE = 5000


def parse_api_key(api_key: str) -> tuple[str, str]:
    """Split a ``tokenId:token`` credential into its two parts."""
    token_id, sep, token = (api_key or "").partition(":")
    if not sep or not token_id or not token:
        raise ValueError("API key must have the form 'tokenId:token'")
    return token_id, token


class SipgateClient:
    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = _TIMEOUT_SECONDS,
        page_size: int = _PAGE_SIZE,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        token_id, token = parse_api_key(api_key)
        self._page_size = page_size
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            auth=(token_id, token),
            headers={"Accept": "application/json"},
            timeout=timeout,
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get_contacts(self, scope: Scope | str = Scope.ALL) -> list[SipgateContact]:
        scope_value = scope.value if isinstance(scope, Scope) else scope
        items: list[dict[str, Any]] = []
        offset = 0
        while True:
            response = await self._client.get(
                "/contacts",
                params={"scope": scope_value, "limit": self._page_size, "offset": offset},
            )
            self._raise_for_status(response)

            data = response.json()
            if not isinstance(data, dict) or not isinstance(data.get("items", []), list):
                raise ValueError("Unexpected contacts response from sipgate API")
            page = data.get("items", [])
            items.extend(page)
            total_count = data.get("totalCount")
            total = int(total_count) if total_count is not None else len(items)
            offset += len(page)
            if not page or offset >= total:
                break

        logger.debug(f"Fetched {len(items)} sipgate contact(s) for scope {scope_value}")
        try:
            return [SipgateContact.from_api(item) for item in items]
        except (AttributeError, TypeError) as ex:
            raise ValueError(f"Malformed contact in sipgate response: {ex}") from ex

    async def update_contact(self, payload: dict[str, Any]) -> None:
        """Update the contact with ``payload['id']``, creating it when it does not exist."""
        response = await self._client.put(f"/contacts/{payload['id']}", json=payload)
        self._raise_for_status(response)

    async def delete_contact(self, contact_id: str) -> None:
        response = await self._client.delete(f"/contacts/{contact_id}")
        self._raise_for_status(response)

    @staticmethod
    def _raise_for_status(response: httpx.Response) -> None:
        if response.status_code >= 400:
            raise httpx.HTTPStatusError(
                f"HTTP {response.status_code} from sipgate API",
                request=response.request,
                response=response,
            )


def get_sipgate_client(
    api_key: str,
    base_url: str = DEFAULT_BASE_URL,
    timeout: float = _TIMEOUT_SECONDS,
    page_size: int = _PAGE_SIZE,
) -> SipgateClient:
    return SipgateClient(api_key, base_url=base_url, timeout=timeout, page_size=page_size)
