import asyncio
import base64
import json
import unittest

import httpx

from sipgate_team_bridge.sipgate.client import SipgateClient, parse_api_key
from sipgate_team_bridge.sipgate.models import Scope


def _contact_json(contact_id: str, scope: str = "SHARED") -> dict:
    return {
        "id": contact_id,
        "name": f"Contact {contact_id}",
        "picture": None,
        "emails": [{"email": f"{contact_id}@example.com", "type": ["work"]}],
        "numbers": [{"number": "+4921100000000", "type": ["cell"]}],
        "addresses": [],
        "organization": [["Acme", "Sales"]],
        "scope": scope,
    }


class _Recorder:
    def __init__(self, handler):
        self.requests: list[httpx.Request] = []
        self._handler = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)


def _client(handler, page_size: int = 5000) -> tuple[SipgateClient, _Recorder]:
    recorder = _Recorder(handler)
    client = SipgateClient(
        "token-id:secret",
        base_url="https://api.test/v2",
        page_size=page_size,
        transport=httpx.MockTransport(recorder),
    )
    return client, recorder


class TestParseApiKey(unittest.TestCase):
    def test_splits_on_first_colon(self) -> None:
        self.assertEqual(parse_api_key("token-id:secret:with:colons"), ("token-id", "secret:with:colons"))

    def test_rejects_missing_colon(self) -> None:
        with self.assertRaises(ValueError):
            parse_api_key("token-only")

    def test_rejects_empty_parts(self) -> None:
        with self.assertRaises(ValueError):
            parse_api_key(":secret")
        with self.assertRaises(ValueError):
            parse_api_key("token-id:")


class TestSipgateClient(unittest.TestCase):
    def test_get_contacts_sends_scope_and_basic_auth(self) -> None:
        client, recorder = _client(
            lambda request: httpx.Response(200, json={"items": [_contact_json("a")], "totalCount": 1})
        )

        contacts = asyncio.run(client.get_contacts(Scope.SHARED))

        self.assertEqual([c.id for c in contacts], ["a"])
        self.assertEqual(contacts[0].numbers[0].type, ["cell"])
        request = recorder.requests[0]
        self.assertEqual(request.url.path, "/v2/contacts")
        self.assertEqual(request.url.params["scope"], "SHARED")
        expected = "Basic " + base64.b64encode(b"token-id:secret").decode()
        self.assertEqual(request.headers["Authorization"], expected)

    def test_get_contacts_pages_until_total_count(self) -> None:
        contacts_json = [_contact_json(str(i)) for i in range(5)]

        def handler(request: httpx.Request) -> httpx.Response:
            offset = int(request.url.params["offset"])
            limit = int(request.url.params["limit"])
            return httpx.Response(
                200, json={"items": contacts_json[offset : offset + limit], "totalCount": len(contacts_json)}
            )

        client, recorder = _client(handler, page_size=2)

        contacts = asyncio.run(client.get_contacts())

        self.assertEqual([c.id for c in contacts], ["0", "1", "2", "3", "4"])
        self.assertEqual(len(recorder.requests), 3)
        self.assertEqual(recorder.requests[0].url.params["scope"], "ALL")

    def test_get_contacts_stops_on_empty_page(self) -> None:
        client, recorder = _client(lambda request: httpx.Response(200, json={"items": [], "totalCount": 10}))

        contacts = asyncio.run(client.get_contacts())

        self.assertEqual(contacts, [])
        self.assertEqual(len(recorder.requests), 1)

    def test_get_contacts_error_raises_status_error(self) -> None:
        client, _ = _client(lambda request: httpx.Response(401, json={"message": "Unauthorized"}))

        with self.assertRaises(httpx.HTTPStatusError) as ctx:
            asyncio.run(client.get_contacts())

        self.assertEqual(ctx.exception.response.status_code, 401)

    def test_update_contact_puts_payload(self) -> None:
        client, recorder = _client(lambda request: httpx.Response(204))
        payload = {"id": "abc", "name": "Ada", "scope": "SHARED"}

        asyncio.run(client.update_contact(payload))

        request = recorder.requests[0]
        self.assertEqual(request.method, "PUT")
        self.assertEqual(request.url.path, "/v2/contacts/abc")
        self.assertEqual(json.loads(request.content), payload)

    def test_delete_contact(self) -> None:
        client, recorder = _client(lambda request: httpx.Response(204))

        asyncio.run(client.delete_contact("abc"))

        request = recorder.requests[0]
        self.assertEqual(request.method, "DELETE")
        self.assertEqual(request.url.path, "/v2/contacts/abc")

    def test_delete_contact_not_found(self) -> None:
        client, _ = _client(lambda request: httpx.Response(404, text="not found"))

        with self.assertRaises(httpx.HTTPStatusError):
            asyncio.run(client.delete_contact("missing"))


if __name__ == "__main__":
    unittest.main()
