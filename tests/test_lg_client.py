"""Tests for the LG HTTP and API clients."""

import httpx
import pytest

from lg_resolver.clients.lg import LGAPIClient, LGRequest, LGResponse
from lg_resolver.clients.lg.http import LGHTTPClient
from lg_resolver.exceptions import AuthenticationError, MalformedWireValueError, ServiceError
from lg_resolver.slots import SlotBuilder

from tests.conftest import ENDPOINT_URI, TOKEN, FakeLGService


def make_requests(*references):
    slots = SlotBuilder.build_slots({"name": "john"})
    return SlotBuilder.build_requests("my-lg-app", "en-US", slots, references)


def http_client(handler) -> LGHTTPClient:
    return LGHTTPClient(
        ENDPOINT_URI,
        f"{ENDPOINT_URI}/sts/v1.0/issueToken",
        transport=httpx.MockTransport(handler),
    )


class TestLGHTTPClient:
    """Tests for wire-level error translation."""

    @pytest.mark.asyncio
    async def test_issue_token_sends_subscription_key(self):
        seen = {}

        def handler(request):
            seen["key"] = request.headers["Ocp-Apim-Subscription-Key"]
            return httpx.Response(200, text="abc\n")

        client = http_client(handler)

        assert await client.issue_token("secret") == "abc"
        assert seen["key"] == "secret"
        await client.close()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [401, 403])
    async def test_rejected_credential(self, status):
        client = http_client(lambda request: httpx.Response(status))

        with pytest.raises(AuthenticationError) as exc_info:
            await client.issue_token("secret")

        assert exc_info.value.status_code == status

    @pytest.mark.asyncio
    async def test_empty_token(self):
        client = http_client(lambda request: httpx.Response(200, text=""))

        with pytest.raises(AuthenticationError):
            await client.issue_token("secret")

    @pytest.mark.asyncio
    async def test_server_error_carries_status(self):
        client = http_client(lambda request: httpx.Response(503))

        with pytest.raises(ServiceError) as exc_info:
            await client.generate({"templateId": "a"}, TOKEN)

        assert exc_info.value.status_code == 503

    @pytest.mark.asyncio
    async def test_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = http_client(handler)

        with pytest.raises(ServiceError) as exc_info:
            await client.generate({"templateId": "a"}, TOKEN)

        assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    async def test_invalid_json(self):
        client = http_client(lambda request: httpx.Response(200, text="not json"))

        with pytest.raises(ServiceError):
            await client.generate({"templateId": "a"}, TOKEN)

    @pytest.mark.asyncio
    async def test_generate_posts_payload_with_bearer_token(self):
        seen = {}

        def handler(request):
            seen["url"] = str(request.url)
            seen["auth"] = request.headers["Authorization"]
            return httpx.Response(200, json={"templateId": "a"})

        client = http_client(handler)

        assert await client.generate({"templateId": "a"}, TOKEN) == {"templateId": "a"}
        assert seen["url"] == f"{ENDPOINT_URI}/v1/lg"
        assert seen["auth"] == f"Bearer {TOKEN}"


class TestLGAPIClient:
    """Tests for fetch and concurrent fetch_all."""

    @pytest.mark.asyncio
    async def test_fetch_decodes_display_text(self, endpoint):
        service = FakeLGService(resolutions={"sayHello": "Hello"})
        client = LGAPIClient(endpoint, transport=service.transport)

        response = await client.fetch(make_requests("sayHello")[0], TOKEN)

        assert response == LGResponse(template_id="sayHello", display_text="Hello")
        assert service.auth_headers == [f"Bearer {TOKEN}"]
        assert service.payloads[0]["scenario"] == "my-lg-app"
        assert service.payloads[0]["slots"] == {"name": {"kind": 0, "stringValues": ["john"]}}

    @pytest.mark.asyncio
    async def test_fetch_without_output(self, endpoint):
        service = FakeLGService()
        client = LGAPIClient(endpoint, transport=service.transport)

        response = await client.fetch(make_requests("unknown")[0], TOKEN)

        assert response.display_text is None
        assert not response.is_resolved

    @pytest.mark.asyncio
    async def test_fetch_malformed_display_text(self, endpoint):
        def handler(request):
            return httpx.Response(200, json={
                "Outputs": {"DisplayText": {"kind": 1, "stringValues": ["x"]}},
                "templateId": "a",
            })

        client = LGAPIClient(endpoint, transport=httpx.MockTransport(handler))

        with pytest.raises(MalformedWireValueError):
            await client.fetch(make_requests("a")[0], TOKEN)

    @pytest.mark.asyncio
    async def test_authenticate(self, endpoint):
        service = FakeLGService()
        client = LGAPIClient(endpoint, transport=service.transport)

        assert await client.authenticate() == TOKEN
        assert service.token_requests[0].headers["Ocp-Apim-Subscription-Key"] == "subscription-key"

    @pytest.mark.asyncio
    async def test_fetch_all_runs_concurrently(self, endpoint):
        service = FakeLGService(resolutions={"a": "A", "b": "B", "c": "C"})
        client = LGAPIClient(endpoint, transport=service.transport)

        await client.fetch_all(make_requests("a", "b", "c"), TOKEN)

        assert service.max_in_flight == 3

    @pytest.mark.asyncio
    async def test_fetch_all_pairs_follow_requests_not_arrival(self, endpoint):
        service = FakeLGService(
            resolutions={"slow": "S", "fast": "F"},
            delays={"slow": 0.05, "fast": 0.0},
        )
        client = LGAPIClient(endpoint, transport=service.transport)

        pairs = await client.fetch_all(make_requests("slow", "fast"), TOKEN)

        assert service.completed == ["fast", "slow"]
        assert [(ref, response.display_text) for ref, response in pairs] == [("slow", "S"), ("fast", "F")]

    @pytest.mark.asyncio
    async def test_fetch_all_fails_if_any_fetch_fails(self, endpoint):
        service = FakeLGService(resolutions={"a": "A"}, failures={"b": 401})
        client = LGAPIClient(endpoint, transport=service.transport)

        with pytest.raises(AuthenticationError):
            await client.fetch_all(make_requests("a", "b"), TOKEN)

        # Every fetch settles before the failure is raised
        assert sorted(service.completed) == ["a", "b"]

    @pytest.mark.asyncio
    async def test_fetch_all_raises_first_failure_in_request_order(self, endpoint):
        service = FakeLGService(failures={"a": 500, "b": 401}, delays={"a": 0.05, "b": 0.0})
        client = LGAPIClient(endpoint, transport=service.transport)

        with pytest.raises(ServiceError) as exc_info:
            await client.fetch_all(make_requests("a", "b"), TOKEN)

        assert exc_info.value.status_code == 500
