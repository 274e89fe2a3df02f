"""Shared fixtures for resolver tests."""

import asyncio
import json
from typing import Dict, List, Optional

import httpx
import pytest

from lg_resolver import LGEndpoint, LGOptions, LGResolver

ENDPOINT_URI = "https://lg.example.com"
TOKEN = "test-token"


class FakeLGService:
    """
    In-memory stand-in for the token service and the LG service

    Resolves each templateId from a fixed table. Templates listed in
    `failures` answer with that HTTP status; templates missing from the table
    answer with empty Outputs.
    """

    def __init__(
        self,
        resolutions: Optional[Dict[str, str]] = None,
        failures: Optional[Dict[str, int]] = None,
        token_status: int = 200,
        delays: Optional[Dict[str, float]] = None,
    ):
        self.resolutions = resolutions or {}
        self.failures = failures or {}
        self.token_status = token_status
        self.delays = delays or {}

        self.token_requests: List[httpx.Request] = []
        self.payloads: List[dict] = []
        self.auth_headers: List[str] = []
        self.completed: List[str] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def handler(self, request: httpx.Request) -> httpx.Response:
        if request.url.path == "/sts/v1.0/issueToken":
            self.token_requests.append(request)
            if self.token_status != 200:
                return httpx.Response(self.token_status, json={"error": "invalid key"})
            return httpx.Response(200, text=TOKEN)

        if request.url.path != "/v1/lg":
            return httpx.Response(404)

        payload = json.loads(request.content)
        template_id = payload["templateId"]
        self.payloads.append(payload)
        self.auth_headers.append(request.headers.get("Authorization"))

        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        await asyncio.sleep(self.delays.get(template_id, 0.01))
        self.in_flight -= 1
        self.completed.append(template_id)

        if template_id in self.failures:
            return httpx.Response(self.failures[template_id], json={"error": "failed"})

        if template_id not in self.resolutions:
            return httpx.Response(200, json={"Outputs": {}, "templateId": template_id})

        return httpx.Response(200, json={
            "Outputs": {
                "DisplayText": {"kind": 0, "stringValues": [self.resolutions[template_id]]}
            },
            "templateId": template_id,
        })

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def requested_templates(self) -> List[str]:
        return [payload["templateId"] for payload in self.payloads]


@pytest.fixture
def endpoint() -> LGEndpoint:
    return LGEndpoint(
        endpoint_key="subscription-key",
        lg_app_id="my-lg-app",
        endpoint_uri=ENDPOINT_URI,
    )


@pytest.fixture
def make_resolver(endpoint):
    """Factory building a resolver wired to a FakeLGService"""

    def _make(service: FakeLGService, options: Optional[LGOptions] = None) -> LGResolver:
        return LGResolver(endpoint, options, transport=service.transport)

    return _make
