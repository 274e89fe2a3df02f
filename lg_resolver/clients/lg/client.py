"""
LG API Client

Main client interface for the language generation service.
"""

import asyncio
import logging
import httpx
from typing import Dict, Any, List, Optional, Tuple

from lg_resolver.clients.lg.http import LGHTTPClient
from lg_resolver.clients.lg.models import LGRequest, LGResponse
from lg_resolver.codec import decode
from lg_resolver.config import LGEndpoint, LGOptions

logger = logging.getLogger(__name__)


class LGAPIClient:
    """
    High-level client for the LG service

    Features:
    - Token issuance from the endpoint subscription key
    - One generation call per template reference
    - Concurrent fan-out with an all-or-nothing join

    Usage:
        client = LGAPIClient(endpoint)
        token = await client.authenticate()
        pairs = await client.fetch_all(requests, token)
    """

    def __init__(
        self,
        endpoint: LGEndpoint,
        options: Optional[LGOptions] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize LG client

        Args:
            endpoint: Endpoint credentials and addresses
            options: Optional client options (timeout)
            transport: Optional httpx transport (used by tests)
        """
        self.endpoint = endpoint
        self.options = options or LGOptions()

        self.http = LGHTTPClient(
            endpoint.endpoint_uri,
            endpoint.token_uri,
            timeout=self.options.timeout,
            transport=transport
        )

        logger.info(f"LG client initialized for {endpoint.endpoint_uri}")

    async def authenticate(self) -> str:
        """Obtain a bearer token for this resolve call"""
        return await self.http.issue_token(self.endpoint.endpoint_key)

    async def fetch(self, request: LGRequest, token: str) -> LGResponse:
        """
        Resolve a single template reference

        Returns:
            LGResponse, with display_text None when the service produced no output

        Raises:
            MalformedWireValueError: If the returned display text cannot be decoded
        """
        data = await self.http.generate(request.to_payload(), token)
        return self._parse_response(data)

    async def fetch_all(
        self,
        requests: List[LGRequest],
        token: str
    ) -> List[Tuple[str, LGResponse]]:
        """
        Resolve many template references concurrently

        Every request is dispatched before any completes, and all of them are
        allowed to settle. If any failed, the first failure in request order
        is raised.

        Returns:
            (template reference, response) pairs in request order
        """
        logger.info(f"Fetching {len(requests)} template resolutions")

        results = await asyncio.gather(
            *(self.fetch(request, token) for request in requests),
            return_exceptions=True
        )

        failures = [r for r in results if isinstance(r, BaseException)]
        if failures:
            logger.error(f"{len(failures)} of {len(requests)} template fetches failed")
            raise failures[0]

        return [(request.template_id, response) for request, response in zip(requests, results)]

    @staticmethod
    def _parse_response(data: Dict[str, Any]) -> LGResponse:
        """Map a raw service response to an LGResponse"""
        if not isinstance(data, dict):
            return LGResponse()

        outputs = data.get("Outputs") or {}
        display_text = outputs.get("DisplayText") if isinstance(outputs, dict) else None

        return LGResponse(
            template_id=data.get("templateId"),
            display_text=decode(display_text) if display_text is not None else None
        )

    async def close(self):
        """Close client connections"""
        await self.http.close()
