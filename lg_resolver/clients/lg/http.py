"""
LG HTTP Client

Handles all HTTP calls to the token service and the LG service.
"""

import httpx
import logging
from typing import Dict, Any, Optional

from lg_resolver.exceptions import AuthenticationError, ServiceError

logger = logging.getLogger(__name__)

AUTH_STATUS_CODES = (401, 403)


class LGHTTPClient:
    """HTTP client for the LG REST API"""

    def __init__(
        self,
        endpoint_uri: str,
        token_uri: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.endpoint_uri = endpoint_uri.rstrip('/')
        self.token_uri = token_uri
        self.client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def issue_token(self, subscription_key: str) -> str:
        """
        Exchange the subscription key for a bearer token

        Args:
            subscription_key: Endpoint subscription key

        Returns:
            Bearer token

        Raises:
            AuthenticationError: If the key is rejected
            ServiceError: On any other failure
        """
        headers = {"Ocp-Apim-Subscription-Key": subscription_key}

        logger.debug(f"POST {self.token_uri}")
        response = await self._send("POST", self.token_uri, "token request", headers=headers)

        token = response.text.strip()
        if not token:
            raise AuthenticationError("Token service returned an empty token", response.status_code)
        return token

    async def generate(self, payload: Dict[str, Any], token: str) -> Dict[str, Any]:
        """
        Request the resolution of one template

        Args:
            payload: Request body (scenario, locale, templateId, slots)
            token: Bearer token from issue_token()

        Returns:
            Response dict with Outputs and templateId
        """
        url = f"{self.endpoint_uri}/v1/lg"
        headers = {"Authorization": f"Bearer {token}"}

        logger.debug(f"POST {url} for template {payload.get('templateId')}")
        response = await self._send("POST", url, "generation request", headers=headers, json=payload)

        try:
            return response.json()
        except ValueError as e:
            raise ServiceError(f"LG service returned invalid JSON: {e}", response.status_code)

    async def _send(self, method: str, url: str, description: str, **kwargs) -> httpx.Response:
        """Send a request and translate httpx failures into resolver errors"""
        try:
            response = await self.client.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            if status_code in AUTH_STATUS_CODES:
                logger.error(f"{description} rejected with {status_code}")
                raise AuthenticationError(
                    f"Credential rejected ({status_code}) on {description}", status_code
                ) from e
            logger.error(f"{description} failed with {status_code}")
            raise ServiceError(f"LG {description} failed ({status_code})", status_code) from e
        except httpx.HTTPError as e:
            logger.error(f"{description} failed: {e}")
            raise ServiceError(f"LG {description} failed: {e}") from e

        return response

    async def close(self):
        """Close HTTP client"""
        await self.client.aclose()
