"""
LG Gateway SDK

Simple Python SDK for resolving activities via the gateway API.
"""

import requests
from typing import Dict, Any, Optional


class LGGatewaySDK:
    """
    Simple SDK for activity resolution

    Example:
        >>> sdk = LGGatewaySDK(gateway_url="http://localhost:8000")
        >>> result = sdk.resolve_activity({"text": "[sayHello], John!"}, {"name": "John"})
        >>> print(result["activity"]["text"])
    """

    def __init__(self, gateway_url: str = "http://localhost:8000", timeout: float = 30.0):
        """
        Initialize the SDK

        Args:
            gateway_url: URL of the LG gateway API
            timeout: Request timeout in seconds
        """
        self.gateway_url = gateway_url.rstrip('/')
        self.timeout = timeout
        self.session = requests.Session()

    def resolve_activity(
        self,
        activity: Dict[str, Any],
        entities: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """
        Resolve the template references of an activity

        Args:
            activity: Activity as a dict (camelCase keys, e.g. "suggestedActions")
            entities: Slot values (string, integer, float or boolean)

        Returns:
            Dictionary with the resolved activity and its references:
            {
                "activity": {"type": "message", "text": "Hello, John!"},
                "references": ["sayHello"]
            }

        Raises:
            requests.HTTPError: If the gateway rejects the request or resolution fails
        """
        payload = {
            "activity": activity,
            "entities": entities or {}
        }

        response = self.session.post(
            f"{self.gateway_url}/activities/resolve",
            json=payload,
            timeout=self.timeout
        )
        self._raise_for_gateway_error(response)

        return response.json()

    def health_check(self) -> Dict[str, Any]:
        """
        Check gateway health

        Returns:
            Health status
        """
        response = self.session.get(f"{self.gateway_url}/health", timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    @staticmethod
    def _raise_for_gateway_error(response: requests.Response):
        """Raise an HTTPError carrying the gateway's error detail"""
        if response.ok:
            return

        try:
            error_data = response.json()
            error_detail = error_data.get('detail', error_data)
            error_msg = f"Gateway Error ({response.status_code}): {error_detail}"
        except ValueError:
            error_msg = f"Gateway Error ({response.status_code}): {response.text}"

        raise requests.HTTPError(error_msg, response=response)


def resolve_activity(
    activity: Dict[str, Any],
    entities: Optional[Dict[str, Any]] = None,
    gateway_url: str = "http://localhost:8000"
) -> Dict[str, Any]:
    """
    Convenience function to resolve an activity without creating SDK instance

    Example:
        >>> from sdk.client import resolve_activity
        >>> result = resolve_activity({"text": "[sayGoodMorning], John!"})
    """
    sdk = LGGatewaySDK(gateway_url=gateway_url)
    return sdk.resolve_activity(activity, entities)
