"""
Example Usage of the LG Gateway SDK

Requires the gateway to be running (python run_gateway.py).
"""

import requests

from sdk import LGGatewaySDK


def main():
    sdk = LGGatewaySDK(gateway_url="http://localhost:8000")

    health = sdk.health_check()
    print(f"Gateway status: {health['status']} (resolver configured: {health['resolver_configured']})")

    try:
        result = sdk.resolve_activity(
            {"text": "[sayGoodMorning], John!"},
            {"name": "john", "tickets": 3}
        )
        print(f"Resolved: {result['activity']['text']}")
        print(f"References: {result['references']}")
    except requests.HTTPError as e:
        print(f"Resolution failed: {e}")


if __name__ == "__main__":
    main()
