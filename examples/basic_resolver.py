"""
Example Usage of the LG Resolver

Demonstrates how to:
- Configure an endpoint from environment variables
- Resolve an activity with typed entities
- Handle resolution errors
"""

import asyncio
from datetime import datetime

from lg_resolver import (
    Activity,
    LGEndpoint,
    LGOptions,
    LGResolver,
    LGResolverError,
)


async def example_1_resolve_activity():
    """Example 1: Resolve text, speech and suggested actions"""
    print("\n=== Example 1: Resolve Activity ===\n")

    # Reads LG_ENDPOINT_KEY, LG_APP_ID and LG_ENDPOINT_URI
    endpoint = LGEndpoint.from_env()
    resolver = LGResolver(endpoint, LGOptions(locale="en-US"))

    activity = Activity.model_validate({
        "text": "[sayHello], John! [welcomePhrase] to the new office.",
        "speak": "[sayHello], John!",
        "suggestedActions": {
            "actions": [
                {"type": "imBack", "title": "Book", "text": "[bookTickets]", "displayText": "[bookTickets]"}
            ]
        }
    })

    entities = {
        "name": "john",
        "city": "paris",
        "tickets": 3,
        "vip": True,
        "arrival": datetime(2019, 1, 1, 10, 0),
    }

    try:
        await resolver.resolve(activity, entities)
        print(f"Text:  {activity.text}")
        print(f"Speak: {activity.speak}")
    except LGResolverError as e:
        print(f"Resolution failed: {e}")
    finally:
        await resolver.close()


if __name__ == "__main__":
    asyncio.run(example_1_resolve_activity())
