"""
LG Client

A dedicated client for the language generation service that handles:
- Token issuance
- Per-template generation calls
- Concurrent fan-out with an all-or-nothing join
"""

from lg_resolver.clients.lg.client import LGAPIClient
from lg_resolver.clients.lg.models import LGRequest, LGResponse

__all__ = ['LGAPIClient', 'LGRequest', 'LGResponse']
