"""
Client implementations for external services
"""

from lg_resolver.clients.lg import LGAPIClient

__all__ = ['LGAPIClient']
