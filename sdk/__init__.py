"""
LG Gateway SDK

Simple Python SDK for resolving activities through the LG gateway.
"""

from .client import LGGatewaySDK, resolve_activity

__all__ = ['LGGatewaySDK', 'resolve_activity']
__version__ = '0.1.0'
