"""
Data Models

Pydantic models for requests and responses.
"""

from .requests import ResolveActivityRequest
from .responses import ResolveActivityResponse

__all__ = [
    'ResolveActivityRequest',
    'ResolveActivityResponse'
]
