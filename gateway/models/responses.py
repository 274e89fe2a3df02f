"""
Response Models

Pydantic models for API responses.
"""

from typing import Dict, Any, List
from pydantic import BaseModel


class ResolveActivityResponse(BaseModel):
    """Resolved activity"""
    activity: Dict[str, Any]
    references: List[str] = []
