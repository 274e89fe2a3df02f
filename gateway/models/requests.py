"""
Request Models

Pydantic models for API requests.
"""

from typing import Dict, Any
from pydantic import BaseModel, Field

from lg_resolver.activity import Activity


class ResolveActivityRequest(BaseModel):
    """Request to resolve the template references of an activity"""
    activity: Activity = Field(..., description="Activity containing [template] references")
    entities: Dict[str, Any] = Field(
        default_factory=dict,
        description="Slot values (string, integer, float or boolean)"
    )
