"""
Activity Resolution API Routes

Endpoints for resolving template references in activities.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from lg_resolver import (
    LGResolver,
    LGResolverError,
    InvalidArgumentError,
    AuthenticationError,
    UnsupportedValueTypeError,
)
from lg_resolver.inspectors import extract_references

from ..models import ResolveActivityRequest, ResolveActivityResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/activities", tags=["activities"])


def get_resolver(request: Request) -> LGResolver:
    """Resolver created at startup"""
    resolver = getattr(request.app.state, "resolver", None)
    if resolver is None:
        raise HTTPException(status_code=503, detail="LG resolver is not configured")
    return resolver


def error_status(error: LGResolverError) -> int:
    """Map a resolver error to an HTTP status code"""
    if isinstance(error, (InvalidArgumentError, UnsupportedValueTypeError)):
        return 400
    if isinstance(error, AuthenticationError):
        return 401
    # Service, malformed wire value and incomplete resolution failures are upstream problems
    return 502


@router.post("/resolve", response_model=ResolveActivityResponse)
async def resolve_activity(
    request: ResolveActivityRequest,
    resolver: LGResolver = Depends(get_resolver)
):
    """
    Resolve every [template] reference of an activity

    Args:
        request: Activity and slot entities

    Returns:
        The resolved activity and the references that were resolved
    """
    activity = request.activity
    references = extract_references(activity)

    try:
        await resolver.resolve(activity, request.entities)
    except LGResolverError as e:
        raise HTTPException(status_code=error_status(e), detail=str(e))

    return ResolveActivityResponse(activity=activity.to_wire(), references=references)
