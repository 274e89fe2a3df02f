"""
LG Resolver

Resolves the bracketed template references of an activity against the LG
service and writes the resolutions back into the activity.
"""

import time
import uuid
import logging
import httpx
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Tuple

from lg_resolver.clients.lg import LGAPIClient, LGResponse
from lg_resolver.config import LGEndpoint, LGOptions
from lg_resolver.exceptions import (
    IncompleteResolutionError,
    InvalidArgumentError,
    InvalidConfigurationError,
)
from lg_resolver.injectors import inject_resolutions
from lg_resolver.inspectors import extract_references
from lg_resolver.observability import create_resolution_logger
from lg_resolver.slots import SlotBuilder

logger = logging.getLogger(__name__)


class LGResolver:
    """
    Resolves template references of activities

    Steps of a resolve call:
    1. Validate arguments and encode entities as slots
    2. Extract the distinct template references of the activity
    3. Obtain a bearer token
    4. Fetch one resolution per reference, concurrently
    5. Check every reference got a resolution
    6. Inject the resolutions into the activity

    The activity is only modified in step 6, so a failing call leaves it
    untouched.

    Usage:
        resolver = LGResolver(LGEndpoint(key, app_id, uri))
        activity = Activity(text="[sayHello], John!")
        await resolver.resolve(activity, {"name": "John"})
        print(activity.text)
    """

    def __init__(
        self,
        endpoint: LGEndpoint,
        options: Optional[LGOptions] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize resolver

        Args:
            endpoint: Validated endpoint credentials
            options: Optional resolver options
            transport: Optional httpx transport (used by tests)

        Raises:
            InvalidConfigurationError: If endpoint is not an LGEndpoint
        """
        if not isinstance(endpoint, LGEndpoint):
            raise InvalidConfigurationError(
                f"endpoint must be an LGEndpoint, got {type(endpoint).__name__}"
            )

        self.endpoint = endpoint
        self.options = options or LGOptions()
        self.api = LGAPIClient(endpoint, self.options, transport=transport)

    async def resolve(self, activity: Any, entities: Optional[Mapping] = None) -> None:
        """
        Resolve all template references of an activity in place

        Args:
            activity: Activity to resolve
            entities: Optional mapping of slot name -> str, int, float, bool or datetime

        Raises:
            InvalidArgumentError: If activity is None or entities is not a mapping
            UnsupportedValueTypeError: If an entity value cannot be encoded
            AuthenticationError: If the credential is rejected
            ServiceError: If any fetch fails
            MalformedWireValueError: If a resolution cannot be decoded
            IncompleteResolutionError: If a reference was not resolved
        """
        if activity is None:
            raise InvalidArgumentError("activity must not be None")
        if entities is not None and not isinstance(entities, Mapping):
            raise InvalidArgumentError(
                f"entities must be a mapping, got {type(entities).__name__}"
            )

        call_id = str(uuid.uuid4())
        locale = getattr(activity, "locale", None) or self.options.locale
        call_log = create_resolution_logger(call_id, self.endpoint.lg_app_id, self.options.log_dir)
        start = time.monotonic()

        try:
            if call_log:
                call_log.log_started(locale, list(entities or {}))

            slots = SlotBuilder.build_slots(entities)

            references = extract_references(activity)
            if call_log:
                call_log.log_references_extracted(references)

            if not references:
                logger.debug("No template references found, nothing to resolve")
            else:
                logger.info(f"Resolving {len(references)} template references")

                token = await self.api.authenticate()
                requests = SlotBuilder.build_requests(
                    self.endpoint.lg_app_id, locale, slots, references
                )
                pairs = await self.api.fetch_all(requests, token)

                resolutions = self._aggregate(pairs)
                if call_log:
                    call_log.log_fetch_completed(resolutions)

                self._validate_completeness(references, resolutions)
                inject_resolutions(activity, resolutions)

            if call_log:
                call_log.log_completed(self._elapsed_ms(start))

        except Exception as e:
            logger.error(f"Resolve call {call_id} failed: {e}")
            if call_log:
                call_log.log_failed(e, self._elapsed_ms(start))
            raise

        finally:
            if call_log:
                call_log.close()

    @staticmethod
    def _aggregate(pairs: List[Tuple[str, LGResponse]]) -> Dict[str, str]:
        """Fold responses into a reference -> resolution table, skipping empty ones"""
        resolutions = {}
        for reference, response in pairs:
            if not response.is_resolved:
                logger.warning(f"No resolution returned for template '{reference}'")
                continue
            if response.template_id != reference:
                logger.warning(
                    f"Response for template '{reference}' reported templateId '{response.template_id}'"
                )
            resolutions[reference] = response.display_text
        return resolutions

    @staticmethod
    def _validate_completeness(references: List[str], resolutions: Dict[str, str]) -> None:
        missing = [reference for reference in references if reference not in resolutions]
        if missing:
            raise IncompleteResolutionError(missing)

    @staticmethod
    def _elapsed_ms(start: float) -> int:
        return int((time.monotonic() - start) * 1000)

    async def close(self):
        """Close client connections"""
        await self.api.close()
