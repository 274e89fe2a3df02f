"""
Slot Builder

Turns caller entities into typed slots and assembles one LG request per
template reference. Pure data assembly, no I/O.
"""

from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional

from lg_resolver.clients.lg.models import LGRequest
from lg_resolver.codec import WireValue, encode


@dataclass(frozen=True)
class Slot:
    """Named typed value sent as generation input"""
    name: str
    value: WireValue


class SlotBuilder:
    """Builds slots and requests for the LG service"""

    @staticmethod
    def build_slots(entities: Optional[Mapping[str, Any]]) -> List[Slot]:
        """
        Encode entities as slots, keeping their insertion order

        Raises:
            UnsupportedValueTypeError: If an entity value cannot be encoded
        """
        if not entities:
            return []
        return [Slot(name=name, value=encode(value)) for name, value in entities.items()]

    @staticmethod
    def build_request(
        scenario: str,
        locale: Optional[str],
        slots: List[Slot],
        reference: str
    ) -> LGRequest:
        return LGRequest(scenario=scenario, template_id=reference, locale=locale, slots=list(slots))

    @classmethod
    def build_requests(
        cls,
        scenario: str,
        locale: Optional[str],
        slots: List[Slot],
        references: Iterable[str]
    ) -> List[LGRequest]:
        """One request per reference, all sharing the same slots and locale"""
        return [cls.build_request(scenario, locale, slots, reference) for reference in references]
