"""
LG Client Data Models
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Optional

if TYPE_CHECKING:
    from lg_resolver.slots import Slot


@dataclass(frozen=True)
class LGRequest:
    """One generation request, targeting a single template reference"""
    scenario: str
    template_id: str
    locale: Optional[str] = None
    slots: List["Slot"] = field(default_factory=list)

    def to_payload(self) -> Dict[str, Any]:
        """Build the JSON body sent to the LG service"""
        payload: Dict[str, Any] = {
            "scenario": self.scenario,
            "templateId": self.template_id,
            "slots": {slot.name: slot.value.to_wire() for slot in self.slots},
        }
        if self.locale:
            payload["locale"] = self.locale
        return payload


@dataclass
class LGResponse:
    """Result of a generation request"""
    template_id: Optional[str] = None
    display_text: Optional[str] = None

    @property
    def is_resolved(self) -> bool:
        return self.template_id is not None and self.display_text is not None
