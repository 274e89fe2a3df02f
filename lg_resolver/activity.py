"""
Activity Models

Minimal pydantic rendition of a conversational activity. Only the fields the
resolver reads or rewrites are declared; anything else is kept as extra data.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CardAction(BaseModel):
    """A suggested action shown to the user"""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    type: Optional[str] = Field(None, description="Action type (e.g., 'imBack')")
    title: Optional[str] = Field(None, description="Button title")
    value: Optional[Any] = Field(None, description="Value sent back when selected")
    text: Optional[str] = Field(None, description="Text sent to the bot")
    display_text: Optional[str] = Field(
        None, alias="displayText", description="Text shown in the chat feed"
    )


class SuggestedActions(BaseModel):
    """Suggested actions attached to an activity"""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    to: List[str] = Field(default_factory=list, description="Recipient ids")
    actions: List[CardAction] = Field(default_factory=list)


class Activity(BaseModel):
    """Conversational message with text, speech and suggested actions"""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    type: str = "message"
    text: Optional[str] = None
    speak: Optional[str] = None
    locale: Optional[str] = None
    suggested_actions: Optional[SuggestedActions] = Field(None, alias="suggestedActions")

    def to_wire(self) -> dict:
        """Serialize with camelCase keys, dropping unset optional fields"""
        return self.model_dump(by_alias=True, exclude_none=True)
