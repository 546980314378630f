"""
autoresponder/schemas/events.py

Purpose: Slack Events API payload schemas

- url_verification handshake and event_callback envelopes
- Discriminated on the top-level "type" field
- Inner message event with optional bot marker
"""

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from typing import Annotated, Optional, Literal, Union, Any, Dict

from utils.constants import EVENT_TYPE_URL_VERIFICATION, EVENT_TYPE_EVENT_CALLBACK


class MessageEvent(BaseModel):
    """
    Inner event of an event_callback.

    Only "message" events are handled; the type is kept as a plain string so
    other event types can be rejected explicitly instead of failing parsing.
    """
    model_config = ConfigDict(extra="allow")

    type: str = Field(..., description="Inner event type, e.g. 'message'")
    user: Optional[str] = Field(None, description="User that posted the message")
    channel: Optional[str] = Field(None, description="Channel, group or DM the message was posted in")
    text: Optional[str] = None
    bot_id: Optional[str] = Field(None, description="Set when a bot posted the message")
    subtype: Optional[str] = None
    ts: Optional[str] = None

    @property
    def is_from_bot(self) -> bool:
        return self.bot_id is not None


class UrlVerificationPayload(BaseModel):
    """
    One-time handshake Slack sends to confirm endpoint ownership.
    """
    model_config = ConfigDict(extra="allow")

    type: Literal["url_verification"]
    token: str
    challenge: Any


class EventCallbackPayload(BaseModel):
    """
    Envelope wrapping a single workspace event.
    """
    model_config = ConfigDict(extra="allow")

    type: Literal["event_callback"]
    token: str
    event: MessageEvent
    event_id: Optional[str] = None
    team_id: Optional[str] = None
    api_app_id: Optional[str] = None
    event_time: Optional[int] = None


EventPayload = Annotated[
    Union[UrlVerificationPayload, EventCallbackPayload],
    Field(discriminator="type"),
]

_event_payload_adapter = TypeAdapter(EventPayload)

SUPPORTED_PAYLOAD_TYPES = (EVENT_TYPE_URL_VERIFICATION, EVENT_TYPE_EVENT_CALLBACK)


def parse_event_payload(payload: Dict[str, Any]) -> Union[UrlVerificationPayload, EventCallbackPayload]:
    """
    Parses a raw Events API body into its typed envelope.

    Raises:
        pydantic.ValidationError: if the body does not match either envelope
    """
    return _event_payload_adapter.validate_python(payload)
