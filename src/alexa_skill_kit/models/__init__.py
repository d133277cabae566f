"""Pydantic models for Alexa request/response envelopes."""

from .request import (
    Context,
    Intent,
    IntentSlot,
    IntentSlotValue,
    Request,
    RequestEnvelope,
    Resolutions,
    Session,
)
from .response import (
    SDK_VERSION,
    AudioPlayerDirective,
    DialogDirective,
    LinkAccountCard,
    PlainTextOutputSpeech,
    Reprompt,
    Response,
    ResponseEnvelope,
    SimpleCard,
    SsmlOutputSpeech,
    StandardCard,
)

__all__ = [
    "RequestEnvelope",
    "Session",
    "Request",
    "Intent",
    "IntentSlot",
    "IntentSlotValue",
    "Resolutions",
    "Context",
    "SDK_VERSION",
    "ResponseEnvelope",
    "Response",
    "PlainTextOutputSpeech",
    "SsmlOutputSpeech",
    "Reprompt",
    "SimpleCard",
    "StandardCard",
    "LinkAccountCard",
    "AudioPlayerDirective",
    "DialogDirective",
]
