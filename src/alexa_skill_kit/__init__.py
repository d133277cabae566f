"""Request validation and dispatch for Alexa custom skills."""

from .errors import ApplicationIdError, RequestEnvelopeMissingError, SkillError, TimestampError
from .models.request import Context, Intent, IntentSlot, Request, RequestEnvelope, Session
from .models.response import Response, ResponseEnvelope
from .services.dispatcher import RequestHandler, Skill

__version__ = "0.1.0"

__all__ = [
    "Skill",
    "RequestHandler",
    "RequestEnvelope",
    "Session",
    "Request",
    "Intent",
    "IntentSlot",
    "Context",
    "Response",
    "ResponseEnvelope",
    "SkillError",
    "RequestEnvelopeMissingError",
    "ApplicationIdError",
    "TimestampError",
    "__version__",
]
