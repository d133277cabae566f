"""Request validation and dispatch."""

from .dispatcher import INTENT_REQUEST, LAUNCH_REQUEST, SESSION_ENDED_REQUEST, RequestHandler, Skill
from .validation import verify_application_id, verify_timestamp

__all__ = [
    "Skill",
    "RequestHandler",
    "LAUNCH_REQUEST",
    "INTENT_REQUEST",
    "SESSION_ENDED_REQUEST",
    "verify_application_id",
    "verify_timestamp",
]
