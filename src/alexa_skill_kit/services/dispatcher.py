"""Alexa request dispatch to skill lifecycle handlers."""

import logging
from typing import Any, Protocol

from ..config import Settings, settings as default_settings
from ..errors import RequestEnvelopeMissingError
from ..models.request import Context, Request, RequestEnvelope, Session
from ..models.response import Response, ResponseEnvelope
from .validation import DEFAULT_TIMESTAMP_TOLERANCE, verify_application_id, verify_timestamp

logger = logging.getLogger(__name__)

LAUNCH_REQUEST = "LaunchRequest"
INTENT_REQUEST = "IntentRequest"
SESSION_ENDED_REQUEST = "SessionEndedRequest"


class RequestHandler(Protocol):
    """
    Skill logic invoked by `Skill.process_request`.

    Each callback receives the caller's opaque `ctx` token unchanged (on
    Lambda, the Lambda context object), the parsed request, the session, the
    device context (may be None) and the response to fill in. Raise to fail
    the request.
    """

    def on_session_started(
        self, ctx: Any, request: Request, session: Session, context: Context | None, response: Response
    ) -> None:
        ...

    def on_launch(
        self, ctx: Any, request: Request, session: Session, context: Context | None, response: Response
    ) -> None:
        ...

    def on_intent(
        self, ctx: Any, request: Request, session: Session, context: Context | None, response: Response
    ) -> None:
        ...

    def on_session_ended(
        self, ctx: Any, request: Request, session: Session, context: Context | None, response: Response
    ) -> None:
        ...


class Skill:
    """Validates Alexa requests for one skill and routes them to its handler."""

    def __init__(
        self,
        application_id: str,
        request_handler: RequestHandler,
        ignore_application_id: bool = False,
        ignore_timestamp: bool = False,
        timestamp_tolerance: int = DEFAULT_TIMESTAMP_TOLERANCE,
    ):
        self.application_id = application_id
        self.request_handler = request_handler
        self.ignore_application_id = ignore_application_id
        self.ignore_timestamp = ignore_timestamp
        self.timestamp_tolerance = timestamp_tolerance

    @classmethod
    def from_settings(cls, request_handler: RequestHandler, settings: Settings | None = None) -> "Skill":
        """Build a skill from ALEXA_SKILL_* environment configuration."""
        settings = settings or default_settings
        return cls(
            application_id=settings.application_id,
            request_handler=request_handler,
            ignore_application_id=settings.ignore_application_id,
            ignore_timestamp=settings.ignore_timestamp,
            timestamp_tolerance=settings.timestamp_tolerance,
        )

    def set_timestamp_tolerance(self, seconds: int) -> None:
        """
        Set the maximum seconds allowed between now and the request timestamp.

        Scoped to this instance; applies from the next `process_request` call.
        """
        self.timestamp_tolerance = seconds

    def process_request(self, ctx: Any, envelope: RequestEnvelope | None) -> ResponseEnvelope:
        """
        Validate an Alexa request and run it through the skill handler.

        Order of operations:
        1. Application ID check, then timestamp check (each skippable)
        2. on_session_started if the session is new
        3. on_launch / on_intent / on_session_ended by request type;
           unknown types run no handler
        4. Session attributes copied into the response envelope

        Args:
            ctx: Cancellation/deadline token handed to every callback
            envelope: Parsed Alexa request envelope

        Returns:
            Response envelope, with shouldEndSession True unless a handler changed it

        Raises:
            SkillError: validation failed
            Exception: whatever a handler raised, unchanged
        """
        if envelope is None:
            raise RequestEnvelopeMissingError()

        if not self.ignore_application_id:
            verify_application_id(envelope, self.application_id)
        else:
            logger.info("Ignoring application ID verification.")

        if not self.ignore_timestamp:
            verify_timestamp(envelope, self.timestamp_tolerance)
        else:
            logger.info("Ignoring timestamp verification.")

        request = envelope.request
        session = envelope.session
        if session.attributes.string is None:
            session.attributes.string = {}
        context = envelope.context

        response_env = ResponseEnvelope(response=Response(shouldEndSession=True))
        response = response_env.response

        if session.new:
            self._invoke("on_session_started", ctx, request, session, context, response)

        callback = {
            LAUNCH_REQUEST: "on_launch",
            INTENT_REQUEST: "on_intent",
            SESSION_ENDED_REQUEST: "on_session_ended",
        }.get(request.type)

        if callback:
            self._invoke(callback, ctx, request, session, context, response)
        else:
            logger.info(f"No handler for request type: {request.type}")

        for name, value in session.attributes.string.items():
            logger.debug(f"Setting session attribute {name} to {value!r}")
            response_env.sessionAttributes[name] = value

        return response_env

    def _invoke(
        self,
        callback: str,
        ctx: Any,
        request: Request,
        session: Session,
        context: Context | None,
        response: Response,
    ) -> None:
        logger.debug(f"Invoking {callback} requestId={request.requestId}, sessionId={session.sessionId}")
        try:
            getattr(self.request_handler, callback)(ctx, request, session, context, response)
        except Exception as e:
            logger.error(f"Error handling {callback}: {e}")
            raise
