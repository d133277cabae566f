"""HelloWorld skill: the smallest useful RequestHandler."""

import logging
from typing import Any

from ..main import create_lambda_handler
from ..models.request import Context, Request, Session
from ..models.response import Response

logger = logging.getLogger(__name__)

CARD_TITLE = "HelloWorld"


class HelloWorld:
    """Handles requests from the HelloWorld skill."""

    def on_session_started(
        self, ctx: Any, request: Request, session: Session, context: Context | None, response: Response
    ) -> None:
        logger.info(f"OnSessionStarted requestId={request.requestId}, sessionId={session.sessionId}")

    def on_launch(
        self, ctx: Any, request: Request, session: Session, context: Context | None, response: Response
    ) -> None:
        speech = "Welcome to the Alexa Skills Kit, you can say hello"

        logger.info(f"OnLaunch requestId={request.requestId}, sessionId={session.sessionId}")

        response.set_simple_card(CARD_TITLE, speech)
        response.set_output_text(speech)
        response.set_reprompt_text(speech)
        response.shouldEndSession = False

    def on_intent(
        self, ctx: Any, request: Request, session: Session, context: Context | None, response: Response
    ) -> None:
        intent_name = request.intent.name if request.intent else ""

        logger.info(
            f"OnIntent requestId={request.requestId}, sessionId={session.sessionId}, intent={intent_name}"
        )

        if intent_name == "HelloWorldIntent":
            speech = "Hello World"
            response.set_simple_card(CARD_TITLE, speech)
            response.set_output_text(speech)
            return

        if intent_name == "AMAZON.HelpIntent":
            speech = "You can say hello to me!"
            response.set_simple_card(CARD_TITLE, speech)
            response.set_output_text(speech)
            response.set_reprompt_text(speech)
            response.shouldEndSession = False
            return

        raise ValueError("Invalid Intent")

    def on_session_ended(
        self, ctx: Any, request: Request, session: Session, context: Context | None, response: Response
    ) -> None:
        logger.info(f"OnSessionEnded requestId={request.requestId}, sessionId={session.sessionId}")


# Lambda entrypoint: alexa_skill_kit.samples.helloworld.handler
handler = create_lambda_handler(HelloWorld())
