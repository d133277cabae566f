"""AWS Lambda entrypoint for Alexa skills."""

import logging
from typing import Any, Callable

from .config import Settings, settings as default_settings
from .errors import RequestEnvelopeMissingError
from .models.request import RequestEnvelope
from .services.dispatcher import RequestHandler, Skill

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)

LambdaHandler = Callable[[dict[str, Any] | None, Any], dict[str, Any]]


def create_lambda_handler(request_handler: RequestHandler, settings: Settings | None = None) -> LambdaHandler:
    """
    Wrap a skill handler as a Lambda function handler.

    The returned callable takes the raw Alexa event and the Lambda context.
    The Lambda context is passed through to every skill callback as the
    cancellation/deadline token. Errors propagate so the invocation fails.

    Args:
        request_handler: Skill lifecycle callbacks
        settings: Overrides ALEXA_SKILL_* environment configuration

    Returns:
        handler(event, context) returning the response envelope as a dict
    """
    settings = settings or default_settings
    logging.basicConfig(level=logging.DEBUG if settings.debug else logging.INFO, format=LOG_FORMAT)
    skill = Skill.from_settings(request_handler, settings)

    logger.info(f"Starting {settings.service_name} for application {settings.application_id or '<unset>'}")

    def handler(event: dict[str, Any] | None, context: Any) -> dict[str, Any]:
        if event is None:
            raise RequestEnvelopeMissingError()

        envelope = RequestEnvelope.model_validate(event)

        logger.info(f"Alexa request received: {envelope.request.type}")

        response = skill.process_request(context, envelope)

        return response.to_dict()

    return handler
