"""Shared fixtures for alexa_skill_kit tests."""

import copy
from datetime import datetime, timedelta, timezone
from typing import Any, Callable

import pytest

from alexa_skill_kit.models.request import Context, Request, RequestEnvelope, Session
from alexa_skill_kit.models.response import Response
from alexa_skill_kit.services.dispatcher import Skill

APPLICATION_ID = "amzn1.ask.skill.ABC123"

RECIPE_INTENT_REQUEST: dict[str, Any] = {
    "session": {
        "new": False,
        "sessionId": "amzn1.echo-api.session.[unique-value-here]",
        "attributes": {},
        "user": {"userId": "amzn1.ask.account.[unique-value-here]"},
        "application": {"applicationId": APPLICATION_ID},
    },
    "version": "1.0",
    "request": {
        "locale": "en-US",
        "timestamp": "2016-10-27T21:06:28Z",
        "type": "IntentRequest",
        "requestId": "amzn1.echo-api.request.xyz789",
        "intent": {
            "slots": {"Item": {"name": "Item", "value": "snowball"}},
            "name": "RecipeIntent",
        },
    },
    "context": {
        "AudioPlayer": {"playerActivity": "IDLE"},
        "System": {
            "device": {"supportedInterfaces": {"AudioPlayer": {}}},
            "application": {"applicationId": "amzn1.ask.skill.[unique-value-here]"},
            "user": {"userId": "amzn1.ask.account.[unique-value-here]"},
        },
    },
}


def rfc3339(offset_seconds: float = 0) -> str:
    """UTC timestamp `offset_seconds` from now, to whole seconds."""
    moment = datetime.now(timezone.utc) + timedelta(seconds=offset_seconds)
    return moment.strftime("%Y-%m-%dT%H:%M:%SZ")


class RecordingHandler:
    """Request handler that records which callbacks ran and can be told to fail."""

    def __init__(self, fail_on: str | None = None, set_attribute: bool = False):
        self.fail_on = fail_on
        self.set_attribute = set_attribute
        self.calls: list[str] = []
        self.tokens: list[Any] = []

    def _record(self, name: str, ctx: Any) -> None:
        self.calls.append(name)
        self.tokens.append(ctx)
        if self.fail_on == name:
            raise RuntimeError(f"Error in {name}")

    def on_session_started(
        self, ctx: Any, request: Request, session: Session, context: Context | None, response: Response
    ) -> None:
        self._record("on_session_started", ctx)

    def on_launch(
        self, ctx: Any, request: Request, session: Session, context: Context | None, response: Response
    ) -> None:
        self._record("on_launch", ctx)

    def on_intent(
        self, ctx: Any, request: Request, session: Session, context: Context | None, response: Response
    ) -> None:
        if self.set_attribute:
            session.attributes.string["myNewAttr"] = "Set123"
        self._record("on_intent", ctx)

    def on_session_ended(
        self, ctx: Any, request: Request, session: Session, context: Context | None, response: Response
    ) -> None:
        self._record("on_session_ended", ctx)


@pytest.fixture
def request_data() -> dict[str, Any]:
    """Recipe intent request as raw JSON data, stamped with the current time."""
    data = copy.deepcopy(RECIPE_INTENT_REQUEST)
    data["request"]["timestamp"] = rfc3339()
    return data


@pytest.fixture
def envelope(request_data: dict[str, Any]) -> RequestEnvelope:
    return RequestEnvelope.model_validate(request_data)


@pytest.fixture
def handler() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def make_skill() -> Callable[..., Skill]:
    """Factory for a Skill configured with the test application ID."""

    def _make(request_handler: Any, **kwargs: Any) -> Skill:
        return Skill(application_id=APPLICATION_ID, request_handler=request_handler, **kwargs)

    return _make
