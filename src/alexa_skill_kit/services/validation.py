"""Request verification: application ID and timestamp freshness."""

import logging
import re
from datetime import datetime, timezone

from ..errors import ApplicationIdError, RequestEnvelopeMissingError, TimestampError
from ..models.request import RequestEnvelope

logger = logging.getLogger(__name__)

DEFAULT_TIMESTAMP_TOLERANCE = 150

RFC3339_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:\d{2})", re.ASCII)


def verify_application_id(envelope: RequestEnvelope | None, application_id: str) -> None:
    """
    Check that the request was addressed to this skill.

    Args:
        envelope: Parsed Alexa request envelope
        application_id: Skill ID this function is configured for

    Raises:
        RequestEnvelopeMissingError: envelope is None
        ApplicationIdError: either ID is empty or they differ
    """
    if envelope is None:
        raise RequestEnvelopeMissingError()

    request_app_id = envelope.session.application.applicationId
    if not application_id:
        raise ApplicationIdError("application ID was set to an empty string")
    if not request_app_id:
        raise ApplicationIdError("request Application ID was set to an empty string")
    if application_id != request_app_id:
        logger.warning(f"Rejected request for application {request_app_id}")
        raise ApplicationIdError("request Application ID does not match expected ApplicationId")


def parse_timestamp(value: str) -> datetime:
    """Parse an RFC3339 date-time: YYYY-MM-DDTHH:MM:SS[.frac] with Z or +HH:MM."""
    if not RFC3339_PATTERN.fullmatch(value):
        raise ValueError(f"timestamp {value!r} is not RFC3339")
    return datetime.fromisoformat(value)


def verify_timestamp(
    envelope: RequestEnvelope | None,
    tolerance: int = DEFAULT_TIMESTAMP_TOLERANCE,
    now: datetime | None = None,
) -> None:
    """
    Reject requests whose timestamp is more than `tolerance` seconds from now.

    The difference is absolute, so timestamps in the future are checked too.
    A difference of exactly `tolerance` seconds is accepted.

    Raises:
        RequestEnvelopeMissingError: envelope is None
        TimestampError: timestamp is unparseable or out of tolerance
    """
    if envelope is None:
        raise RequestEnvelopeMissingError()

    try:
        timestamp = parse_timestamp(envelope.request.timestamp)
    except ValueError as e:
        raise TimestampError(f"unable to parse request timestamp. Err: {e}") from e

    now = now or datetime.now(timezone.utc)
    delta = abs((now - timestamp).total_seconds())
    if delta > tolerance:
        raise TimestampError(
            f"invalid Timestamp. The request timestamp {timestamp.isoformat()} was off "
            f"the current time {now.isoformat()} by more than {tolerance} seconds."
        )
