"""
autoresponder/services/event_service.py

Purpose: Slack Events API handling

- Verifies the request token and envelope type
- Answers url_verification handshakes
- Sends the configured automatic reply for message events
- Store and send failures are logged, never surfaced to Slack
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ValidationError

from autoresponder.core.exceptions import InvalidRequestError, SendFailedError, StorageUnavailableError
from autoresponder.core.logging import get_logger, LogContext
from autoresponder.schemas.events import (
    SUPPORTED_PAYLOAD_TYPES,
    EventCallbackPayload,
    UrlVerificationPayload,
    parse_event_payload,
)
from autoresponder.services.configuration_store import ConfigurationStore
from autoresponder.services.slack_service import SlackService
from utils.constants import (
    EVENT_TYPE_URL_VERIFICATION,
    INNER_EVENT_TYPE_MESSAGE,
    INVALID_EVENT_MESSAGE,
    INVALID_TOKEN_MESSAGE,
    INVALID_TYPE_MESSAGE,
)
from utils.validation_utils import tokens_match

logger = get_logger(__name__)


class EventOutcome(str, Enum):
    """Terminal state reached by an accepted event payload."""

    VERIFIED = "verified"
    SENT = "sent"
    SEND_FAILED = "send_failed"
    IGNORED_BOT = "ignored_bot"
    IGNORED_NO_USER = "ignored_no_user"
    IGNORED_NO_CONFIG = "ignored_no_config"
    STORE_FAILED = "store_failed"


class EventResult(BaseModel):
    outcome: EventOutcome
    challenge: Any = None


async def handle_event(
    payload: Dict[str, Any],
    store: ConfigurationStore,
    slack: SlackService,
    verification_token: Optional[str],
) -> EventResult:
    """
    Processes one Events API payload.

    Args:
        payload: Raw JSON body sent by Slack
        store: Configuration store for this request
        slack: Messaging client for this request
        verification_token: Configured verification secret

    Returns:
        EventResult describing what happened; every outcome is acknowledged

    Raises:
        InvalidRequestError: bad token, unknown envelope type or non-message event
    """
    if not tokens_match(verification_token, payload.get("token")):
        raise InvalidRequestError(INVALID_TOKEN_MESSAGE)

    payload_type = payload.get("type")
    if payload_type not in SUPPORTED_PAYLOAD_TYPES:
        raise InvalidRequestError(INVALID_TYPE_MESSAGE, details={"type": payload_type})

    try:
        envelope = parse_event_payload(payload)
    except ValidationError as e:
        message = INVALID_TYPE_MESSAGE if payload_type == EVENT_TYPE_URL_VERIFICATION else INVALID_EVENT_MESSAGE
        raise InvalidRequestError(
            message,
            details=e.errors(include_url=False, include_context=False, include_input=False)
        ) from e

    if isinstance(envelope, UrlVerificationPayload):
        logger.info("Answering url_verification challenge")
        return EventResult(outcome=EventOutcome.VERIFIED, challenge=envelope.challenge)

    return await _handle_event_callback(envelope, store, slack)


async def _handle_event_callback(
    envelope: EventCallbackPayload,
    store: ConfigurationStore,
    slack: SlackService,
) -> EventResult:
    event = envelope.event

    if event.type != INNER_EVENT_TYPE_MESSAGE:
        raise InvalidRequestError(INVALID_EVENT_MESSAGE, details={"event_type": event.type})

    with LogContext(event_id=envelope.event_id):
        logger.info(f"Processing event [{envelope.event_id}]")

        if event.is_from_bot:
            logger.info(f"Event [{envelope.event_id}] is from bot, ignoring")
            return EventResult(outcome=EventOutcome.IGNORED_BOT)

        if not event.user or not event.channel:
            logger.info(f"Event [{envelope.event_id}] has no user or channel, ignoring")
            return EventResult(outcome=EventOutcome.IGNORED_NO_USER)

        with LogContext(user_id=event.user, channel=event.channel):
            outcome = await _reply_if_configured(event.user, event.channel, store, slack)

        logger.info(f"Event [{envelope.event_id}] processed: {outcome.value}")
        return EventResult(outcome=outcome)


async def _reply_if_configured(
    user_id: str,
    channel: str,
    store: ConfigurationStore,
    slack: SlackService,
) -> EventOutcome:
    logger.info("Looking up configured auto response")

    try:
        config = await store.get(user_id)
    except StorageUnavailableError as e:
        logger.error(f"Could not look up auto response: {e.message}")
        return EventOutcome.STORE_FAILED

    if config is None:
        logger.info("No configured auto response, ignoring")
        return EventOutcome.IGNORED_NO_CONFIG

    logger.info("Found configuration, posting auto response")

    try:
        await slack.send_message(channel, config.reply_message)
    except SendFailedError as e:
        # TODO: decide between retrying and queueing failed auto responses
        logger.error(f"Auto response not delivered: {e.message}")
        return EventOutcome.SEND_FAILED

    return EventOutcome.SENT
