"""
autoresponder/api/events.py

Purpose: Slack Events API endpoint

- Receives url_verification handshakes and event_callback notifications
- Delegates to the event service
- Acknowledges accepted events with an empty 200 so Slack does not retry
"""

from fastapi import APIRouter, Body, Depends
from fastapi.responses import Response
from typing import Any, Dict

from autoresponder.api.deps import get_configuration_store, get_slack_service
from autoresponder.core.config import Settings, get_settings
from autoresponder.core.logging import get_logger
from autoresponder.schemas.response import VerificationResponse
from autoresponder.services.configuration_store import ConfigurationStore
from autoresponder.services.event_service import EventOutcome, handle_event
from autoresponder.services.slack_service import SlackService

logger = get_logger(__name__)
router = APIRouter()


@router.post("/event")
async def event_handler(
    payload: Dict[str, Any] = Body(...),
    store: ConfigurationStore = Depends(get_configuration_store),
    slack: SlackService = Depends(get_slack_service),
    current: Settings = Depends(get_settings),
):
    """
    Slack Events API request URL.

    Returns:
        {"challenge": ...} for url_verification, an empty body otherwise
    """
    result = await handle_event(payload, store, slack, current.SLACK_VERIFICATION_TOKEN)

    if result.outcome == EventOutcome.VERIFIED:
        return VerificationResponse(challenge=result.challenge)

    return Response(status_code=200)
