"""
autoresponder/api/commands.py

Purpose: Slash command endpoint

- Receives form-encoded slash commands from Slack
- Stores the command text as the user's automatic reply
- Answers with plain text shown to the invoking user
"""

from fastapi import APIRouter, Depends, Form
from fastapi.responses import PlainTextResponse
from typing import Optional

from autoresponder.api.deps import get_configuration_store
from autoresponder.core.config import Settings, get_settings
from autoresponder.schemas.commands import CommandPayload
from autoresponder.services.command_service import handle_command
from autoresponder.services.configuration_store import ConfigurationStore

router = APIRouter()


@router.post("/command", response_class=PlainTextResponse)
async def command_handler(
    user_id: str = Form(..., min_length=1),
    text: str = Form(""),
    token: Optional[str] = Form(None),
    command: Optional[str] = Form(None),
    user_name: Optional[str] = Form(None),
    response_url: Optional[str] = Form(None),
    trigger_id: Optional[str] = Form(None),
    api_app_id: Optional[str] = Form(None),
    store: ConfigurationStore = Depends(get_configuration_store),
    current: Settings = Depends(get_settings),
):
    """
    Slash command request URL.
    """
    payload = CommandPayload(
        user_id=user_id,
        text=text,
        token=token,
        command=command,
        user_name=user_name,
        response_url=response_url,
        trigger_id=trigger_id,
        api_app_id=api_app_id,
    )

    message = await handle_command(
        payload,
        store,
        verification_token=current.SLACK_VERIFICATION_TOKEN,
        verify_token=current.VERIFY_COMMAND_TOKEN,
    )
    return PlainTextResponse(message)
