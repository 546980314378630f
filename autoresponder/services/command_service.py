"""
autoresponder/services/command_service.py

Purpose: Slash command handling

- Stores the command text as the user's automatic reply
- Always answers with a user-facing string, even when storage fails
"""

from typing import Optional

from autoresponder.core.exceptions import InvalidRequestError, StorageUnavailableError
from autoresponder.core.logging import get_logger, LogContext
from autoresponder.models.user_configuration import UserConfiguration
from autoresponder.schemas.commands import CommandPayload
from autoresponder.services.configuration_store import ConfigurationStore
from utils.constants import (
    AUTO_RESPONSE_ENABLED_MESSAGE,
    AUTO_RESPONSE_FAILED_MESSAGE,
    INVALID_TOKEN_MESSAGE,
)
from utils.validation_utils import tokens_match

logger = get_logger(__name__)


async def handle_command(
    command: CommandPayload,
    store: ConfigurationStore,
    verification_token: Optional[str] = None,
    verify_token: bool = False,
) -> str:
    """
    Saves the text following the slash command as the user's reply message.

    Args:
        command: Parsed slash command
        store: Configuration store for this request
        verification_token: Configured verification secret
        verify_token: Reject commands whose token does not match

    Returns:
        Confirmation or apology text shown to the user

    Raises:
        InvalidRequestError: only when token verification is enabled and fails
    """
    if verify_token and not tokens_match(verification_token, command.token):
        raise InvalidRequestError(INVALID_TOKEN_MESSAGE)

    with LogContext(user_id=command.user_id, command=command.command):
        logger.info("Processing configuration")

        config = UserConfiguration(reply_message=command.text)

        try:
            stored = await store.put(command.user_id, config)
        except StorageUnavailableError as e:
            logger.error(f"Could not store configuration: {e.message}")
            stored = False
        finally:
            logger.info("Processed configuration")

        if stored:
            return AUTO_RESPONSE_ENABLED_MESSAGE

        return AUTO_RESPONSE_FAILED_MESSAGE
