"""
autoresponder/services/slack_service.py

Purpose: Slack message sending

- Posts messages via the Slack Web API (chat.postMessage)
- One scoped HTTP client per call, bounded by a timeout
- Any delivery failure raises SendFailedError
"""

import httpx
from pydantic import BaseModel
from typing import Optional
from autoresponder.core.config import Settings, settings
from autoresponder.core.exceptions import SendFailedError
from autoresponder.core.logging import get_logger
from utils.constants import SLACK_POST_MESSAGE_METHOD
from utils.slack_utils import create_text_message, describe_api_error

logger = get_logger(__name__)


class SendResult(BaseModel):
    """Outcome of a successful chat.postMessage call."""

    channel: str
    ts: Optional[str] = None


class SlackService:
    """Service for sending chat messages via the Slack Web API"""

    def __init__(
        self,
        token: Optional[str],
        base_url: str = "https://slack.com/api",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    @classmethod
    def from_settings(cls, current: Optional[Settings] = None) -> "SlackService":
        current = current or settings
        return cls(
            token=current.SLACK_BOT_TOKEN,
            base_url=current.SLACK_API_BASE_URL,
            timeout=current.SLACK_TIMEOUT_SECONDS,
        )

    async def send_message(self, channel: str, text: str) -> SendResult:
        """
        Posts a text message to a channel.

        Args:
            channel: Channel, group or DM id
            text: Message text

        Returns:
            SendResult with the channel and message timestamp

        Raises:
            SendFailedError: on timeout, transport error, non-2xx status or
                an ``ok: false`` response
        """
        if not self.is_configured():
            raise SendFailedError("Slack bot token is not configured")

        url = f"{self.base_url}/{SLACK_POST_MESSAGE_METHOD}"
        headers = {"Authorization": f"Bearer {self.token}"}

        logger.info(f"📤 Sending Slack message to {channel}")

        try:
            async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
                response = await client.post(
                    url,
                    json=create_text_message(channel, text),
                    headers=headers,
                )
        except httpx.TimeoutException as e:
            logger.error("Slack API timeout")
            raise SendFailedError("Slack API timeout", details={"channel": channel}) from e
        except httpx.HTTPError as e:
            logger.error(f"Slack API transport error: {e}")
            raise SendFailedError(f"Slack API transport error: {e}", details={"channel": channel}) from e

        if response.status_code != 200:
            logger.error(f"❌ Slack API error: {response.status_code} - {response.text}")
            raise SendFailedError(
                f"Slack API error: {response.status_code}",
                details={"channel": channel, "status_code": response.status_code}
            )

        try:
            body = response.json()
        except ValueError as e:
            raise SendFailedError("Slack API returned a non-JSON body", details={"channel": channel}) from e

        if not body.get("ok"):
            reason = describe_api_error(body)
            logger.error(f"❌ Slack rejected message: {reason}")
            raise SendFailedError(
                f"Slack API error: {reason}",
                details={"channel": channel, "error": body.get("error")}
            )

        logger.info(f"✅ Message sent: ts={body.get('ts')}")
        return SendResult(channel=body.get("channel") or channel, ts=body.get("ts"))

    def is_configured(self) -> bool:
        """Check if a bot token is available"""
        return bool(self.token)
