"""
utils/slack_utils.py

Purpose: Slack message builders

- Constructs chat.postMessage payloads
- Describes Slack API error responses for logs
"""

from typing import Dict, Any


def create_text_message(channel: str, text: str) -> Dict[str, Any]:
    """
    Creates a plain text chat.postMessage payload.

    Args:
        channel: Channel, group or DM id to post into
        text: Message text (supports Slack mrkdwn)

    Returns:
        Message payload dict
    """
    return {
        "channel": channel,
        "text": text,
    }


def describe_api_error(body: Dict[str, Any]) -> str:
    """Formats an ``ok: false`` Slack response into a short log string."""
    error = body.get("error", "unknown_error")
    warning = body.get("warning")
    if warning:
        return f"{error} (warning: {warning})"
    return error
