"""
autoresponder/schemas/commands.py

Purpose: Slash command payload schema

- Slack posts slash commands as form-encoded bodies
- Only user_id and text drive behaviour; the rest is kept for logging
"""

from pydantic import BaseModel, Field
from typing import Optional


class CommandPayload(BaseModel):
    """
    Normalized slash command invocation.
    """
    user_id: str = Field(..., min_length=1, description="Slack user that invoked the command")
    text: str = Field("", description="Free text typed after the command")
    token: Optional[str] = Field(None, description="Deprecated verification token")
    command: Optional[str] = Field(None, description="Command that was typed, e.g. /autoreply")
    user_name: Optional[str] = None
    response_url: Optional[str] = None
    trigger_id: Optional[str] = None
    api_app_id: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "token": "gIkuvaNzQIHg97ATvDxqgjtO",
                "command": "/autoreply",
                "text": "Out of office until Monday",
                "user_id": "U2147483697",
                "user_name": "steve",
                "response_url": "https://hooks.slack.com/commands/1234/5678",
                "trigger_id": "13345224609.738474920.8088930838d88f008e0",
                "api_app_id": "A123456"
            }
        }
