"""
autoresponder/models/user_configuration.py

Purpose: Reply configuration document model

- One document per Slack user_id
- Embedded config holding the automatic reply message
"""

from pydantic import BaseModel, Field
from typing import Any, Dict


class UserConfiguration(BaseModel):
    """Automatic reply settings for a single user."""

    reply_message: str = Field(..., description="Message sent automatically on the user's behalf")


def build_user_document(user_id: str, config: UserConfiguration) -> Dict[str, Any]:
    """
    Builds the fields written on every upsert.

    created_at is written with $setOnInsert instead, so an
    identical rewrite leaves the document unmodified.
    """
    return {
        "user_id": user_id,
        "config": config.model_dump(),
    }


def parse_user_document(document: Dict[str, Any]) -> UserConfiguration:
    """Extracts the configuration from a stored users document."""
    return UserConfiguration(**document["config"])
