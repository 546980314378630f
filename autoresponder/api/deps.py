"""
autoresponder/api/deps.py

Purpose: Request-scoped dependencies

- Builds a ConfigurationStore over the lifespan-owned Motor client
- Hands out the Slack client stored on app.state
- Overridden in tests through app.dependency_overrides
"""

from fastapi import Depends, Request

from autoresponder.core.config import Settings, get_settings
from autoresponder.services.configuration_store import ConfigurationStore
from autoresponder.services.slack_service import SlackService


def get_configuration_store(
    request: Request,
    current: Settings = Depends(get_settings),
) -> ConfigurationStore:
    client = getattr(request.app.state, "mongo_client", None)
    if client is None:
        raise RuntimeError(
            "MongoDB client not initialized. The application lifespan must run first."
        )
    return ConfigurationStore(client, current)


def get_slack_service(
    request: Request,
    current: Settings = Depends(get_settings),
) -> SlackService:
    slack = getattr(request.app.state, "slack_service", None)
    if slack is None:
        slack = SlackService.from_settings(current)
    return slack
