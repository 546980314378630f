import pytest

from autoresponder.core.exceptions import InvalidRequestError
from autoresponder.models.user_configuration import UserConfiguration
from autoresponder.services.event_service import EventOutcome, handle_event
from conftest import VERIFICATION_TOKEN


def callback(event, token=VERIFICATION_TOKEN):
    return {"token": token, "type": "event_callback", "event_id": "Ev1", "event": event}


@pytest.mark.asyncio
async def test_token_is_checked_before_type(store, slack_service):
    with pytest.raises(InvalidRequestError, match="Invalid request token"):
        await handle_event({"token": "nope", "type": "bogus"}, store, slack_service, VERIFICATION_TOKEN)


@pytest.mark.asyncio
async def test_unconfigured_secret_rejects_everything(store, slack_service):
    with pytest.raises(InvalidRequestError, match="Invalid request token"):
        await handle_event({"type": "url_verification", "challenge": "x"}, store, slack_service, None)


@pytest.mark.asyncio
async def test_verification_without_challenge_is_rejected(store, slack_service):
    payload = {"token": VERIFICATION_TOKEN, "type": "url_verification"}

    with pytest.raises(InvalidRequestError):
        await handle_event(payload, store, slack_service, VERIFICATION_TOKEN)


@pytest.mark.asyncio
async def test_url_verification_outcome(store, slack_service):
    payload = {"token": VERIFICATION_TOKEN, "type": "url_verification", "challenge": "abc123"}

    result = await handle_event(payload, store, slack_service, VERIFICATION_TOKEN)

    assert result.outcome == EventOutcome.VERIFIED
    assert result.challenge == "abc123"


@pytest.mark.asyncio
async def test_bot_message_outcome(store, slack_service, slack_requests):
    await store.put("U1", UserConfiguration(reply_message="hi"))
    event = {"type": "message", "user": "U1", "channel": "C1", "bot_id": "B1"}

    result = await handle_event(callback(event), store, slack_service, VERIFICATION_TOKEN)

    assert result.outcome == EventOutcome.IGNORED_BOT
    assert slack_requests == []


@pytest.mark.asyncio
async def test_message_without_user_is_ignored(store, slack_service, users_collection):
    event = {"type": "message", "subtype": "channel_join", "channel": "C1"}

    result = await handle_event(callback(event), store, slack_service, VERIFICATION_TOKEN)

    assert result.outcome == EventOutcome.IGNORED_NO_USER
    assert users_collection.calls == []


@pytest.mark.asyncio
async def test_sent_and_send_failed_outcomes(store, slack_service, slack_reply):
    await store.put("U1", UserConfiguration(reply_message="hi"))
    event = {"type": "message", "user": "U1", "channel": "C1"}

    sent = await handle_event(callback(event), store, slack_service, VERIFICATION_TOKEN)
    slack_reply["status_code"] = 503
    failed = await handle_event(callback(event), store, slack_service, VERIFICATION_TOKEN)

    assert sent.outcome == EventOutcome.SENT
    assert failed.outcome == EventOutcome.SEND_FAILED


@pytest.mark.asyncio
async def test_no_configuration_outcome(store, slack_service):
    event = {"type": "message", "user": "U2", "channel": "C1"}

    result = await handle_event(callback(event), store, slack_service, VERIFICATION_TOKEN)

    assert result.outcome == EventOutcome.IGNORED_NO_CONFIG
