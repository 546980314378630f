from utils.slack_utils import create_text_message, describe_api_error
from utils.validation_utils import tokens_match


def test_tokens_match():
    assert tokens_match("secret", "secret")
    assert not tokens_match("secret", "Secret")
    assert not tokens_match("secret", None)
    assert not tokens_match(None, None)
    assert not tokens_match("", "")
    assert not tokens_match("secret", 12345)


def test_create_text_message():
    assert create_text_message("C1", "hi") == {"channel": "C1", "text": "hi"}


def test_describe_api_error():
    assert describe_api_error({"ok": False, "error": "invalid_auth"}) == "invalid_auth"
    assert describe_api_error({"ok": False}) == "unknown_error"
    assert describe_api_error({"error": "x", "warning": "superfluous_charset"}) == "x (warning: superfluous_charset)"
