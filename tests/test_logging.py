import json
import logging

from autoresponder.core.logging import (
    ContextFilter,
    LogContext,
    StructuredFormatter,
    get_logger,
)


def make_record():
    return logging.LogRecord("autoresponder.test", logging.INFO, __file__, 1, "hello", None, None)


def filtered_record():
    record = make_record()
    ContextFilter().filter(record)
    return record


def test_get_logger_is_namespaced():
    assert get_logger("services.event_service").name == "autoresponder.services.event_service"


def test_log_context_nests_and_restores():
    with LogContext(event_id="Ev1"):
        with LogContext(user_id="U1"):
            inner = filtered_record()
        outer = filtered_record()
    after = filtered_record()

    assert (inner.event_id, inner.user_id) == ("Ev1", "U1")
    assert outer.event_id == "Ev1"
    assert not hasattr(outer, "user_id")
    assert not hasattr(after, "event_id")


def test_structured_formatter_includes_context():
    with LogContext(user_id="U1", channel="C1"):
        record = filtered_record()

    data = json.loads(StructuredFormatter().format(record))

    assert data["message"] == "hello"
    assert data["user_id"] == "U1"
    assert data["channel"] == "C1"
    assert "event_id" not in data
