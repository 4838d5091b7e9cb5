"""Tests for request id handling in the logging context."""

import pytest

from forge.core.logging import (
    _add_request_context,
    clear_request_id,
    generate_request_id,
    get_request_id,
    set_request_id,
)


@pytest.mark.unit
class TestRequestContext:
    """Test suite for the request id context variable and log enrichment."""

    def teardown_method(self):
        clear_request_id()

    def test_set_and_clear(self):
        set_request_id("abc")
        assert get_request_id() == "abc"

        clear_request_id()
        assert get_request_id() is None

    def test_generated_ids_are_unique(self):
        assert generate_request_id() != generate_request_id()

    def test_log_entries_carry_request_context(self):
        set_request_id("req-42")

        event = _add_request_context(None, "info", {"event": "hello"})

        assert event["request_id"] == "req-42"
        assert event["service"] == "TransformerForge"
        assert "version" in event

    def test_no_request_id_outside_requests(self):
        event = _add_request_context(None, "info", {"event": "hello"})

        assert "request_id" not in event
