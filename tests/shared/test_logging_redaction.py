"""Tests for structlog configuration and the privacy redactor."""

import io

import pytest
import structlog

from s4migrate.shared.infrastructure.logging import configure_logging, get_logger, privacy_redactor, run_context


class TestPrivacyRedactor:
    def test_redacts_credentials_and_home_paths(self):
        event = {
            "event": "gateway_read_failed",
            "error": "logon failed password=hunter2 for /home/basis/sap.ini",
            "nested": {"auth": "Bearer abc.def"},
            "items": ["token: xyz", 3],
        }
        redacted = privacy_redactor(None, "warning", event)

        assert "hunter2" not in redacted["error"]
        assert "[HOME_REDACTED]" in redacted["error"]
        assert redacted["nested"]["auth"] == "Bearer [TOKEN_REDACTED]"
        assert "xyz" not in redacted["items"][0]
        assert redacted["items"][1] == 3

    def test_tuples_keep_their_type(self):
        redacted = privacy_redactor(None, "info", {"args": ("secret=abc", 1)})
        assert redacted["args"] == ("secret=[REDACTED]", 1)

    def test_leaves_plain_events_alone(self):
        event = {"event": "scan_completed", "objects": 7}
        assert privacy_redactor(None, "info", event) == event

    def test_get_logger(self):
        assert get_logger(__name__) is not None


class TestConfigureLogging:
    @pytest.fixture(autouse=True)
    def _reset_structlog(self):
        yield
        structlog.reset_defaults()

    def test_events_reach_stream_redacted(self):
        stream = io.StringIO()
        configure_logging(stream=stream)

        get_logger("s4migrate.test").warning("gateway_read_failed", error="password=hunter2")

        output = stream.getvalue()
        assert "gateway_read_failed" in output
        assert "hunter2" not in output


class TestRunContext:
    def test_binds_only_inside_block(self):
        with run_context(gateway_mode="mock", dry_run=True):
            assert structlog.contextvars.get_contextvars() == {"gateway_mode": "mock", "dry_run": True}
        assert "gateway_mode" not in structlog.contextvars.get_contextvars()

    def test_unbinds_on_error(self):
        with pytest.raises(RuntimeError):
            with run_context(gateway_mode="vsp"):
                raise RuntimeError("boom")
        assert "gateway_mode" not in structlog.contextvars.get_contextvars()
