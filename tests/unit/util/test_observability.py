"""Unit tests for observability setup."""

import warnings

import logfire

from miniblog.config import Settings
from miniblog.util.observability import _should_send


class TestLogfire:
    """Tests for logfire configuration."""

    def test_spans_do_not_warn(self):
        """logfire is configured for the test session."""
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            with logfire.span("test span"):
                logfire.info("inside span")

        categories = [w.category.__name__ for w in caught]
        assert "LogfireNotConfiguredWarning" not in categories

    def test_explicit_send_flag_wins(self):
        """send_to_logfire overrides the token check."""
        settings = Settings(observability={"send_to_logfire": False})

        assert _should_send(settings) is False
