"""Unit tests for API logging configuration."""

import pytest
import structlog

from graphnum.api.main import configure_logging
from graphnum.math.big_decimal import BigDecimal


@pytest.fixture
def reset_structlog():
    """Restore the default structlog configuration after the test."""
    yield
    structlog.reset_defaults()


class TestConfigureLogging:
    """configure_logging filters numeric debug events unless debug is on."""

    def test_rounding_events_hidden_by_default(self, capsys, reset_structlog):
        configure_logging(debug=False)
        BigDecimal.from_string("8" * 35)
        assert "big_decimal_rounded" not in capsys.readouterr().out

    def test_rounding_events_shown_in_debug(self, capsys, reset_structlog):
        configure_logging(debug=True)
        BigDecimal.from_string("8" * 35)
        assert "big_decimal_rounded" in capsys.readouterr().out
