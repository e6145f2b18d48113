"""Tests for tcping.config.ProbeSettings."""

import pytest

from tcping.config import ProbeSettings


class TestProbeSettings:
    """Test documented defaults and validation."""

    def test_defaults(self):
        settings = ProbeSettings()

        assert settings.timeout_ms == 5000
        assert settings.count == 4
        assert settings.interval_ms == 1000
        assert settings.default_port == 80
        assert settings.shutdown_grace_ms == 800

    def test_interval_seconds(self):
        assert ProbeSettings(interval_ms=250).interval_seconds == 0.25

    def test_zero_interval_allowed(self):
        assert ProbeSettings(interval_ms=0).interval_seconds == 0.0

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"timeout_ms": 0},
            {"timeout_ms": -5},
            {"count": 0},
            {"interval_ms": -1},
            {"shutdown_grace_ms": -1},
        ],
    )
    def test_invalid_values_rejected(self, kwargs):
        with pytest.raises(ValueError):
            ProbeSettings(**kwargs)
