"""Tests for timestamp unit detection and conversion."""

import pytest

from sensu_influxdb_handler.core.timestamps import detect_unit, to_precision


class TestDetectUnit:
    """Tests for detect_unit()."""

    @pytest.mark.core
    @pytest.mark.tier(0)
    @pytest.mark.parametrize(
        ("timestamp", "unit"),
        [
            (1702300000, "s"),
            (1702300000123, "ms"),
            (1702300000123456, "us"),
            (1702300000123456789, "ns"),
        ],
    )
    def test_unit_from_digit_count(self, timestamp: int, unit: str) -> None:
        """The unit follows the number of digits."""
        assert detect_unit(timestamp) == unit


class TestToPrecision:
    """Tests for to_precision()."""

    @pytest.mark.core
    @pytest.mark.tier(0)
    @pytest.mark.parametrize(
        ("precision", "expected"),
        [
            ("s", 1702300000),
            ("ms", 1702300000000),
            ("us", 1702300000000000),
            ("ns", 1702300000000000000),
        ],
    )
    def test_seconds_to_each_precision(self, precision: str, expected: int) -> None:
        """Seconds scale up to finer precisions."""
        assert to_precision(1702300000, precision) == expected

    @pytest.mark.core
    @pytest.mark.tier(0)
    def test_nanoseconds_are_truncated_to_seconds(self) -> None:
        """Coarsening truncates."""
        assert to_precision(1702300000999999999, "s") == 1702300000

    @pytest.mark.core
    @pytest.mark.tier(0)
    def test_zero_is_unset(self) -> None:
        """A zero timestamp converts to None."""
        assert to_precision(0, "s") is None
