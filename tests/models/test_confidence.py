"""
Tests for core/models/confidence.py
"""

import pytest

from core.models.confidence import ConfidenceBand, bands_to_frame, calculate_confidence_interval, z_for_level
from core.models.registry import forecast_next_days


class TestZForLevel:
    def test_ninety_five(self):
        assert z_for_level(0.95) == 1.96

    @pytest.mark.parametrize("level", [0.99, 0.9, 0.5, 1.0])
    def test_everything_else_is_ninety_nine(self, level):
        assert z_for_level(level) == 2.58


class TestConfidenceInterval:
    def test_margin_from_forecast_spread(self):
        bands = calculate_confidence_interval([7.0, 8.0], 0.95)
        # population std 0.5, margin 0.98
        assert bands[0].value == 7.0
        assert bands[0].lower == pytest.approx(6.02)
        assert bands[0].upper == pytest.approx(7.98)
        assert bands[1].lower == pytest.approx(7.02)
        assert bands[1].upper == pytest.approx(8.98)

    def test_ninety_nine_is_wider(self):
        narrow = calculate_confidence_interval([7.0, 8.0], 0.95)
        wide = calculate_confidence_interval([7.0, 8.0], 0.99)
        assert wide[0].upper == pytest.approx(7.0 + 2.58 * 0.5)
        assert wide[0].upper > narrow[0].upper

    def test_unsupported_level_treated_as_ninety_nine(self):
        assert calculate_confidence_interval([7.0, 8.0], 0.8) == calculate_confidence_interval([7.0, 8.0], 0.99)

    def test_flat_forecast_has_zero_width(self):
        bands = calculate_confidence_interval([5.0] * 3)
        assert bands == [ConfidenceBand(value=5.0, lower=5.0, upper=5.0)] * 3

    def test_lower_bound_floored_at_zero(self):
        bands = calculate_confidence_interval([0.0, 10.0])
        # std 5, margin 9.8
        assert bands[0].lower == 0.0
        assert bands[1].lower == pytest.approx(0.2)

    def test_empty_forecast(self):
        assert calculate_confidence_interval([]) == []

    @pytest.mark.parametrize("level", [0.95, 0.99])
    @pytest.mark.parametrize(
        "series,model_id",
        [
            ([50.0, 40.0, 30.0, 20.0, 10.0], "exponential_smoothing"),
            ([3.0, 9.0, 4.0, 12.0, 5.0, 15.0, 1.0] * 3, "seasonal"),
            ([1.0, 2.0, 5.0, 10.0, 17.0], "polynomial"),
        ],
    )
    def test_bands_contain_their_forecast(self, series, model_id, level):
        forecast = forecast_next_days(series, model_id, 10)
        for band in calculate_confidence_interval(forecast, level):
            assert band.lower >= 0
            assert band.lower <= band.value <= band.upper

    def test_bands_to_frame(self):
        df = bands_to_frame(calculate_confidence_interval([7.0, 8.0]))
        assert list(df.columns) == ["forecast", "lower_95", "upper_95"]
        assert list(df["forecast"]) == [7.0, 8.0]
        assert list(bands_to_frame([], 0.99).columns) == ["forecast", "lower_99", "upper_99"]
