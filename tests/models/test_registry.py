"""
Tests for core/models/registry.py

Model dispatch, the unknown-model fallback and the forecast output contract.
"""

import numpy as np
import pytest

from core.models.linear_trend import LinearTrendForecaster
from core.models.registry import (
    MODEL_REGISTRY,
    create_model,
    forecast_next_days,
    get_available_models,
    resolve_model_id,
    round_forecast,
)

ALL_MODELS = ["linear_regression", "exponential_smoothing", "moving_average", "seasonal", "polynomial"]


class TestRegistry:
    def test_all_models_registered(self):
        assert get_available_models() == ALL_MODELS

    def test_create_known_model(self):
        for model_id in ALL_MODELS:
            assert create_model(model_id).model_id == model_id

    def test_unknown_model_creates_linear_trend(self):
        assert isinstance(create_model("arima"), LinearTrendForecaster)
        assert resolve_model_id("arima") == "linear_regression"

    def test_registry_classes_declare_their_ids(self):
        for model_id, cls in MODEL_REGISTRY.items():
            assert cls.model_id == model_id


class TestRoundForecast:
    def test_clamps_negative_values(self):
        assert round_forecast(np.array([-3.2, 0.0, 4.5])) == [0.0, 0.0, 4.5]

    def test_rounds_to_two_decimals(self):
        assert round_forecast(np.array([5.285714, 1.0049])) == [5.29, 1.0]

    def test_rounds_half_up(self):
        assert round_forecast(np.array([0.125, 2.5])) == [0.13, 2.5]


class TestForecastNextDays:
    def test_linear_regression(self, linear_history):
        assert forecast_next_days(linear_history, "linear_regression", 2) == [7.0, 8.0]

    def test_unknown_model_matches_linear(self, linear_history):
        assert forecast_next_days(linear_history, "not_a_model", 2) == forecast_next_days(
            linear_history, "linear_regression", 2
        )

    def test_exponential_smoothing(self):
        assert forecast_next_days([10.0, 20.0, 30.0], "exponential_smoothing", 2) == [23.2, 28.3]

    def test_moving_average_is_flat(self):
        series = [float(v) for v in range(1, 11)]
        assert forecast_next_days(series, "moving_average", 3) == [5.29, 5.29, 5.29]

    def test_moving_average_short_history_is_damped(self):
        assert forecast_next_days([3.0, 6.0, 9.0], "moving_average", 2) == [2.57, 2.57]

    def test_polynomial(self):
        assert forecast_next_days([1.0, 2.0, 5.0, 10.0, 17.0], "polynomial", 2) == pytest.approx([37.0, 50.0])

    def test_seasonal_length_matches_horizon(self, weekly_history):
        assert len(forecast_next_days(weekly_history, "seasonal", 10)) == 10

    @pytest.mark.parametrize("model_id", ALL_MODELS)
    def test_default_horizon_is_seven(self, model_id, weekly_history):
        assert len(forecast_next_days(weekly_history, model_id)) == 7

    @pytest.mark.parametrize("model_id", ALL_MODELS)
    @pytest.mark.parametrize("series", [[], [1.0], [1.0, 2.0]])
    def test_short_history_gives_empty_forecast(self, model_id, series):
        assert forecast_next_days(series, model_id, 7) == []

    @pytest.mark.parametrize("model_id", ALL_MODELS)
    def test_non_positive_horizon(self, model_id, linear_history):
        assert forecast_next_days(linear_history, model_id, 0) == []

    @pytest.mark.parametrize("model_id", ALL_MODELS)
    @pytest.mark.parametrize(
        "series",
        [
            [50.0, 40.0, 30.0, 20.0, 10.0],
            [100.0, 90.0, 60.0, 20.0, 5.0, 1.0, 0.0, 0.0],
            [30.0, 28.0, 25.0, 20.0, 18.0, 12.0, 9.0, 7.0, 5.0, 4.0, 2.0, 1.0, 1.0, 0.0, 0.0],
        ],
    )
    def test_forecast_is_never_negative(self, model_id, series):
        forecast = forecast_next_days(series, model_id, 14)
        assert len(forecast) == 14
        assert all(v >= 0 for v in forecast)

    def test_steep_decline_clamps_to_zero(self):
        assert forecast_next_days([50.0, 40.0, 30.0, 20.0, 10.0], "linear_regression", 3) == [0.0, 0.0, 0.0]

    def test_values_are_plain_floats(self, linear_history):
        forecast = forecast_next_days(linear_history, "seasonal", 3)
        assert all(type(v) is float for v in forecast)

    def test_input_not_mutated(self, weekly_history):
        before = list(weekly_history)
        for model_id in ALL_MODELS:
            forecast_next_days(weekly_history, model_id, 5)
        assert weekly_history == before
