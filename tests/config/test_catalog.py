"""
Tests for core/config/catalog.py
"""

import dataclasses

import pytest

from core.config.catalog import (
    ANOMALY_RULES,
    DEFAULT_ACCURACY,
    get_insight_type,
    get_metric,
    get_model,
    get_model_accuracy,
    get_prediction_metrics,
    get_prediction_models,
)
from core.models.registry import get_available_models


class TestModels:
    def test_five_models(self):
        assert [m.id for m in get_prediction_models()] == [
            "linear_regression",
            "exponential_smoothing",
            "moving_average",
            "seasonal",
            "polynomial",
        ]

    def test_every_model_is_registered(self):
        assert {m.id for m in get_prediction_models()} == set(get_available_models())

    def test_accuracy_labels(self):
        assert get_model_accuracy("seasonal") == 85
        assert get_model_accuracy("exponential_smoothing") == 82

    def test_unknown_model_accuracy(self):
        assert get_model_accuracy("arima") == DEFAULT_ACCURACY == 75
        assert get_model("arima") is None


class TestMetrics:
    def test_five_metrics(self):
        assert len(get_prediction_metrics()) == 5

    def test_metric_models_exist(self):
        for metric in get_prediction_metrics():
            assert get_model(metric.model) is not None

    def test_metric_settings(self):
        system_load = get_metric("system_load")
        assert system_load.model == "seasonal"
        assert system_load.forecast_days == 3
        assert get_metric("project_completion").forecast_days == 14

    def test_unknown_metric(self):
        assert get_metric("revenue") is None


class TestReadOnly:
    def test_accessors_return_same_objects(self):
        assert get_prediction_models() is get_prediction_models()
        assert get_prediction_metrics() is get_prediction_metrics()

    def test_descriptors_are_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            get_prediction_models()[0].accuracy = 99

    def test_rules_mapping_is_read_only(self):
        with pytest.raises(TypeError):
            ANOMALY_RULES["z_score"] = None


class TestInsightTypes:
    def test_known_type(self):
        assert get_insight_type("anomaly").priority == "high"

    def test_unknown_type_uses_forecast_style(self):
        assert get_insight_type("mystery") == get_insight_type("forecast")
