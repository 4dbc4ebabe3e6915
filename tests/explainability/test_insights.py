"""
Tests for core/explainability/insights.py
"""

import pytest

from core.eda.anomalies import Anomaly, detect_anomalies
from core.explainability.insights import Insight, generate_insights


def _types(insights):
    return [i.type for i in insights]


class TestWeekOverWeek:
    def test_growth(self, growing_history):
        insights = generate_insights(growing_history, [], [])
        assert insights == [
            Insight(
                type="growth",
                message="Strong growth detected: 20.0% increase over last week",
                confidence=0.85,
                action="Consider scaling infrastructure to handle increased load",
            )
        ]

    def test_decline(self):
        insights = generate_insights([10.0] * 7 + [8.0] * 7, [], [])
        assert _types(insights) == ["decline"]
        assert insights[0].message == "Activity decline: 20.0% decrease detected"
        assert insights[0].confidence == 0.80

    def test_small_change_is_silent(self):
        assert generate_insights([10.0] * 7 + [10.5] * 7, [], []) == []

    def test_exactly_ten_percent_is_silent(self):
        assert generate_insights([10.0] * 7 + [11.0] * 7, [], []) == []

    def test_disabled_below_fourteen_points(self):
        assert generate_insights([10.0] * 6 + [20.0] * 7, [], []) == []

    def test_zero_previous_week_is_silent(self):
        assert generate_insights([0.0] * 7 + [5.0] * 7, [], []) == []

    def test_uses_only_last_two_weeks(self):
        history = [100.0] * 10 + [10.0] * 7 + [12.0] * 7
        assert _types(generate_insights(history, [], [])) == ["growth"]


class TestAnomalyInsight:
    def test_counts_anomalies(self):
        anomalies = [
            Anomaly(index=3, value=90.0, z_score=3.2, severity="critical", type="spike"),
            Anomaly(index=8, value=1.0, z_score=-2.7, severity="warning", type="drop"),
        ]
        insights = generate_insights([10.0] * 10, [], anomalies)
        assert insights == [
            Insight(
                type="anomaly",
                message="2 anomalies detected in recent activity",
                confidence=0.90,
                action="Investigate unusual patterns or data quality issues",
            )
        ]

    def test_single_anomaly_wording(self, spike_history):
        insights = generate_insights(spike_history, [], detect_anomalies(spike_history))
        assert insights[0].message == "1 anomaly detected in recent activity"

    def test_no_anomalies_no_insight(self):
        assert generate_insights([10.0] * 10, [], []) == []


class TestForecastInsight:
    def test_flat_outlook(self, growing_history):
        insights = generate_insights(growing_history, [12.0] * 7, [])
        forecast = insights[-1]
        assert forecast.type == "forecast"
        assert forecast.message == "7-day forecast: 0.0% change expected"
        assert forecast.confidence == 0.75
        assert forecast.action == "Expected average: 12 per day"

    def test_positive_change_has_plus_sign(self):
        insights = generate_insights([10.0] * 7, [11.0] * 7, [])
        assert insights == [
            Insight(
                type="forecast",
                message="7-day forecast: +10.0% change expected",
                confidence=0.75,
                action="Expected average: 11 per day",
            )
        ]

    def test_negative_change(self):
        insights = generate_insights([10.0] * 7, [8.0, 7.0, 6.0], [])
        assert insights[0].message == "3-day forecast: -30.0% change expected"
        assert insights[0].action == "Expected average: 7 per day"

    def test_expected_average_rounds_half_up(self):
        insights = generate_insights([4.0] * 7, [2.0, 3.0], [])
        assert insights[0].action == "Expected average: 3 per day"

    def test_short_history_compares_available_days(self):
        insights = generate_insights([10.0, 20.0, 30.0], [40.0], [])
        assert insights[0].message == "1-day forecast: +100.0% change expected"

    def test_zero_recent_activity(self):
        insights = generate_insights([0.0] * 7, [1.0] * 7, [])
        assert insights[0].type == "forecast"
        assert "no recent activity" in insights[0].message
        assert insights[0].action == "Expected average: 1 per day"

    def test_empty_forecast_no_insight(self):
        assert generate_insights([10.0] * 7, [], []) == []


class TestRuleCombination:
    def test_order_growth_anomaly_forecast(self, growing_history):
        anomalies = [Anomaly(index=0, value=1.0, z_score=-3.5, severity="critical", type="drop")]
        insights = generate_insights(growing_history, [13.0] * 7, anomalies)
        assert _types(insights) == ["growth", "anomaly", "forecast"]

    def test_confidences_in_unit_interval(self, growing_history):
        anomalies = [Anomaly(index=0, value=1.0, z_score=-3.5, severity="critical", type="drop")]
        for insight in generate_insights(growing_history, [13.0] * 7, anomalies):
            assert 0.0 <= insight.confidence <= 1.0

    def test_empty_inputs(self):
        assert generate_insights([], [], []) == []


class TestWeeklyPattern:
    def test_pattern_off_by_default(self, weekly_history):
        assert "pattern" not in _types(generate_insights(weekly_history, [], []))

    def test_weekly_cycle_detected(self, weekly_history):
        insights = generate_insights(weekly_history, [], [], detect_patterns=True)
        pattern = [i for i in insights if i.type == "pattern"]
        assert len(pattern) == 1
        assert pattern[0].confidence == pytest.approx(0.70)
        assert "day 6" in pattern[0].message

    def test_needs_four_weeks(self):
        history = [1.0, 1.0, 1.0, 1.0, 1.0, 10.0, 10.0] * 3
        assert generate_insights(history, [], [], detect_patterns=True) == []

    def test_constant_series_has_no_pattern(self):
        assert generate_insights([3.0] * 35, [], [], detect_patterns=True) == []

    def test_five_day_cycle_not_reported_as_weekly(self):
        history = [float(v % 5) for v in range(35)]
        assert "pattern" not in _types(generate_insights(history, [], [], detect_patterns=True))
