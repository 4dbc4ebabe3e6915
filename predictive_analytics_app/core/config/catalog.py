"""Static catalog: prediction models, metrics, anomaly rules and insight types.

Everything here is read-only data built once at import time. Accessors return
the same objects on every call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType

# Engine constants
SEASON_LENGTH = 7
DEFAULT_ALPHA = 0.3
DEFAULT_WINDOW = 7
MIN_FORECAST_POINTS = 3
MIN_ANOMALY_POINTS = 3
ZSCORE_THRESHOLD = 2.5
CRITICAL_ZSCORE = 3.0
DEFAULT_ACCURACY = 75
DEFAULT_MODEL_ID = "linear_regression"

# z multipliers for the supported confidence levels; anything else uses 0.99
CONFIDENCE_Z = MappingProxyType({0.95: 1.96, 0.99: 2.58})

# Insight rule settings
WEEK = 7
GROWTH_THRESHOLD_PCT = 10.0
PATTERN_MIN_POINTS = 28
PATTERN_ACF_THRESHOLD = 0.5
INSIGHT_CONFIDENCE = MappingProxyType({
    "growth": 0.85,
    "decline": 0.80,
    "anomaly": 0.90,
    "forecast": 0.75,
    "pattern": 0.70,
})


@dataclass(frozen=True)
class ModelDescriptor:
    id: str
    name: str
    description: str
    icon: str
    color: str
    accuracy: int
    best_for: tuple[str, ...] = ()


@dataclass(frozen=True)
class Threshold:
    warning: float
    critical: float


@dataclass(frozen=True)
class MetricDescriptor:
    id: str
    name: str
    description: str
    model: str
    confidence: float
    forecast_days: int
    unit: str
    threshold: Threshold
    icon: str
    color: str


@dataclass(frozen=True)
class AnomalyRule:
    method: str
    sensitivity: str
    description: str
    threshold: float | None = None
    thresholds: MappingProxyType = field(default_factory=lambda: MappingProxyType({}))


@dataclass(frozen=True)
class InsightType:
    type: str
    icon: str
    color: str
    priority: str
    title: str


PREDICTION_MODELS: tuple[ModelDescriptor, ...] = (
    ModelDescriptor(
        id="linear_regression",
        name="Linear Trend",
        description="Simple linear forecasting based on historical trends",
        icon="TrendingUpIcon",
        color="blue",
        accuracy=75,
        best_for=("documents", "users", "steady_growth"),
    ),
    ModelDescriptor(
        id="exponential_smoothing",
        name="Exponential Smoothing",
        description="Weighted average giving more importance to recent data",
        icon="ChartBarIcon",
        color="purple",
        accuracy=82,
        best_for=("activity", "usage", "volatility"),
    ),
    ModelDescriptor(
        id="moving_average",
        name="Moving Average",
        description="Rolling average to smooth out short-term fluctuations",
        icon="ArrowTrendingUpIcon",
        color="green",
        accuracy=78,
        best_for=("daily_patterns", "smoothing", "general_trends"),
    ),
    ModelDescriptor(
        id="seasonal",
        name="Seasonal Patterns",
        description="Identifies and predicts seasonal/weekly patterns",
        icon="CalendarIcon",
        color="amber",
        accuracy=85,
        best_for=("weekly_cycles", "monthly_patterns", "business_hours"),
    ),
    ModelDescriptor(
        id="polynomial",
        name="Polynomial Trend",
        description="Complex curve fitting for non-linear growth",
        icon="CursorArrowRaysIcon",
        color="indigo",
        accuracy=80,
        best_for=("rapid_growth", "saturation", "complex_patterns"),
    ),
)

PREDICTION_METRICS: tuple[MetricDescriptor, ...] = (
    MetricDescriptor(
        id="document_uploads",
        name="Document Uploads",
        description="Forecast future document upload volume",
        model="linear_regression",
        confidence=0.85,
        forecast_days=7,
        unit="documents",
        threshold=Threshold(warning=100, critical=50),
        icon="DocumentIcon",
        color="blue",
    ),
    MetricDescriptor(
        id="user_activity",
        name="User Activity",
        description="Predict active user count",
        model="exponential_smoothing",
        confidence=0.80,
        forecast_days=7,
        unit="users",
        threshold=Threshold(warning=50, critical=25),
        icon="UserGroupIcon",
        color="purple",
    ),
    MetricDescriptor(
        id="ai_analysis_usage",
        name="AI Analysis Usage",
        description="Forecast AI feature utilization",
        model="moving_average",
        confidence=0.75,
        forecast_days=7,
        unit="analyses",
        threshold=Threshold(warning=30, critical=15),
        icon="CpuChipIcon",
        color="emerald",
    ),
    MetricDescriptor(
        id="project_completion",
        name="Project Completion Rate",
        description="Predict project delivery timeline",
        model="polynomial",
        confidence=0.78,
        forecast_days=14,
        unit="projects",
        threshold=Threshold(warning=5, critical=2),
        icon="CheckCircleIcon",
        color="green",
    ),
    MetricDescriptor(
        id="system_load",
        name="System Load",
        description="Predict infrastructure capacity needs",
        model="seasonal",
        confidence=0.82,
        forecast_days=3,
        unit="load %",
        threshold=Threshold(warning=80, critical=95),
        icon="ServerIcon",
        color="amber",
    ),
)

ANOMALY_RULES = MappingProxyType({
    "z_score": AnomalyRule(
        method="z_score",
        threshold=ZSCORE_THRESHOLD,
        sensitivity="medium",
        description="Statistical outlier detection using Z-score",
    ),
    "absolute": AnomalyRule(
        method="absolute",
        thresholds=MappingProxyType({"high": 1.5, "low": 0.5}),
        sensitivity="high",
        description="Absolute threshold-based detection",
    ),
    "derivative": AnomalyRule(
        method="derivative",
        threshold=0.3,
        sensitivity="low",
        description="Detects sudden spikes or drops",
    ),
})

INSIGHT_TYPES = MappingProxyType({
    "growth": InsightType("growth", "ArrowTrendingUpIcon", "green", "info", "Growth Detected"),
    "decline": InsightType("decline", "ArrowTrendingDownIcon", "red", "warning", "Decline Alert"),
    "anomaly": InsightType("anomaly", "ExclamationTriangleIcon", "amber", "high", "Anomaly Detected"),
    "pattern": InsightType("pattern", "ChartBarIcon", "blue", "info", "Pattern Identified"),
    "forecast": InsightType("forecast", "LightBulbIcon", "purple", "info", "Forecast Update"),
    "optimization": InsightType("optimization", "SparklesIcon", "indigo", "medium", "Optimization Opportunity"),
})

_MODELS_BY_ID = MappingProxyType({m.id: m for m in PREDICTION_MODELS})
_METRICS_BY_ID = MappingProxyType({m.id: m for m in PREDICTION_METRICS})


def get_prediction_models() -> tuple[ModelDescriptor, ...]:
    return PREDICTION_MODELS


def get_prediction_metrics() -> tuple[MetricDescriptor, ...]:
    return PREDICTION_METRICS


def get_model(model_id: str) -> ModelDescriptor | None:
    return _MODELS_BY_ID.get(model_id)


def get_metric(metric_id: str) -> MetricDescriptor | None:
    return _METRICS_BY_ID.get(metric_id)


def get_model_accuracy(model_id: str) -> int:
    """Static accuracy label for a model id (a display value, not a measurement)."""
    model = get_model(model_id)
    return model.accuracy if model is not None else DEFAULT_ACCURACY


def get_insight_type(insight_type: str) -> InsightType:
    """Display metadata for an insight type, defaulting to the forecast style."""
    return INSIGHT_TYPES.get(insight_type, INSIGHT_TYPES["forecast"])
