"""
Pytest configuration and shared fixtures

Provides daily histories shared by the engine, pipeline and export tests.
"""

import sys
from pathlib import Path

import pytest

# Add application directory to path for imports
app_dir = Path(__file__).parent.parent / "predictive_analytics_app"
sys.path.insert(0, str(app_dir))


# ===== History Fixtures =====


@pytest.fixture
def linear_history():
    """Exact line y = x + 1"""
    return [1.0, 2.0, 3.0, 4.0, 5.0]


@pytest.fixture
def spike_history():
    """Nine flat days and one spike with z-score exactly 3.0"""
    return [5.0] * 9 + [50.0]


@pytest.fixture
def weekly_history():
    """Five identical weeks with a weekend peak"""
    return [1.0, 1.0, 1.0, 1.0, 1.0, 10.0, 10.0] * 5


@pytest.fixture
def growing_history():
    """Two weeks, the second one 20% above the first"""
    return [10.0] * 7 + [12.0] * 7


@pytest.fixture
def sample_predictions():
    """Pipeline output for two metrics"""
    from core.pipeline import process_metric

    return {
        "document_uploads": process_metric("document_uploads", [float(v) for v in range(1, 21)]),
        "user_activity": process_metric("user_activity", [5.0] * 9 + [50.0]),
    }
