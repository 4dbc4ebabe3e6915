"""
Tests for ui/session.py

Session state is replaced by a plain dict so the helpers run outside a
Streamlit script.
"""

import pytest

from core.data.ingestion import HistoryBundle
from core.pipeline import process_all_metrics
from ui import session


@pytest.fixture
def state(monkeypatch):
    store = {}
    monkeypatch.setattr(session.st, "session_state", store)
    session.init_session_state()
    return store


@pytest.fixture
def bundle(weekly_history):
    return HistoryBundle(series={"system_load": weekly_history}, source_name="history.csv")


SETTINGS = ((), 0.95, "z_score", False)


class TestStoreHistory:
    def test_marks_data_loaded(self, state, bundle):
        assert session.store_history(bundle, source_key="file-1")
        assert session.is_stage_complete(session.DATA_LOADED)
        assert state["history"] is bundle
        assert len(state["run_log"]) == 1

    def test_same_upload_on_rerun_keeps_predictions(self, state, bundle):
        session.store_history(bundle, source_key="file-1")
        predictions = process_all_metrics(bundle.series)
        session.store_predictions(predictions, SETTINGS)

        assert not session.store_history(HistoryBundle(series={}), source_key="file-1")
        assert state["history"] is bundle
        assert state["predictions"] is predictions
        assert session.is_stage_complete(session.PREDICTIONS_RUN)
        assert len(state["run_log"]) == 2

    def test_new_upload_drops_predictions(self, state, bundle):
        session.store_history(bundle, source_key="file-1")
        session.store_predictions(process_all_metrics(bundle.series), SETTINGS)

        assert session.store_history(bundle, source_key="file-2")
        assert state["predictions"] == {}
        assert not session.is_stage_complete(session.PREDICTIONS_RUN)
        assert session.cached_predictions(SETTINGS) is None

    def test_sample_load_keeps_upload_key(self, state, bundle):
        session.store_history(bundle, source_key="file-1")
        assert session.store_history(HistoryBundle(series={}, source_name="sample"))
        assert state["history_source"] == "file-1"
        assert not session.store_history(bundle, source_key="file-1")


class TestCachedPredictions:
    def test_unchanged_settings_reuse_predictions(self, state, bundle):
        session.store_history(bundle)
        assert session.cached_predictions(SETTINGS) is None

        predictions = process_all_metrics(bundle.series)
        session.store_predictions(predictions, SETTINGS)
        assert session.cached_predictions(SETTINGS) is predictions
        assert len(state["run_log"]) == 2

    def test_changed_settings_miss(self, state, bundle):
        session.store_history(bundle)
        session.store_predictions(process_all_metrics(bundle.series), SETTINGS)
        assert session.cached_predictions(((), 0.99, "z_score", False)) is None


def test_reset_pipeline_restores_defaults(state, bundle):
    session.store_history(bundle, source_key="file-1")
    session.reset_pipeline()
    assert state["history"] is None
    assert state["history_source"] is None
    assert state["run_log"] == []
