import pickle
from unittest.mock import MagicMock

import pytest

from src.shared.state_provider import StreamlitStateProvider
from src.shared.telemetry import ACTION_COUNT, Telemetry, measure_time


class _Action:
    def __init__(self):
        self.telemetry = MagicMock()

    @measure_time("double")
    def double(self, x):
        return x * 2

    @measure_time("explode")
    def explode(self):
        raise RuntimeError("boom")


def _count(action, outcome):
    return ACTION_COUNT.labels(screen="_Action", action=action, outcome=outcome)._value.get()


def test_measure_time_returns_result_and_logs():
    obj = _Action()
    before = _count("double", "ok")

    assert obj.double(4) == 8

    assert _count("double", "ok") == before + 1
    obj.telemetry.log_info.assert_called_once()
    assert "double" in obj.telemetry.log_info.call_args[0][0]


def test_measure_time_logs_and_reraises():
    obj = _Action()
    before = _count("explode", "error")

    with pytest.raises(RuntimeError, match="boom"):
        obj.explode()

    assert _count("explode", "error") == before + 1
    obj.telemetry.log_error.assert_called_once()


def test_start_trace_sets_correlation_id():
    trace_id = Telemetry.start_trace()

    assert len(trace_id) == 8
    assert Telemetry.get_trace_id() == trace_id


def test_telemetry_survives_pickling():
    telemetry = Telemetry("PickleTest")

    restored = pickle.loads(pickle.dumps(telemetry))

    assert restored.component == "PickleTest"
    assert restored.logger.name == "PickleTest"


class TestStreamlitStateProvider:
    def test_namespaces_are_isolated(self, mock_streamlit_session):
        a = StreamlitStateProvider("a")
        b = StreamlitStateProvider("b")

        a.set("value", 1)

        assert a.get("value") == 1
        assert b.get("value", "missing") == "missing"
        assert mock_streamlit_session["a.value"] == 1

    def test_clear_only_removes_own_namespace(self, mock_streamlit_session):
        a = StreamlitStateProvider("a")
        b = StreamlitStateProvider("b")
        a.set("x", 1)
        b.set("x", 2)

        a.clear()

        assert a.get("x") is None
        assert b.get("x") == 2

    def test_unnamespaced_clear_wipes_session(self, mock_streamlit_session):
        StreamlitStateProvider("a").set("x", 1)

        StreamlitStateProvider().clear()

        assert len(mock_streamlit_session) == 0
