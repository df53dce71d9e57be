from unittest.mock import patch

import pytest

from src.config import Screen
from src.presentation.views import components


@pytest.fixture
def mock_st():
    with patch("src.presentation.views.components.st") as mock_st:
        yield mock_st


def test_trace_panel_shows_id_of_last_convert(mock_st, converter_vm):
    converter_vm.on_amount_change("10")
    converter_vm.convert()
    trace_id = components.Telemetry.get_trace_id()

    components.render_trace_panel()

    mock_st.caption.assert_called_once_with(f"Trace ID: {trace_id}")
    assert len(trace_id) == 8


def test_sidebar_returns_selected_screen(mock_st):
    mock_st.sidebar.radio.return_value = "Login"

    selected = components.render_sidebar(Screen.CONVERTER)

    assert selected is Screen.LOGIN
    assert mock_st.sidebar.radio.call_args[0][0] == "Layar"
    assert mock_st.sidebar.radio.call_args.kwargs["index"] == 0
