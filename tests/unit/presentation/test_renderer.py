# ==============================================================================
# ARCHITECTURE: UNIT TEST (PRESENTATION LAYER)
# ------------------------------------------------------------------------------
# GOAL: Verify routing logic (e.g., 'Screen X renders view X with its VM').
# CONSTRAINTS:
#   1. DEPENDENCIES: MUST mock the 'streamlit' library.
# ==============================================================================
from unittest.mock import MagicMock, patch

import pytest

from src.config import Screen
from src.presentation.renderer import StreamlitRenderer


@pytest.fixture
def mock_views():
    with patch("src.presentation.renderer.st") as mock_st, patch(
        "src.presentation.renderer.converter_view"
    ) as converter_view, patch(
        "src.presentation.renderer.login_view"
    ) as login_view, patch(
        "src.presentation.renderer.storefront_view"
    ) as storefront_view:
        yield {
            "st": mock_st,
            Screen.CONVERTER: converter_view,
            Screen.LOGIN: login_view,
            Screen.STOREFRONT: storefront_view,
        }


@pytest.fixture
def view_models():
    return {
        Screen.CONVERTER: MagicMock(name="converter_vm"),
        Screen.LOGIN: MagicMock(name="login_vm"),
        Screen.STOREFRONT: MagicMock(name="storefront_vm"),
    }


@pytest.fixture
def renderer(mock_views, view_models):
    return StreamlitRenderer(
        converter_vm=view_models[Screen.CONVERTER],
        login_vm=view_models[Screen.LOGIN],
        storefront_vm=view_models[Screen.STOREFRONT],
    )


@pytest.mark.parametrize("screen", list(Screen))
def test_renderer_routes_each_screen(renderer, mock_views, view_models, screen):
    renderer.render(screen)

    mock_views[screen].render.assert_called_once_with(view_models[screen])
    for other in Screen:
        if other is not screen:
            mock_views[other].render.assert_not_called()


def test_renderer_handles_missing_screen(renderer, mock_views):
    renderer.render(None)

    mock_views["st"].warning.assert_called_once()
    for screen in Screen:
        mock_views[screen].render.assert_not_called()


def test_renderer_reports_unknown_screen(renderer, mock_views):
    renderer.render("NOT_A_SCREEN")

    mock_views["st"].error.assert_called_once()
    assert "NOT_A_SCREEN" in mock_views["st"].error.call_args[0][0]
