from collections.abc import Callable
from typing import Any

import streamlit as st

from src.config import Screen
from src.converter.presentation.viewmodel import ConverterViewModel
from src.converter.presentation.views import converter_view
from src.login.presentation.viewmodel import LoginViewModel
from src.login.presentation.views import login_view
from src.shared.telemetry import Telemetry
from src.storefront.presentation.viewmodel import StorefrontViewModel
from src.storefront.presentation.views import storefront_view


class StreamlitRenderer:
    """
    Routes the selected Screen to its view function and view-model.
    """

    def __init__(
        self,
        converter_vm: ConverterViewModel,
        login_vm: LoginViewModel,
        storefront_vm: StorefrontViewModel,
    ) -> None:
        self.telemetry = Telemetry("StreamlitRenderer")
        self._routes: dict[Screen, tuple[Callable[[Any], None], Any]] = {
            Screen.CONVERTER: (converter_view.render, converter_vm),
            Screen.LOGIN: (login_view.render, login_vm),
            Screen.STOREFRONT: (storefront_view.render, storefront_vm),
        }

    def render(self, screen: Screen | None) -> None:
        if screen is None:
            self.telemetry.log_info("No screen selected. Rendering fallback.")
            st.warning("Memuat tampilan...")
            return

        route = self._routes.get(screen)
        if route is None:
            self.telemetry.log_error(
                f"Unknown screen: {screen}", Exception("Renderer Error")
            )
            st.error(f"Unknown screen: {screen}")
            return

        view, vm = route
        self.telemetry.log_info(f"Rendering Screen: {screen.name}")
        view(vm)
