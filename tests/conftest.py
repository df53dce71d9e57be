import pytest
import streamlit as st

from src.converter.presentation.viewmodel import ConverterViewModel
from src.login.presentation.viewmodel import LoginViewModel
from src.shared.state_provider import StreamlitStateProvider
from src.storefront.presentation.viewmodel import StorefrontViewModel


class MockSessionState(dict):
    """
    Mock for st.session_state that behaves like both a dict and an object.
    Allows both dict-style and attribute-style access.
    """

    def __getattr__(self, name):
        try:
            return self[name]
        except KeyError as err:
            raise AttributeError(
                f"'MockSessionState' object has no attribute '{name}'"
            ) from err

    def __setattr__(self, name, value):
        self[name] = value

    def __delattr__(self, name):
        try:
            del self[name]
        except KeyError as err:
            raise AttributeError(
                f"'MockSessionState' object has no attribute '{name}'"
            ) from err


@pytest.fixture(autouse=True)
def mock_streamlit_session():
    """
    Auto-use fixture that ensures st.session_state exists for all tests.
    """
    original_session_state = getattr(st, "session_state", None)

    st.session_state = MockSessionState()

    yield st.session_state

    st.session_state.clear()

    if original_session_state is not None:
        st.session_state = original_session_state


@pytest.fixture
def converter_vm():
    return ConverterViewModel(StreamlitStateProvider("converter"))


@pytest.fixture
def login_vm():
    return LoginViewModel(StreamlitStateProvider("login"))


@pytest.fixture
def storefront_vm():
    return StorefrontViewModel(StreamlitStateProvider("storefront"))
