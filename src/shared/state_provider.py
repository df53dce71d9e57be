from abc import ABC, abstractmethod
from typing import Any

import streamlit as st


class IStateProvider(ABC):
    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        pass

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        pass

    @abstractmethod
    def clear(self) -> None:
        pass


class StreamlitStateProvider(IStateProvider):
    """
    Session-scoped state. Keys are namespaced per screen so the three
    view-models never see each other's values.
    """

    def __init__(self, namespace: str = "") -> None:
        self.namespace = namespace

    def _key(self, key: str) -> str:
        return f"{self.namespace}.{key}" if self.namespace else key

    def get(self, key: str, default: Any = None) -> Any:
        return st.session_state.get(self._key(key), default)

    def set(self, key: str, value: Any) -> None:
        st.session_state[self._key(key)] = value

    def clear(self) -> None:
        if not self.namespace:
            st.session_state.clear()
            return
        prefix = f"{self.namespace}."
        for key in [k for k in st.session_state.keys() if str(k).startswith(prefix)]:
            del st.session_state[key]
