import streamlit as st

from src.config import AppConfig, Screen, StorefrontColors
from src.shared.telemetry import Telemetry


def apply_styles() -> None:
    # Phone-width column
    st.markdown(
        f"""
        <style>
            .block-container {{ max-width: 420px; padding-top: 1rem !important; }}
            .stApp {{ background-color: {StorefrontColors.CREAM}; }}
        </style>
        """,
        unsafe_allow_html=True,
    )


def render_sidebar(current: Screen) -> Screen:
    st.sidebar.header(f"📱 {AppConfig.APP_TITLE}")

    labels = Screen.all_labels()
    selected = st.sidebar.radio(
        "Layar",
        labels,
        index=labels.index(current.label),
        format_func=lambda label: f"{Screen.from_label(label).icon} {label}",
    )

    return Screen.from_label(selected)


def render_trace_panel() -> None:
    """Shows the correlation id of the last action. Render after the screen ran."""
    with st.sidebar.expander("🕵️‍♂️ Telemetry"):
        st.caption(f"Trace ID: {Telemetry.get_trace_id()}")
