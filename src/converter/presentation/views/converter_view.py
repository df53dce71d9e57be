import streamlit as st

from src.config import ConverterConfig
from src.converter.presentation.viewmodel import ConverterViewModel

AMOUNT_WIDGET_KEY = "converter_amount_input"


def render(vm: ConverterViewModel) -> None:
    """
    Single-column form: title, amount field, Convert button, result line.
    """
    st.markdown(
        f"""
        <div style="
            font-size: 26px;
            font-weight: 600;
            color: #111827;
            margin-top: 24px;
            margin-bottom: 24px;">
            {ConverterConfig.TITLE}
        </div>
        """,
        unsafe_allow_html=True,
    )

    # Seed the widget from the view-model on first render
    if AMOUNT_WIDGET_KEY not in st.session_state:
        st.session_state[AMOUNT_WIDGET_KEY] = vm.amount_text

    st.text_input(
        ConverterConfig.INPUT_LABEL,
        key=AMOUNT_WIDGET_KEY,
        on_change=_on_amount_change,
        args=(vm,),
        placeholder="0.00",
    )

    if st.button(ConverterConfig.BUTTON_TEXT, type="primary", use_container_width=True):
        vm.convert()

    st.button(
        ConverterConfig.RESET_TEXT,
        type="secondary",
        use_container_width=True,
        on_click=_on_reset,
        args=(vm,),
    )

    if vm.has_result:
        _render_result(vm.result_text)


def _on_amount_change(vm: ConverterViewModel) -> None:
    proposed = st.session_state[AMOUNT_WIDGET_KEY]
    accepted = vm.on_amount_change(proposed)
    if accepted != proposed:
        # Revert the widget to the last accepted text
        st.session_state[AMOUNT_WIDGET_KEY] = accepted


def _on_reset(vm: ConverterViewModel) -> None:
    vm.reset()
    # Widget keys can only be written from callbacks, before the widget renders
    st.session_state[AMOUNT_WIDGET_KEY] = ""


def _render_result(text: str) -> None:
    # "$" starts LaTeX in Streamlit markdown
    escaped = text.replace("$", "\\$")
    if text == ConverterConfig.INVALID_INPUT_MESSAGE:
        st.error(escaped)
    else:
        st.success(escaped)
