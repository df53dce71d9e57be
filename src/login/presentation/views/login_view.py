import streamlit as st

from src.config import AppConfig, LoginConfig, SocialProvider
from src.login.presentation.viewmodel import LoginViewModel


def render(vm: LoginViewModel) -> None:
    _render_header()

    email = st.text_input(LoginConfig.EMAIL_LABEL, key="login_email")
    if email != vm.email:
        vm.set_email(email)

    password = st.text_input(
        LoginConfig.PASSWORD_LABEL, type="password", key="login_password"
    )
    if password != vm.password:
        vm.set_password(password)

    if st.button(LoginConfig.BUTTON_TEXT, type="primary", use_container_width=True):
        vm.press_login()

    st.write("")
    if st.button(LoginConfig.FORGOT_TEXT, type="tertiary", key="login_forgot"):
        vm.press_forgot_password()

    st.write("")
    st.markdown(
        f"<div style='text-align:center'>{LoginConfig.SOCIAL_TEXT}</div>",
        unsafe_allow_html=True,
    )
    _render_social_row(vm)


def _render_header() -> None:
    logo_src = AppConfig.get_image_base64(LoginConfig.IMAGE_PATH)
    st.markdown(
        f"""
        <div style="display:flex; flex-direction:column; align-items:center;">
            <img src="{logo_src}" alt="login image"
                 style="width:200px; height:200px; object-fit:contain;" />
            <div style="font-size:28px; font-weight:700; margin-top:8px; margin-bottom:16px;">
                {LoginConfig.TITLE}
            </div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def _render_social_row(vm: LoginViewModel) -> None:
    providers = list(SocialProvider)
    cols = st.columns(len(providers))

    for col, provider in zip(cols, providers):
        with col:
            if st.button(
                provider.icon,
                key=f"social_{provider.label}",
                help=provider.label.title(),
                use_container_width=True,
            ):
                vm.press_social(provider)
