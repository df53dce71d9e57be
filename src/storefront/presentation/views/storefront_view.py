import streamlit as st

from src.components.mobile import mobile_balance_card, mobile_nav_bar
from src.config import StorefrontColors, StorefrontConfig
from src.storefront.domain.models import FavoriteItem
from src.storefront.presentation.viewmodel import StorefrontViewModel


def render(vm: StorefrontViewModel) -> None:
    """
    Home screen, top to bottom: greeting, balance card, favorites, promo, bottom nav.
    """
    _render_greeting(vm)

    action = mobile_balance_card(
        rewards_label=StorefrontConfig.REWARDS_LABEL,
        balance=vm.balance,
        caption=StorefrontConfig.BALANCE_CAPTION,
        key="sf_balance",
    )
    if action:
        vm.press_action(action)

    _render_favorites(vm.favorites)
    _render_promo(vm)

    clicked = mobile_nav_bar(
        items=[item.model_dump() for item in vm.nav_items],
        selected=vm.selected_tab,
        key="sf_nav",
    )
    if clicked is not None and clicked != vm.selected_tab:
        vm.select_tab(clicked)
        st.rerun()


def _render_greeting(vm: StorefrontViewModel) -> None:
    st.markdown(
        f"""
        <div style="display:flex; justify-content:space-between; align-items:center;
                    padding: 24px 0 8px 0;">
            <div>
                <div style="font-size:16px; color:{StorefrontColors.DARK_GREY}; opacity:0.7;">
                    {vm.greeting}
                </div>
                <div style="font-size:28px; font-weight:700; color:{StorefrontColors.DARK_GREY};">
                    {vm.user_name}
                </div>
            </div>
            <div style="width:48px; height:48px; border-radius:50%;
                        background:{StorefrontColors.LIGHT_GREEN};
                        display:flex; align-items:center; justify-content:center;
                        font-size:24px;" title="Profile">👤</div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def _render_favorites(favorites: list[FavoriteItem]) -> None:
    st.subheader(StorefrontConfig.FAVORITES_TITLE)
    cols = st.columns(len(favorites))

    for col, item in zip(cols, favorites):
        with col:
            with st.container(border=True):
                st.markdown(
                    f"""
                    <div style="height:140px; background:{StorefrontColors.LIGHT_GREY};
                                display:flex; align-items:center; justify-content:center;
                                text-align:center; border-radius:8px;">
                        Image of<br/>{item.name}
                    </div>
                    """,
                    unsafe_allow_html=True,
                )
                st.markdown(f"**{item.name}**")
                st.caption(item.price.replace("$", "\\$"))


def _render_promo(vm: StorefrontViewModel) -> None:
    st.subheader(StorefrontConfig.PROMO_SECTION_TITLE)

    with st.container(border=True):
        text_col, icon_col = st.columns([3, 1])
        with text_col:
            st.markdown(f"**{vm.promo_title}**")
            if st.button("Order Now", type="primary", key="sf_order_now"):
                vm.press_action("Order Now")
        with icon_col:
            st.markdown(
                "<div style='font-size:40px; text-align:center;'>⭐</div>",
                unsafe_allow_html=True,
            )
