import streamlit as st

from src.components.mobile.shared import SHARED_CSS

NAV_HTML = """
<nav id="bar" class="bar"></nav>
"""

NAV_CSS = (
    SHARED_CSS
    + """
.bar {
    display: flex;
    justify-content: space-around;
    background: white;
    border-top: 1px solid #e5e7eb;
    padding: 6px 0 4px 0;
    box-shadow: 0 -2px 8px rgba(0,0,0,0.06);
}
.item {
    flex: 1;
    display: flex;
    flex-direction: column;
    align-items: center;
    background: transparent;
    border: none;
    cursor: pointer;
    color: rgba(51,51,51,0.6);
}
.icon {
    font-size: 22px;
    padding: 2px 16px;
    border-radius: 999px;
}
.label {
    font-size: 11px;
    font-weight: 600;
}
.item.selected { color: var(--medium-green); }
.item.selected .icon { background: var(--light-green); }
"""
)

NAV_JS = """
export default function(component) {
    const { data, setTriggerValue, parentElement } = component;

    const bar = parentElement.querySelector('#bar');
    bar.innerHTML = '';

    data.items.forEach((item, index) => {
        const btn = document.createElement('button');
        btn.className = 'item' + (index === data.selected ? ' selected' : '');

        const icon = document.createElement('div');
        icon.className = 'icon';
        icon.textContent = item.icon;

        const label = document.createElement('div');
        label.className = 'label';
        label.textContent = item.label;

        btn.appendChild(icon);
        btn.appendChild(label);
        btn.onclick = () => {
            setTriggerValue('selected', index);
        };
        bar.appendChild(btn);
    });
}
"""

_mobile_nav_bar_component = st.components.v2.component(
    "mobile_nav_bar", html=NAV_HTML, css=NAV_CSS, js=NAV_JS, isolate_styles=True
)


def mobile_nav_bar(
    items: list[dict[str, str]], selected: int, key: str | None = None
) -> int | None:
    """
    Renders the bottom navigation bar. Returns the clicked tab index, if any.
    """
    result = _mobile_nav_bar_component(
        data={"items": items, "selected": selected},
        key=key,
        on_selected_change=lambda: None,
    )
    clicked = result.selected
    return int(clicked) if clicked is not None else None
