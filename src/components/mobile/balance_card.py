import streamlit as st

from src.components.mobile.shared import SHARED_CSS

BALANCE_HTML = """
<div class="card">
    <div id="rewards" class="rewards"></div>
    <div id="balance" class="balance"></div>
    <div id="caption" class="caption"></div>
    <div class="actions">
        <button id="addBtn" class="btn btn-solid">Add money</button>
        <button id="scanBtn" class="btn btn-outline">Scan in store</button>
    </div>
</div>
"""

BALANCE_CSS = (
    SHARED_CSS
    + """
.card {
    background: linear-gradient(135deg, var(--dark-green), var(--medium-green));
    border-radius: 16px;
    padding: 20px;
    box-shadow: 0 4px 10px rgba(0,0,0,0.12);
}
.rewards {
    color: rgba(255,255,255,0.8);
    font-size: 12px;
    font-weight: 700;
    margin-bottom: 8px;
}
.balance {
    color: white;
    font-size: 36px;
    font-weight: 800;
    line-height: 1.1;
}
.caption {
    color: rgba(255,255,255,0.9);
    font-size: 14px;
    margin-bottom: 24px;
}
.actions {
    display: flex;
    gap: 12px;
}
.btn {
    flex: 1;
    border-radius: 999px;
    padding: 10px 0;
    font-weight: 700;
    font-size: 14px;
    cursor: pointer;
}
.btn:active { transform: scale(0.97); }
.btn-solid {
    background: white;
    color: var(--dark-green);
    border: none;
}
.btn-outline {
    background: transparent;
    color: white;
    border: 1px solid white;
}
"""
)

BALANCE_JS = """
export default function(component) {
    const { data, setTriggerValue, parentElement } = component;

    parentElement.querySelector('#rewards').textContent = data.rewardsLabel;
    parentElement.querySelector('#balance').textContent = data.balance;
    parentElement.querySelector('#caption').textContent = data.caption;

    parentElement.querySelector('#addBtn').onclick = () => {
        setTriggerValue('action', 'Add money');
    };
    parentElement.querySelector('#scanBtn').onclick = () => {
        setTriggerValue('action', 'Scan in store');
    };
}
"""

_mobile_balance_card_component = st.components.v2.component(
    "mobile_balance_card",
    html=BALANCE_HTML,
    css=BALANCE_CSS,
    js=BALANCE_JS,
    isolate_styles=True,
)


def mobile_balance_card(
    rewards_label: str, balance: str, caption: str, key: str | None = None
) -> str | None:
    """
    Renders the rewards balance card. Returns the clicked action label, if any.
    """
    result = _mobile_balance_card_component(
        data={"rewardsLabel": rewards_label, "balance": balance, "caption": caption},
        key=key,
        on_action_change=lambda: None,
    )
    action = result.action
    return str(action) if action is not None else None
