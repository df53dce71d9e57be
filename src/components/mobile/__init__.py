# --- Component Facade ---
# Consumers import from `src.components.mobile` without knowing the file layout
# (e.g., `from src.components.mobile import mobile_nav_bar`).
# ---------------------------------

from .balance_card import mobile_balance_card
from .nav_bar import mobile_nav_bar

__all__ = [
    "mobile_balance_card",
    "mobile_nav_bar",
]
