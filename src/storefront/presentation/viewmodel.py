from src.config import StorefrontConfig
from src.shared.state_provider import IStateProvider
from src.shared.telemetry import Telemetry
from src.storefront.domain.models import (
    FavoriteItem,
    NavItem,
    sample_favorites,
    sample_nav_items,
)


class StorefrontViewModel:
    def __init__(self, state_provider: IStateProvider):
        self.state = state_provider
        self.telemetry = Telemetry("StorefrontViewModel")
        self.favorites: list[FavoriteItem] = sample_favorites()
        self.nav_items: list[NavItem] = sample_nav_items()

    # --- Static Content ---
    @property
    def greeting(self) -> str:
        return StorefrontConfig.GREETING

    @property
    def user_name(self) -> str:
        return StorefrontConfig.USER_NAME

    @property
    def balance(self) -> str:
        return StorefrontConfig.BALANCE

    @property
    def promo_title(self) -> str:
        return StorefrontConfig.PROMO_TITLE

    # --- UI State ---
    @property
    def selected_tab(self) -> int:
        return self.state.get("selected_tab", 0)

    @property
    def selected_nav_item(self) -> NavItem:
        return self.nav_items[self.selected_tab]

    @property
    def last_action(self) -> str | None:
        return self.state.get("last_action")

    def select_tab(self, index: int) -> None:
        if not 0 <= index < len(self.nav_items):
            self.telemetry.log_error(
                "Tab selection ignored",
                IndexError(f"tab {index} out of range"),
                tabs=len(self.nav_items),
            )
            return

        if index != self.selected_tab:
            self.telemetry.log_info(
                "Tab selected", index=index, label=self.nav_items[index].label
            )
            self.state.set("selected_tab", index)

    def press_action(self, name: str) -> None:
        """Placeholder for the home screen buttons (Add money, Scan in store, Order Now)."""
        if name not in StorefrontConfig.ACTIONS:
            self.telemetry.log_error("Unknown action", ValueError(name))
            return

        Telemetry.start_trace()
        self.telemetry.log_info(f"Action: {name}")
        self.state.set("last_action", name)
