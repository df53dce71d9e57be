from pydantic import BaseModel

from src.config import StorefrontConfig


# --- Display Records ---
class FavoriteItem(BaseModel):
    name: str
    price: str
    image_key: str


class NavItem(BaseModel):
    label: str
    icon: str


def sample_favorites() -> list[FavoriteItem]:
    return [
        FavoriteItem(name=name, price=price, image_key=image_key)
        for name, price, image_key in StorefrontConfig.FAVORITES
    ]


def sample_nav_items() -> list[NavItem]:
    return [NavItem(label=label, icon=icon) for label, icon in StorefrontConfig.NAV_ITEMS]
