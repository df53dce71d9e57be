import base64
import logging
import os
from enum import Enum
from typing import Final

logger = logging.getLogger(__name__)

# 1x1 transparent PNG
FALLBACK_PIXEL = "data:image/png;base64,iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII="


class Screen(Enum):
    # Enum Member = ("Screen Name", "Icon")
    CONVERTER = ("Konversi Mata Uang", "💱")
    LOGIN = ("Login", "🔐")
    STOREFRONT = ("Starbucks Home", "☕")

    def __init__(self, label: str, icon: str):
        self.label = label
        self.icon = icon

    @classmethod
    def from_label(cls, label: str) -> "Screen":
        """Returns the screen for a sidebar label, or the converter."""
        for screen in cls:
            if screen.label == label:
                return screen
        return cls.CONVERTER

    @classmethod
    def all_labels(cls) -> list[str]:
        return [s.label for s in cls]


class SocialProvider(Enum):
    FACEBOOK = ("facebook", "📘")
    TWITTER = ("twitter", "🐦")
    GOOGLE = ("google", "🔎")

    def __init__(self, label: str, icon: str):
        self.label = label
        self.icon = icon


class ConverterConfig:
    # --- Rate ---
    # Fixed, never fetched. IDR per 1 USD.
    RATE: Final[float] = 16803.0

    FROM_SYMBOL = "$"
    TO_LABEL = "Rp"

    # --- Texts ---
    TITLE = "Konversi Dolar ke Rupiah"
    INPUT_LABEL = "Masukkan jumlah Dolar"
    BUTTON_TEXT = "Konversi"
    RESET_TEXT = "Hapus"
    INVALID_INPUT_MESSAGE: Final[str] = "Input tidak valid"


class LoginConfig:
    IMAGE_PATH = "assets/login.svg"
    TITLE = "Welcome Back"
    EMAIL_LABEL = "Email Address"
    PASSWORD_LABEL = "Password"
    BUTTON_TEXT = "Login"
    FORGOT_TEXT = "Forgot Password?"
    SOCIAL_TEXT = "Or Sign in with"
    MASK_CHAR = "•"


class StorefrontColors:
    DARK_GREEN = "#006241"
    MEDIUM_GREEN = "#00704A"
    LIGHT_GREEN = "#D4E9E2"
    CREAM = "#F3F1E7"
    DARK_GREY = "#333333"
    LIGHT_GREY = "#F2F2F2"


class StorefrontConfig:
    GREETING = "Good morning,"
    USER_NAME = "Revy"

    REWARDS_LABEL = "STARBUCKS REWARDS"
    BALANCE = "$12.75"
    BALANCE_CAPTION = "Current Balance"

    FAVORITES_TITLE = "Your Favorites"
    # (name, price, image key)
    FAVORITES: Final[list[tuple[str, str, str]]] = [
        ("Caramel Macchiato", "$5.65", "caramel_macchiato"),
        ("Iced Brown Sugar Oatmilk", "$6.25", "brown_sugar_oatmilk"),
        ("Chocolate Croissant", "$3.75", "chocolate_croissant"),
    ]

    PROMO_SECTION_TITLE = "Summer specials"
    PROMO_TITLE = "New Pineapple Passionfruit Drink"

    # (label, icon)
    NAV_ITEMS: Final[list[tuple[str, str]]] = [
        ("Home", "🏠"),
        ("Order", "☕"),
        ("Scan", "📷"),
        ("Gift", "🎁"),
        ("Stores", "📍"),
    ]

    # Placeholder actions on the home screen
    ACTIONS: Final[list[str]] = ["Add money", "Scan in store", "Order Now"]


class AppConfig:
    APP_TITLE = "Mobile Screens"
    DEFAULT_SCREEN = Screen.CONVERTER
    METRICS_PORT = 8000

    @staticmethod
    def get_image_base64(path: str) -> str:
        """
        Converts a local image path to a Base64 Data URI for HTML embedding.
        Web URLs pass through untouched.
        """
        if path.startswith("http"):
            return path

        if os.path.exists(path):
            try:
                with open(path, "rb") as img_file:
                    b64_data = base64.b64encode(img_file.read()).decode("utf-8")

                mime = "image/png"
                lower_path = path.lower()
                if lower_path.endswith(".jpg") or lower_path.endswith(".jpeg"):
                    mime = "image/jpeg"
                elif lower_path.endswith(".svg"):
                    mime = "image/svg+xml"

                return f"data:{mime};base64,{b64_data}"
            except OSError as e:
                logger.warning(f"Could not read image '{path}': {e}")
        else:
            logger.info(f"Image not found at '{os.path.abspath(path)}', using fallback")

        return FALLBACK_PIXEL
