# --- Inline CSS/JS in Python Components ---
# Streamlit Components V2 take code as strings, so each component module keeps
# its HTML/CSS/JS as constants next to the Python wrapper.
# ---------------------------------------------------

from src.config import StorefrontColors

# :host keeps the root container free of extra space
SHARED_CSS = f"""
@import url('https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700;800&display=swap');

:host {{
    display: block;
    width: 100%;
    font-family: "Inter", -apple-system, BlinkMacSystemFont, Roboto, sans-serif;
    box-sizing: border-box;
    font-size: 16px;
    line-height: 1.5;
    letter-spacing: -0.011em;
    color: {StorefrontColors.DARK_GREY};
    -webkit-font-smoothing: antialiased;
    -moz-osx-font-smoothing: grayscale;
    text-rendering: optimizeLegibility;

    --dark-green: {StorefrontColors.DARK_GREEN};
    --medium-green: {StorefrontColors.MEDIUM_GREEN};
    --light-green: {StorefrontColors.LIGHT_GREEN};
    --cream: {StorefrontColors.CREAM};
    --dark-grey: {StorefrontColors.DARK_GREY};
    --light-grey: {StorefrontColors.LIGHT_GREY};
}}
* {{
    box-sizing: border-box;
    margin: 0;
    padding: 0;
    -webkit-tap-highlight-color: transparent;
}}
"""
