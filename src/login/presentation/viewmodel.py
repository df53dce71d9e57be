from src.config import LoginConfig, SocialProvider
from src.shared.state_provider import IStateProvider
from src.shared.telemetry import Telemetry


class LoginViewModel:
    """
    Holds the login form fields.
    The buttons are placeholders: nothing here checks credentials.
    """

    def __init__(self, state_provider: IStateProvider):
        self.state = state_provider
        self.telemetry = Telemetry("LoginViewModel")

    @property
    def email(self) -> str:
        return self.state.get("email", "")

    @property
    def password(self) -> str:
        return self.state.get("password", "")

    @property
    def masked_password(self) -> str:
        return LoginConfig.MASK_CHAR * len(self.password)

    @property
    def last_action(self) -> str | None:
        return self.state.get("last_action")

    def set_email(self, value: str) -> None:
        self.state.set("email", value)

    def set_password(self, value: str) -> None:
        self.state.set("password", value)

    def press_login(self) -> None:
        self._record("login", has_email=bool(self.email))

    def press_forgot_password(self) -> None:
        self._record("forgot_password")

    def press_social(self, provider: SocialProvider) -> None:
        self._record(f"social:{provider.label}")

    def _record(self, action: str, **details: object) -> None:
        Telemetry.start_trace()
        self.telemetry.log_info(f"Action: {action}", **details)
        self.state.set("last_action", action)
