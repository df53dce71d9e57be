from collections.abc import Callable

from src.converter.domain.conversion import convert, filter_input
from src.converter.domain.models import ConversionResult
from src.shared.state_provider import IStateProvider
from src.shared.telemetry import Telemetry, measure_time

Listener = Callable[["ConverterViewModel"], None]


class ConverterViewModel:
    """
    Owns the converter screen state: the accepted input text and the last result text.
    Every state change is pushed to subscribed listeners.
    """

    def __init__(self, state_provider: IStateProvider):
        self.state = state_provider
        self.telemetry = Telemetry("ConverterViewModel")
        self._listeners: list[Listener] = []

    # --- Properties ---
    @property
    def amount_text(self) -> str:
        return self.state.get("amount_text", "")

    @property
    def result_text(self) -> str:
        return self.state.get("result_text", "")

    @property
    def has_result(self) -> bool:
        return bool(self.result_text)

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    # --- Actions ---
    def on_amount_change(self, proposed: str) -> str:
        current = self.amount_text
        accepted = filter_input(current, proposed)

        if accepted != proposed:
            self.telemetry.log_info("Edit rejected", proposed=proposed, kept=current)
        elif accepted != current:
            self.state.set("amount_text", accepted)
            self._notify()

        return accepted

    @measure_time("convert")
    def convert(self) -> ConversionResult:
        Telemetry.start_trace()
        result = convert(self.amount_text)

        if not result.is_valid:
            self.telemetry.log_info("Invalid input", amount_text=self.amount_text)

        self.state.set("result_text", result.message)
        self._notify()
        return result

    def reset(self) -> None:
        self.state.set("amount_text", "")
        self.state.set("result_text", "")
        self._notify()

    def _notify(self) -> None:
        for listener in self._listeners:
            listener(self)
