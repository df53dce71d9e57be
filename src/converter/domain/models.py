from pydantic import BaseModel, ConfigDict


class InvalidInputError(ValueError):
    """Text cannot be read as a non-negative decimal amount."""

    def __init__(self, text: str):
        super().__init__(f"Not a decimal amount: {text!r}")
        self.text = text


class ConversionResult(BaseModel):
    """
    Outcome of one Convert action.
    `amount` and `converted` are None when the input was rejected.
    """

    model_config = ConfigDict(frozen=True)

    message: str
    amount: float | None = None
    converted: float | None = None

    @property
    def is_valid(self) -> bool:
        return self.converted is not None
