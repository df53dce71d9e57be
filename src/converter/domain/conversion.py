import math
import re
from typing import Final

from src.config import ConverterConfig
from src.converter.domain.models import ConversionResult, InvalidInputError

# Digits, at most one dot, digits. Matches in-progress text such as "" or "12.".
ENTRY_PATTERN: Final[re.Pattern[str]] = re.compile(r"[0-9]*\.?[0-9]*")


def is_acceptable(text: str) -> bool:
    # fullmatch: "$" would let a trailing newline through
    return ENTRY_PATTERN.fullmatch(text) is not None


def filter_input(current: str, proposed: str) -> str:
    """Returns the text to keep after an edit: `proposed` if acceptable, else `current`."""
    return proposed if is_acceptable(proposed) else current


def parse_amount(text: str) -> float:
    """
    Reads an accepted input as a number.
    "12." reads as 12.0 and ".5" as 0.5; "", "." and amounts too large
    for a float raise InvalidInputError.
    """
    if not is_acceptable(text) or not any(c.isdigit() for c in text):
        raise InvalidInputError(text)

    value = float(text)
    if not math.isfinite(value):
        raise InvalidInputError(text)
    return value


def format_result(
    amount: float,
    converted: float,
    from_symbol: str = ConverterConfig.FROM_SYMBOL,
    to_label: str = ConverterConfig.TO_LABEL,
) -> str:
    return f"{from_symbol}{amount} = {to_label} {converted:,.2f}"


def convert(text: str, rate: float = ConverterConfig.RATE) -> ConversionResult:
    """
    Converts the entered amount at the fixed rate.
    Never raises on bad input: the result carries the invalid-input message instead.
    """
    try:
        amount = parse_amount(text)
    except InvalidInputError:
        return ConversionResult(message=ConverterConfig.INVALID_INPUT_MESSAGE)

    converted = amount * rate
    if not math.isfinite(converted):
        return ConversionResult(message=ConverterConfig.INVALID_INPUT_MESSAGE)

    return ConversionResult(
        message=format_result(amount, converted),
        amount=amount,
        converted=converted,
    )
