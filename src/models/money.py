"""Money parsing and formatting helpers."""

from decimal import (
    ROUND_HALF_EVEN,
    Context,
    Decimal,
    DivisionByZero,
    Inexact,
    InvalidOperation,
    Overflow,
)

from src.models.exceptions import InvalidInputError

CENTS = Decimal("0.01")

# Whole digits plus at least two decimal places
MAX_DIGITS = 28

# Wide enough for every sum and product of MAX_DIGITS-bounded amounts;
# Inexact is trapped so a debit can never be rounded.
EXACT_CONTEXT = Context(
    prec=128,
    rounding=ROUND_HALF_EVEN,
    traps=[InvalidOperation, DivisionByZero, Overflow, Inexact],
)
DISPLAY_CONTEXT = Context(prec=128, rounding=ROUND_HALF_EVEN)


def digit_span(value: Decimal) -> int:
    """Count the digits needed to hold value exactly with at least two decimal places."""
    whole_digits = max(value.adjusted() + 1, 1)
    fraction_digits = max(-value.as_tuple().exponent, 2)
    return whole_digits + fraction_digits


def fits_precision(value: Decimal) -> bool:
    return digit_span(value) <= MAX_DIGITS


def parse_money(text: str | None) -> Decimal:
    """
    Parse user input into an exact Decimal amount.

    Surrounding whitespace and a leading currency sign are ignored. The value
    is kept at the precision the user typed; nothing is rounded here.

    Args:
        text: The raw text read from the user (None at end of input)

    Returns:
        The parsed amount

    Raises:
        InvalidInputError: If the text is missing, not a number, not finite,
            or has more digits than can be handled exactly
    """
    if text is None:
        raise InvalidInputError("Expected an amount but reached end of input.")

    cleaned = text.strip()
    if cleaned.startswith("$"):
        cleaned = cleaned[1:].strip()
    if not cleaned:
        raise InvalidInputError("Expected an amount but got an empty line.")

    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        raise InvalidInputError(f"'{text.strip()}' is not a valid amount.") from None

    if not value.is_finite():
        raise InvalidInputError(f"'{text.strip()}' is not a valid amount.")
    if not fits_precision(value):
        raise InvalidInputError(
            f"'{text.strip()}' has more than {MAX_DIGITS} digits and cannot be handled exactly."
        )
    return value


def format_money(value: Decimal) -> str:
    """Format an amount with two decimal places, e.g. 596.00."""
    return str(value.quantize(CENTS, context=DISPLAY_CONTEXT))


def format_charge(value: Decimal) -> str:
    """
    Format a charge like format_money, except that a non-zero charge
    below half a cent is shown unrounded, e.g. 0.0004.
    """
    text = format_money(value)
    if value and not value.quantize(CENTS, context=DISPLAY_CONTEXT):
        return format(value.normalize(DISPLAY_CONTEXT), "f")
    return text


def format_limit(value: Decimal) -> str:
    """Format a configured limit without trailing zeros, e.g. 500."""
    return format(value.normalize(DISPLAY_CONTEXT), "f")
