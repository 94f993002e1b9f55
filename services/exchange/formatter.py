import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

from services.exchange.currencies import currency_symbol


def _format_number(value: float, min_fraction: int, max_fraction: int) -> str:
    """en-US grouping, rounding half away from zero on the shortest repr of the float."""
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "-∞" if value < 0 else "∞"

    with localcontext() as ctx:
        ctx.prec = 400
        rounded = Decimal(repr(value)).quantize(Decimal(1).scaleb(-max_fraction), rounding=ROUND_HALF_UP)
        text = f"{rounded:,.{max_fraction}f}"

    if max_fraction > min_fraction:
        whole, _, fraction = text.partition(".")
        fraction = fraction.rstrip("0")
        fraction = fraction.ljust(min_fraction, "0")
        text = f"{whole}.{fraction}" if fraction else whole
    return text


def format_conversion_result(amount: float, from_currency: str, to_currency: str, result: float) -> str:
    formatted_amount = _format_number(amount, min_fraction=0, max_fraction=3)
    formatted_result = _format_number(result, min_fraction=2, max_fraction=2)

    from_symbol = currency_symbol(from_currency)
    to_symbol = currency_symbol(to_currency)

    return (
        f"{from_symbol}{formatted_amount} {from_currency} is approximately "
        f"{to_symbol}{formatted_result} {to_currency} at the current exchange rate."
    )
