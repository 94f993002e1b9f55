"""
Conversion flows behind the UI and the demo CLI.
Natural-language queries go through the extractor; structured form fields
are parsed directly. Both end with one rate fetch and a formatted message.
"""

import re
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

import httpx

from config.logging import get_logger
from services.exchange.currencies import SUPPORTED_CODES
from services.exchange.exchange_rates import convert_currency
from services.exchange.extractor import ExtractionFailure, FailureReason, extract
from services.exchange.formatter import format_conversion_result

logger = get_logger("Converter")

_LEADING_NUMBER = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


class ConversionError(Exception):
    def __init__(self, title: str, description: str):
        super().__init__(f"{title}: {description}")
        self.title = title
        self.description = description

    def to_detail(self) -> Dict[str, str]:
        return {"title": self.title, "description": self.description}


class InvalidInputError(ConversionError):
    def __init__(self, title: str, description: str, reason: Optional[FailureReason] = None):
        super().__init__(title, description)
        self.reason = reason


class RateUnavailableError(ConversionError):
    def __init__(self) -> None:
        super().__init__(
            "Conversion failed",
            "There was an error converting your currency. Please try again.",
        )


@dataclass(frozen=True)
class ConversionReport:
    amount: float
    from_currency: str
    to_currency: str
    rate: float
    converted: float
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def parse_amount_field(raw: str) -> Optional[float]:
    """Lenient like a browser's parseFloat: commas dropped, leading number only."""
    match = _LEADING_NUMBER.match(raw.replace(",", ""))
    if not match:
        return None
    return float(match.group(0))


async def _convert(
    amount: float,
    from_currency: str,
    to_currency: str,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> ConversionReport:
    try:
        data = await convert_currency(amount, from_currency, to_currency, transport=transport)
    except (httpx.HTTPError, ValueError) as exc:
        logger.error("Rate fetch failed for %s->%s: %s", from_currency, to_currency, exc)
        raise RateUnavailableError() from exc

    if data["rate"] is None or data["converted"] is None:
        logger.error("No %s rate in %s response", to_currency, from_currency)
        raise RateUnavailableError()

    message = format_conversion_result(amount, from_currency, to_currency, data["converted"])
    logger.info("Converted %s %s -> %s at %s", amount, from_currency, to_currency, data["rate"])
    return ConversionReport(
        amount=amount,
        from_currency=from_currency,
        to_currency=to_currency,
        rate=data["rate"],
        converted=data["converted"],
        message=message,
    )


async def convert_query(
    query: str,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> ConversionReport:
    if not query or not query.strip():
        raise InvalidInputError("Please enter a query", "Try something like 'Convert 100 USD to EUR'")

    result = extract(query)
    if isinstance(result, ExtractionFailure):
        logger.info("Could not extract conversion from %r: %s", query, result.reason.value)
        raise InvalidInputError("Couldn't understand query", result.message, reason=result.reason)

    request = result.request
    return await _convert(request.amount, request.from_currency, request.to_currency, transport=transport)


async def convert_fields(
    amount: str,
    from_currency: str,
    to_currency: str,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> ConversionReport:
    numeric_amount = parse_amount_field(amount or "")
    if numeric_amount is None:
        raise InvalidInputError("Invalid amount", "Please enter a valid number")

    from_currency = (from_currency or "").strip().upper()
    to_currency = (to_currency or "").strip().upper()
    for code in (from_currency, to_currency):
        if code not in SUPPORTED_CODES:
            raise InvalidInputError("Unsupported currency", f"{code or 'An empty value'} is not a supported currency.")

    return await _convert(numeric_amount, from_currency, to_currency, transport=transport)
