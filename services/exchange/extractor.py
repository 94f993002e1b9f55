"""
Free-text query extraction.
Turns "Convert 100 USD to EUR" into a ConversionRequest, or a typed failure
with a user-facing message. Pure and stateless: safe to call from anywhere.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from services.exchange.currencies import CURRENCY_ALIASES, resolve_alias

NO_AMOUNT_MESSAGE = "Couldn't identify an amount in your query. Please specify an amount to convert."
UNRESOLVED_CURRENCIES_MESSAGE = "Please specify both the source and target currencies more clearly."

AMOUNT_PATTERN = re.compile(r"\b(\d{1,3}(,\d{3})*(\.\d+)?|\d+(\.\d+)?)\b", re.ASCII)

# Evaluated in order; earlier patterns take precedence.
CONVERSION_PATTERNS: Tuple[re.Pattern, ...] = tuple(
    re.compile(pattern, re.IGNORECASE | re.ASCII)
    for pattern in (
        r"from\s+(\w+)\s+to\s+(\w+)",
        r"(\w+)\s+to\s+(\w+)",
        r"convert\s+[^a-zA-Z]+\s+(\w+)\s+to\s+(\w+)",
        r"exchange\s+[^a-zA-Z]+\s+(\w+)\s+to\s+(\w+)",
        r"(\w+)\s+in\s+(\w+)",
    )
)


class FailureReason(str, Enum):
    NO_AMOUNT_FOUND = "no_amount_found"
    CURRENCIES_UNRESOLVED = "currencies_unresolved"


@dataclass(frozen=True)
class ConversionRequest:
    amount: float
    from_currency: str
    to_currency: str


@dataclass(frozen=True)
class ExtractionSuccess:
    request: ConversionRequest

    @property
    def success(self) -> bool:
        return True


@dataclass(frozen=True)
class ExtractionFailure:
    reason: FailureReason
    message: str

    @property
    def success(self) -> bool:
        return False


ExtractionResult = Union[ExtractionSuccess, ExtractionFailure]


def _find_amount(normalized: str) -> Optional[float]:
    match = AMOUNT_PATTERN.search(normalized)
    if not match:
        return None
    return float(match.group(0).replace(",", ""))


def _match_patterns(normalized: str) -> Tuple[Optional[str], Optional[str]]:
    from_currency: Optional[str] = None
    to_currency: Optional[str] = None

    for pattern in CONVERSION_PATTERNS:
        match = pattern.search(normalized)
        if not match:
            continue

        # A partial hit is kept; a later pattern may fill the other slot.
        source = resolve_alias(match.group(1))
        target = resolve_alias(match.group(2))
        if source:
            from_currency = source
        if target:
            to_currency = target

        if from_currency and to_currency:
            break

    return from_currency, to_currency


def _scan_aliases(
    normalized: str,
    from_currency: Optional[str],
    to_currency: Optional[str],
) -> Tuple[Optional[str], Optional[str]]:
    # Plain substring containment, so short aliases ("rs", "$") can match
    # inside unrelated words.
    for alias, code in CURRENCY_ALIASES.items():
        if alias not in normalized:
            continue
        if not from_currency:
            from_currency = code
        elif not to_currency and code != from_currency:
            to_currency = code
            break

    return from_currency, to_currency


def extract(query: str) -> ExtractionResult:
    normalized = query.lower()

    amount = _find_amount(normalized)
    if amount is None:
        return ExtractionFailure(FailureReason.NO_AMOUNT_FOUND, NO_AMOUNT_MESSAGE)

    from_currency, to_currency = _match_patterns(normalized)
    if not from_currency or not to_currency:
        from_currency, to_currency = _scan_aliases(normalized, from_currency, to_currency)

    if not from_currency or not to_currency:
        return ExtractionFailure(FailureReason.CURRENCIES_UNRESOLVED, UNRESOLVED_CURRENCIES_MESSAGE)

    return ExtractionSuccess(ConversionRequest(amount, from_currency, to_currency))
