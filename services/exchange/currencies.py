from types import MappingProxyType
from typing import Mapping, NamedTuple, Optional, Tuple


class Currency(NamedTuple):
    code: str
    name: str
    symbol: str


CURRENCY_LIST: Tuple[Currency, ...] = (
    Currency("USD", "US Dollar", "$"),
    Currency("EUR", "Euro", "€"),
    Currency("GBP", "British Pound", "£"),
    Currency("JPY", "Japanese Yen", "¥"),
    Currency("INR", "Indian Rupee", "₹"),
    Currency("CAD", "Canadian Dollar", "C$"),
    Currency("AUD", "Australian Dollar", "A$"),
    Currency("CHF", "Swiss Franc", "CHF"),
    Currency("CNY", "Chinese Yuan", "¥"),
    Currency("RUB", "Russian Ruble", "₽"),
    Currency("MXN", "Mexican Peso", "$"),
    Currency("BRL", "Brazilian Real", "R$"),
)

SUPPORTED_CODES = frozenset(currency.code for currency in CURRENCY_LIST)

CURRENCY_SYMBOLS: Mapping[str, str] = MappingProxyType(
    {currency.code: currency.symbol for currency in CURRENCY_LIST}
)

# Order matters: the extractor's fallback scan walks this table front to back.
CURRENCY_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "usd": "USD", "dollar": "USD", "dollars": "USD", "$": "USD",
        "eur": "EUR", "euro": "EUR", "euros": "EUR", "€": "EUR",
        "gbp": "GBP", "pound": "GBP", "pounds": "GBP", "£": "GBP",
        "jpy": "JPY", "yen": "JPY", "¥jpy": "JPY",
        "inr": "INR", "rupee": "INR", "rupees": "INR", "rs": "INR", "₹": "INR",
        "cad": "CAD", "canadian dollar": "CAD", "c$": "CAD",
        "aud": "AUD", "australian dollar": "AUD", "a$": "AUD",
        "chf": "CHF", "franc": "CHF", "francs": "CHF",
        "cny": "CNY", "yuan": "CNY", "rmb": "CNY", "¥cny": "CNY",
    }
)


def resolve_alias(token: str) -> Optional[str]:
    """Return the currency code for an alias token, ignoring case."""
    return CURRENCY_ALIASES.get(token.strip().lower())


def currency_symbol(code: str) -> str:
    return CURRENCY_SYMBOLS.get(code.upper(), "")
