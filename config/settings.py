import logging
import os
from pathlib import Path

LOG_LEVEL = getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO)
LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
LOG_DATEFMT = "%H:%M:%S"

ROOT_DIR = Path(__file__).resolve().parents[1]
UI_STATIC_DIR = ROOT_DIR / "ui" / "static"

# open.er-api.com (no key required): https://open.er-api.com/v6/latest/USD
EXCHANGE_API_BASE = os.getenv("EXCHANGE_API_BASE", "https://open.er-api.com/v6").rstrip("/")
EXCHANGE_API_TIMEOUT_SEC = float(os.getenv("EXCHANGE_API_TIMEOUT_SEC", "10"))

DEFAULT_AMOUNT = "100"
DEFAULT_FROM_CURRENCY = "USD"
DEFAULT_TO_CURRENCY = "EUR"

EXAMPLE_QUERIES = [
    "Convert 10000 Indian Rupees to US Dollars",
    "How much is 200 USD in INR?",
    "Exchange 50 EUR to GBP",
    "What is the current exchange rate for USD to EUR?",
]
