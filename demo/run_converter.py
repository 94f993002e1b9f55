import asyncio
import sys
from pathlib import Path

from dotenv import load_dotenv

# Demo script for the conversion flow.
# Usage: python -m demo.run_converter "Convert 100 USD to EUR"
# Optional: EXCHANGE_API_BASE to point at another open.er-api compatible host.

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

load_dotenv(dotenv_path=ROOT_DIR / ".env")

from services.exchange.converter import ConversionError, convert_query

DEFAULT_QUERY = "Convert 100 USD to EUR"


async def main(query: str) -> int:
    try:
        report = await convert_query(query)
    except ConversionError as exc:
        print(f"{exc.title}: {exc.description}", file=sys.stderr)
        return 1
    print(report.message)
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main(" ".join(sys.argv[1:]) or DEFAULT_QUERY)))
