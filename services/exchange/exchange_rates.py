from typing import Any, Dict, Optional

import httpx

from config.settings import EXCHANGE_API_BASE, EXCHANGE_API_TIMEOUT_SEC


async def fetch_rate(
    base: str,
    target: str,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Optional[float]:
    base = base.upper()
    target = target.upper()
    url = f"{EXCHANGE_API_BASE}/latest/{base}"

    async with httpx.AsyncClient(timeout=EXCHANGE_API_TIMEOUT_SEC, transport=transport) as client:
        response = await client.get(url)
        response.raise_for_status()
        payload = response.json()

    # Anything other than {"rates": {CODE: number}} counts as no rate.
    rates = payload.get("rates") if isinstance(payload, dict) else None
    if not isinstance(rates, dict):
        return None
    rate = rates.get(target)
    if isinstance(rate, bool) or not isinstance(rate, (int, float, str)):
        return None
    try:
        rate = float(rate)
    except ValueError:
        return None
    return rate or None


async def convert_currency(
    amount: Optional[float],
    base: str,
    target: str,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Dict[str, Any]:
    rate = await fetch_rate(base, target, transport=transport)
    converted = None
    if rate is not None and amount is not None:
        converted = float(amount) * rate

    return {
        "base": base.upper(),
        "target": target.upper(),
        "rate": rate,
        "amount": amount,
        "converted": converted,
    }
