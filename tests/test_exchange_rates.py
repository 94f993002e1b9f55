"""Tests for the rate source client."""

import httpx
import pytest

from services.exchange.exchange_rates import convert_currency, fetch_rate


@pytest.mark.asyncio
async def test_fetch_rate_requests_base_and_returns_target() -> None:
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.path)
        return httpx.Response(200, json={"rates": {"EUR": 0.92}})

    rate = await fetch_rate("usd", "eur", transport=httpx.MockTransport(handler))

    assert rate == 0.92
    assert seen[0].endswith("/latest/USD")


@pytest.mark.asyncio
async def test_fetch_rate_missing_target_returns_none(rates_transport) -> None:
    assert await fetch_rate("USD", "BRL", transport=rates_transport({"EUR": 0.92})) is None


@pytest.mark.asyncio
async def test_fetch_rate_raises_on_http_error(rates_transport) -> None:
    with pytest.raises(httpx.HTTPStatusError):
        await fetch_rate("USD", "EUR", transport=rates_transport({}, status_code=503))


@pytest.mark.asyncio
async def test_convert_currency_multiplies(eur_transport: httpx.MockTransport) -> None:
    data = await convert_currency(40.0, "usd", "eur", transport=eur_transport)

    assert data == {"base": "USD", "target": "EUR", "rate": 0.5, "amount": 40.0, "converted": 20.0}


@pytest.mark.asyncio
async def test_convert_currency_without_rate(eur_transport: httpx.MockTransport) -> None:
    data = await convert_currency(40.0, "USD", "MXN", transport=eur_transport)

    assert data["rate"] is None
    assert data["converted"] is None


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload, expected",
    [
        ([], None),
        ({"rates": None}, None),
        ({"rates": {"EUR": [0.5]}}, None),
        ({"rates": {"EUR": True}}, None),
        ({"rates": {"EUR": 0}}, None),
        ({"rates": {"EUR": "0.5"}}, 0.5),
    ],
)
async def test_fetch_rate_tolerates_unexpected_payloads(payload, expected) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=payload)

    assert await fetch_rate("USD", "EUR", transport=httpx.MockTransport(handler)) == expected
