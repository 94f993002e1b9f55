"""Pytest configuration and shared fixtures."""

from typing import Any, Callable, Dict

import httpx
import pytest


def _rates_transport(rates: Dict[str, Any], status_code: int = 200) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        base = request.url.path.rsplit("/", 1)[-1]
        return httpx.Response(status_code, json={"result": "success", "base_code": base, "rates": rates})

    return httpx.MockTransport(handler)


@pytest.fixture
def rates_transport() -> Callable[..., httpx.MockTransport]:
    """Factory for transports answering with an open.er-api style payload.

    Returns:
        Callable taking the rates mapping and an optional status code
    """
    return _rates_transport


@pytest.fixture
def eur_transport() -> httpx.MockTransport:
    return _rates_transport({"USD": 1.0, "EUR": 0.5, "INR": 83.0})
