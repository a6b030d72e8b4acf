from __future__ import annotations

import json

import httpx
import pytest

from gas_efficiency.config.settings import Settings

GAS_URL = "https://fcd.test/v1/txs/gas_prices"
SWAP_URL = "https://mantle.test/"


def _default_prices() -> dict[str, str]:
    return {"uluna": "0.015", "uusd": "0.15", "ukrw": "178.05"}


def _default_returns() -> dict[str, str]:
    return {"uusd": "1500000", "ukrw": "890250000"}


class FakeUpstream:
    """In-memory stand-in for the gas price and swap simulation endpoints."""

    def __init__(self):
        self.prices: dict[str, str] = _default_prices()
        self.returns: dict[str, str] = _default_returns()
        self.gas_status = 200
        self.swap_status = 200
        self.calls: list[str] = []
        self.queries: list[str] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        if url == GAS_URL:
            self.calls.append("gas_prices")
            return httpx.Response(self.gas_status, json=self.prices)
        if url == SWAP_URL:
            self.calls.append("swap_returns")
            query = json.loads(request.content)["query"]
            self.queries.append(query)
            data = {
                denom: {"Result": {"Amount": amount}}
                for denom, amount in self.returns.items()
                if f"{denom}: MarketSwap" in query
            }
            return httpx.Response(self.swap_status, json={"data": data})
        return httpx.Response(404)

    def client(self, *args, **kwargs) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture()
def app_settings() -> Settings:
    return Settings(
        GAS_PRICES_URL=GAS_URL,
        SWAP_QUERY_URL=SWAP_URL,
        BASE_DENOM="uluna",
        BENCHMARK_DENOM="uusd",
        HTTP_TIMEOUT_SECONDS=5.0,
        LOG_LEVEL="DEBUG",
    )


@pytest.fixture()
def upstream() -> FakeUpstream:
    return FakeUpstream()
