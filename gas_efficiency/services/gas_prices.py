"""Helpers for reading current gas prices from the FCD endpoint."""

from __future__ import annotations

import logging
import math
from typing import Any

import httpx

from gas_efficiency.models.coin import Coin
from gas_efficiency.services.errors import UpstreamError


logger = logging.getLogger("gas_efficiency.gas_prices")

STAGE = "gas_prices"


def parse_gas_prices(payload: Any) -> list[Coin]:
    """Turn a `{denom: "0.15"}` mapping into coins, keeping the mapping's order."""

    if not isinstance(payload, dict):
        raise UpstreamError(
            "gas price response is not a JSON object",
            stage=STAGE,
            code="bad_response",
        )

    coins: list[Coin] = []
    for denom, amount in payload.items():
        try:
            price = float(amount)
        except (TypeError, ValueError) as exc:
            raise UpstreamError(
                f"gas price for {denom} is not a decimal: {amount!r}",
                stage=STAGE,
                code="bad_response",
            ) from exc
        # float() also accepts "NaN" and "inf"
        if not math.isfinite(price):
            raise UpstreamError(
                f"gas price for {denom} is not a finite decimal: {amount!r}",
                stage=STAGE,
                code="bad_response",
            )
        coins.append(Coin(denom=str(denom), amount=price))
    return coins


async def fetch_gas_prices(client: httpx.AsyncClient, url: str) -> list[Coin]:
    try:
        response = await client.get(url)
        response.raise_for_status()
        payload = response.json()
    except httpx.HTTPError as exc:
        raise UpstreamError("Unable to reach the gas price endpoint", stage=STAGE) from exc
    except ValueError as exc:
        raise UpstreamError(
            "gas price response is not valid JSON",
            stage=STAGE,
            code="bad_response",
        ) from exc

    coins = parse_gas_prices(payload)
    logger.debug("gas prices | %s", coins)
    return coins
