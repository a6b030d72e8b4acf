"""
Swap simulation against the Mantle GraphQL endpoint.

All target denominations are batched into one query document, one aliased
`MarketSwap` field per denomination, so a single POST prices every swap.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Sequence

import httpx

from gas_efficiency.models.coin import Coin
from gas_efficiency.services.errors import UpstreamError


logger = logging.getLogger("gas_efficiency.swap_returns")

STAGE = "swap_returns"

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def _swap_field(denom: str, offer_amount: int, base_denom: str) -> str:
    return (
        f'  {denom}: MarketSwap(OfferCoin: "{offer_amount}{base_denom}", AskDenom: "{denom}") {{\n'
        "    Result {\n"
        "      Amount\n"
        "    }\n"
        "  }"
    )


def build_swap_query(offer_amount: int, denoms: Sequence[str], base_denom: str = "uluna") -> str:
    fields = [
        _swap_field(denom, offer_amount, base_denom)
        for denom in denoms
        if denom != base_denom
    ]
    return "query {\n" + "\n".join(fields) + "\n}\n"


def parse_amount(value: Any) -> int:
    """
    Integer part of a decimal amount string ("123.9" -> 123).

    Only the leading integer is read, the same way the amount strings were
    always interpreted; anything without leading digits is rejected.
    """
    if isinstance(value, int):
        return value
    match = _LEADING_INT.match(str(value))
    if not match:
        raise ValueError(f"not an integer amount: {value!r}")
    return int(match.group(1))


def parse_swap_returns(
    payload: Any,
    offer_amount: int,
    denoms: Sequence[str],
    base_denom: str = "uluna",
) -> list[Coin]:
    try:
        data = payload["data"]
    except (KeyError, TypeError) as exc:
        errors = payload.get("errors") if isinstance(payload, dict) else None
        raise UpstreamError(
            f"swap response has no data: {errors!r}" if errors else "swap response has no data",
            stage=STAGE,
            code="bad_response",
        ) from exc

    coins: list[Coin] = []
    for denom in denoms:
        if denom == base_denom:
            coins.append(Coin(denom=denom, amount=offer_amount))
            continue
        try:
            amount = parse_amount(data[denom]["Result"]["Amount"])
        except (KeyError, TypeError, ValueError) as exc:
            raise UpstreamError(
                f"swap response is missing an amount for {denom}",
                stage=STAGE,
                code="bad_response",
            ) from exc
        coins.append(Coin(denom=denom, amount=amount))
    return coins


async def fetch_swap_returns(
    client: httpx.AsyncClient,
    url: str,
    offer_amount: int,
    denoms: Sequence[str],
    base_denom: str = "uluna",
) -> list[Coin]:
    """Return one coin per entry of `denoms`, in the same order."""

    query = build_swap_query(offer_amount, denoms, base_denom)

    try:
        response = await client.post(url, json={"query": query})
        response.raise_for_status()
        payload = response.json()
    except httpx.HTTPError as exc:
        raise UpstreamError("Unable to reach the swap simulation endpoint", stage=STAGE) from exc
    except ValueError as exc:
        raise UpstreamError(
            "swap response is not valid JSON",
            stage=STAGE,
            code="bad_response",
        ) from exc

    coins = parse_swap_returns(payload, offer_amount, denoms, base_denom)
    logger.debug("swap returns | %s", coins)
    return coins
