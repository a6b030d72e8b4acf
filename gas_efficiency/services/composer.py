from __future__ import annotations

import math
from typing import Iterable, Sequence

from gas_efficiency.models.coin import Coin, ResultRow
from gas_efficiency.services.errors import (
    AmountOutOfRangeError,
    MissingBenchmarkError,
    MissingGasPriceError,
    MissingSwapReturnError,
)


BENCHMARK_DENOM = "uusd"


def _find_amount(coins: Iterable[Coin], denom: str) -> float | None:
    for coin in coins:
        if coin.denom == denom:
            return coin.amount
    return None


def _missing(amount: float | None) -> bool:
    # NaN is truthy but is no more usable than an absent entry
    return not amount or (isinstance(amount, float) and math.isnan(amount))


def _gas_units(denom: str, swap_return: float, gas_price: float) -> int:
    try:
        return math.floor(swap_return / gas_price)
    except (OverflowError, ValueError) as exc:
        raise AmountOutOfRangeError(denom) from exc


def _efficiency(denom: str, gas_units: int, benchmark_units: int) -> float:
    try:
        return gas_units / benchmark_units - 1
    except OverflowError as exc:
        raise AmountOutOfRangeError(denom) from exc


def compose_results(
    denoms: Sequence[str],
    gas_prices: Sequence[Coin],
    swap_returns: Sequence[Coin],
    benchmark_denom: str = BENCHMARK_DENOM,
) -> list[ResultRow]:
    """
    Join prices and swap returns by denom, rank by purchasable gas units and
    score each row against the benchmark denom.

    Zero and NaN count as missing: such a gas price, swap return or
    benchmark gas unit count aborts the whole run. Amounts too large for float
    arithmetic abort it as well.
    """
    units: list[tuple[str, int, float, int]] = []
    for denom in denoms:
        gas_price = _find_amount(gas_prices, denom)
        if _missing(gas_price):
            raise MissingGasPriceError(denom)

        swap_return = _find_amount(swap_returns, denom)
        if _missing(swap_return):
            raise MissingSwapReturnError(denom)

        units.append((denom, swap_return, gas_price, _gas_units(denom, swap_return, gas_price)))

    # sorted() is stable with reverse=True, so ties keep encounter order
    units = sorted(units, key=lambda item: item[3], reverse=True)

    benchmark_units = next((u[3] for u in units if u[0] == benchmark_denom), None)
    if not benchmark_units:
        raise MissingBenchmarkError(benchmark_denom)

    return [
        ResultRow(
            denom=denom,
            amount=amount,
            gas_price=gas_price,
            gas_units=gas_units,
            efficiency=_efficiency(denom, gas_units, benchmark_units),
        )
        for denom, amount, gas_price, gas_units in units
    ]
