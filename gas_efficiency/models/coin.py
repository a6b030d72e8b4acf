"""Plain value types shared by the fetchers, the composer and the renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Coin:
    """
    A denomination paired with a quantity.

    The gas price fetcher stores a price (fee units per base unit) in `amount`;
    the swap return fetcher stores a receivable quantity of the target token.
    """

    denom: str
    amount: float


@dataclass(frozen=True)
class ResultRow:
    denom: str
    amount: int
    gas_price: float
    gas_units: int
    efficiency: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "denom": self.denom,
            "amount": self.amount,
            "gas_price": self.gas_price,
            "gas_units": self.gas_units,
            "efficiency": self.efficiency,
        }
