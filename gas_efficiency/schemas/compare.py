from __future__ import annotations

import math
import re
from typing import Any, List

from pydantic import BaseModel, Field, field_validator

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


class CompareRequest(BaseModel):
    """Offer amount in the base token's smallest unit (e.g. uluna)."""

    offer_amount: int = Field(..., description="Amount of the base token to swap, smallest unit")

    @field_validator("offer_amount", mode="before")
    @classmethod
    def _leading_integer(cls, value: Any) -> Any:
        # "1.5" -> 1, 2.9 -> 2; input without leading digits is left for int parsing to reject
        if isinstance(value, float) and math.isfinite(value):
            return int(value)
        if isinstance(value, str):
            match = _LEADING_INT.match(value)
            if match:
                return int(match.group(1))
        return value


class ResultRowOut(BaseModel):
    denom: str
    amount: int
    gas_price: float
    gas_units: int
    efficiency: float


class CompareResponse(BaseModel):
    status: str = "ok"
    offer_amount: int
    benchmark_denom: str
    status_html: str
    table_html: str
    rows: List[ResultRowOut]
    finished_at: str
