# gas_efficiency/api/health.py
from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter

from gas_efficiency.config.settings import get_settings
from gas_efficiency.utils.time import iso_z

router = APIRouter(tags=["health"])

APP_STARTED_AT = time.time()


def _now_meta() -> Dict[str, Any]:
    now_ts = time.time()
    now_dt = datetime.fromtimestamp(now_ts, tz=timezone.utc)
    return {
        "now_unix": int(now_ts),
        "now_iso": iso_z(now_dt),
        "uptime_s": int(now_ts - APP_STARTED_AT),
    }


@router.get("/live")
async def live():
    return {"status": "ok"}


@router.get("/health")
async def health():
    # upstreams are only contacted by /compare; no probing here
    settings = get_settings()
    return {
        "status": "ok",
        **_now_meta(),
        "upstreams": {
            "gas_prices": settings.GAS_PRICES_URL,
            "swap_query": settings.SWAP_QUERY_URL,
        },
        "base_denom": settings.BASE_DENOM,
        "benchmark_denom": settings.BENCHMARK_DENOM,
    }
