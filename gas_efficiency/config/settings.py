# gas_efficiency/config/settings.py
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


DEFAULT_GAS_PRICES_URL = "https://fcd.terra.dev/v1/txs/gas_prices"
DEFAULT_SWAP_QUERY_URL = "https://mantle.terra.dev/"


def parse_str(value: str | None, default: str) -> str:
    if value is None or value.strip() == "":
        return default
    return value.strip()


def parse_timeout(value: str | None, default: Optional[float]) -> Optional[float]:
    """
    Supports:
      - unset -> default
      - "" or "0" -> no timeout (None)
      - "12.5" -> 12.5 seconds
    """
    if value is None:
        return default

    v = value.strip()
    if v == "":
        return None

    seconds = float(v)
    if seconds < 0:
        raise ValueError(f"Bad HTTP_TIMEOUT_SECONDS: {value}")
    return seconds or None


@dataclass(frozen=True)
class Settings:
    GAS_PRICES_URL: str
    SWAP_QUERY_URL: str
    BASE_DENOM: str
    BENCHMARK_DENOM: str
    HTTP_TIMEOUT_SECONDS: Optional[float]
    LOG_LEVEL: str

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            GAS_PRICES_URL=parse_str(os.getenv("GAS_PRICES_URL"), DEFAULT_GAS_PRICES_URL),
            SWAP_QUERY_URL=parse_str(os.getenv("SWAP_QUERY_URL"), DEFAULT_SWAP_QUERY_URL),
            BASE_DENOM=parse_str(os.getenv("BASE_DENOM"), "uluna"),
            BENCHMARK_DENOM=parse_str(os.getenv("BENCHMARK_DENOM"), "uusd"),
            HTTP_TIMEOUT_SECONDS=parse_timeout(os.getenv("HTTP_TIMEOUT_SECONDS"), 10.0),
            LOG_LEVEL=parse_str(os.getenv("LOG_LEVEL"), "INFO").upper(),
        )


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings
