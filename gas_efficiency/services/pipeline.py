# gas_efficiency/services/pipeline.py
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime

import httpx

from gas_efficiency.config.settings import Settings, get_settings
from gas_efficiency.models.coin import ResultRow
from gas_efficiency.services.composer import compose_results
from gas_efficiency.services.errors import ComparisonFailure
from gas_efficiency.services.gas_prices import fetch_gas_prices
from gas_efficiency.services.presentation import ComparisonView, render_table
from gas_efficiency.services.swap_returns import fetch_swap_returns
from gas_efficiency.utils.time import utcnow

logger = logging.getLogger("gas_efficiency.pipeline")


@dataclass(frozen=True)
class ComparisonError:
    stage: str
    code: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"stage": self.stage, "code": self.code, "message": self.message}


@dataclass
class ComparisonOutcome:
    offer_amount: int
    benchmark_denom: str
    view: ComparisonView = field(default_factory=ComparisonView)
    rows: list[ResultRow] = field(default_factory=list)
    error: ComparisonError | None = None
    finished_at: datetime | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def create_client(settings: Settings) -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=settings.HTTP_TIMEOUT_SECONDS)


async def _execute(
    outcome: ComparisonOutcome,
    settings: Settings,
    client: httpx.AsyncClient,
) -> None:
    view = outcome.view

    view.append_status("querying gas prices... ")
    gas_prices = await fetch_gas_prices(client, settings.GAS_PRICES_URL)
    view.append_status("done!", line_break=True)

    # the swap query is built from the price endpoint's denoms, so this must wait
    view.append_status("querying exchange rates... ")
    denoms = [coin.denom for coin in gas_prices]
    swap_returns = await fetch_swap_returns(
        client,
        settings.SWAP_QUERY_URL,
        outcome.offer_amount,
        denoms,
        settings.BASE_DENOM,
    )
    view.append_status("done!", line_break=True)

    view.append_status("computing results... ")
    rows = compose_results(denoms, gas_prices, swap_returns, settings.BENCHMARK_DENOM)
    view.append_status("done!", line_break=True)

    view.append_status("generating table... ")
    view.replace_table(render_table(rows))
    view.append_status("done!", line_break=True)

    outcome.rows = rows


async def run_comparison(
    offer_amount: int,
    *,
    settings: Settings | None = None,
    client: httpx.AsyncClient | None = None,
) -> ComparisonOutcome:
    """
    Run prices -> swap returns -> composition -> table for one offer amount.

    Stops at the first failing stage and reports it on the outcome instead of
    raising. Status lines written before the failure are kept; nothing after
    it is guessed or partially rendered.
    """
    settings = settings or get_settings()
    outcome = ComparisonOutcome(offer_amount=offer_amount, benchmark_denom=settings.BENCHMARK_DENOM)

    t0 = time.time()
    logger.info("comparison started | offer=%s%s", offer_amount, settings.BASE_DENOM)

    try:
        if client is None:
            async with create_client(settings) as owned:
                await _execute(outcome, settings, owned)
        else:
            await _execute(outcome, settings, client)
    except ComparisonFailure as err:
        outcome.error = ComparisonError(stage=err.stage, code=err.code, message=err.message)
        outcome.view.append_status("", line_break=True)
        outcome.view.append_status(f"failed: {err.message}", line_break=True)
        logger.warning(
            "comparison failed | stage=%s | code=%s | %s | %dms",
            err.stage,
            err.code,
            err.message,
            int((time.time() - t0) * 1000),
        )
    else:
        logger.info(
            "comparison done | rows=%s | %dms",
            len(outcome.rows),
            int((time.time() - t0) * 1000),
        )

    outcome.finished_at = utcnow()
    return outcome
